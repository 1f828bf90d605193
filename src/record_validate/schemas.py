"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schemas.py
@DateTime: 2026-02-08
@Docs: Pydantic schemas for validation results.
校验结果的 Pydantic 模型。
"""

from pydantic import BaseModel, Field

from record_validate.rules import RuleKind


class FieldErrorItem(BaseModel):
    """
    Field error item.
    字段错误项。

    Attributes:
        field: Field name.
        field: 字段名。
        message: Reported message (override or rule default).
        message: 报告的消息（覆盖消息或规则默认消息）。
        rule: Kind of the last failing rule.
        rule: 最后一个失败规则的类型。
    """

    field: str
    message: str
    rule: RuleKind


class ValidationResult(BaseModel):
    """
    Validation result.
    校验结果。

    Attributes:
        ok: True iff no rule failed.
        ok: 当且仅当没有规则失败时为 True。
        errors: At most one error item per field.
        errors: 每个字段至多一个错误项。
    """

    ok: bool = True
    errors: list[FieldErrorItem] = Field(default_factory=list)

    def messages(self) -> dict[str, str]:
        """
        Return the field -> message map.
        返回字段 -> 消息映射。
        """
        return {item.field: item.message for item in self.errors}
