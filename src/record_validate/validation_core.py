"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validation_core.py
@DateTime: 2026-02-08
@Docs: Core error collection primitives.
核心错误收集原语。

It only provides:
仅提供如下内容：
- ErrorCollector: keep at most one error item per field.
    ErrorCollector：每个字段至多保留一个错误项。
- FieldContext: per-field helper holding the value and override message.
    FieldContext：字段级助手，持有字段值与覆盖消息。
"""

from dataclasses import dataclass, field
from typing import Any

from record_validate.rules import Message, Rule, default_message
from record_validate.schemas import FieldErrorItem, ValidationResult


@dataclass(slots=True)
class ErrorCollector:
    """Collect per-field errors; later errors replace earlier ones.
    收集字段错误；后写入的错误覆盖先前的错误。
    """

    errors: dict[str, FieldErrorItem] = field(default_factory=dict)
    ok: bool = True

    def add(self, *, field: str, message: str, rule: Rule) -> None:
        """Add an error item, replacing any earlier item for the field.
        添加错误项，覆盖该字段先前的错误项。

        Args:
            field: Field name.
                字段名。
            message: Error message.
                错误消息。
            rule: Failing rule.
                失败的规则。
        """
        self.ok = False
        self.errors[field] = FieldErrorItem(field=field, message=message, rule=rule.kind)

    def result(self) -> ValidationResult:
        """Freeze the collected errors into a result.
        将收集的错误固化为结果。
        """
        return ValidationResult(ok=self.ok, errors=list(self.errors.values()))


@dataclass(slots=True)
class FieldContext:
    """Per-field helper to record failures with message precedence.
    字段级助手，按消息优先级记录失败。

    The override is the text of the last Message rule in the field's list,
    wherever it appears.
    覆盖消息取字段规则列表中最后一个 Message 规则的文本，与其位置无关。
    """

    collector: ErrorCollector
    field: str
    value: Any
    override: str | None = None

    @classmethod
    def open(cls, collector: ErrorCollector, field: str, value: Any, rules: list[Rule]) -> "FieldContext":
        """Create a context and resolve the field's override message.
        创建上下文并解析字段的覆盖消息。
        """
        override = None
        for rule in rules:
            if isinstance(rule, Message):
                override = rule.text
        return cls(collector=collector, field=field, value=value, override=override)

    def fail(self, rule: Rule) -> None:
        """Record a failing rule.
        记录一个失败的规则。

        Args:
            rule: Failing rule.
                失败的规则。
        """
        message = self.override if self.override is not None else default_message(rule, self.field)
        self.collector.add(field=self.field, message=message, rule=rule)
