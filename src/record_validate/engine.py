"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: engine.py
@DateTime: 2026-02-08
@Docs: Rule evaluation engine.
规则求值引擎。

Two entry points share one engine:
两个入口共享同一引擎：
- validate(record, fields) -> (messages, ok)
- new(record, fields).validate(sink) -> ok

Examples:
        >>> from dataclasses import dataclass
        >>> from record_validate import Required, rules, validate
        >>> @dataclass
        ... class User:
        ...     Name: str
        >>> validate(User(Name=""), {"Name": rules(Required)})
        ({'Name': 'Name is a required field'}, False)
"""

import logging
from typing import Any

from record_validate.accessor import get_field_value, is_public
from record_validate.config import ValidateConfig, resolve_config
from record_validate.patterns import DEFAULT_PATTERNS, Patterns
from record_validate.rules import Email, Fields, Max, Message, Min, Required, Rule, Url
from record_validate.schemas import ValidationResult
from record_validate.sinks import write_into
from record_validate.validation_core import ErrorCollector, FieldContext

logger = logging.getLogger(__name__)


def _size(value: Any) -> int | None:
    """Return the comparable size of a value (str length or int value).
    返回值的可比较大小（字符串长度或整数值）。
    """
    if isinstance(value, str):
        return len(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def check(rule: Rule, value: Any, *, patterns: Patterns = DEFAULT_PATTERNS) -> bool:
    """
    Evaluate one rule against a value.
    对一个值求值单条规则。

    Values of an unexpected type fail the rule; this function never raises
    for any value.
    类型不符的值视为规则失败；本函数对任何值都不会抛出异常。

    Args:
        rule: Rule to evaluate.
            要求值的规则。
        value: Field value (None when absent).
            字段值（缺失时为 None）。
        patterns: Compiled format patterns.
            已编译的格式正则。

    Returns:
        bool: True when the value satisfies the rule.
        bool: 值满足规则时为 True。
    """
    match rule:
        case Message():
            return True
        case Required():
            return isinstance(value, str) and len(value) > 0
        case Email():
            return isinstance(value, str) and patterns.email.fullmatch(value) is not None
        case Url():
            return isinstance(value, str) and patterns.url.fullmatch(value) is not None
        case Min(n=n):
            size = _size(value)
            return size is not None and size >= n
        case Max(n=n):
            size = _size(value)
            return size is not None and size <= n
        case _:
            return False


class Validator:
    """
    Validator bound to one record and one field spec.
    绑定单条记录与字段规则的校验器。

    Notes:
        Field spec iteration order carries no meaning; only the order of
        rules within a field decides message precedence.
        字段规则的遍历顺序无语义；仅字段内规则顺序决定消息优先级。
    """

    def __init__(
        self,
        record: Any,
        fields: Fields,
        *,
        config: ValidateConfig | None = None,
        patterns: Patterns = DEFAULT_PATTERNS,
    ) -> None:
        """Initialize the validator.
        初始化校验器。

        Args:
            record: Record to validate.
                待校验记录。
            fields: Field name -> ordered rules.
                字段名 -> 有序规则列表。
            config: Validation configuration (resolved from env when None).
                校验配置（为 None 时从环境变量解析）。
            patterns: Compiled format patterns.
                已编译的格式正则。
        """
        self.record = record
        self.fields = fields
        self.config = config if config is not None else resolve_config()
        self.patterns = patterns

    def run(self) -> ValidationResult:
        """
        Evaluate every field/rule pair.
        对每个字段/规则对求值。

        Returns:
            ValidationResult: Finished result.
            ValidationResult: 完整的校验结果。
        """
        collector = ErrorCollector()
        for name, field_rules in self.fields.items():
            if self.config.skip_private and not is_public(name):
                logger.debug("Skipping non-public field %r", name)
                continue
            value = get_field_value(self.record, name, skip_private=self.config.skip_private)
            ctx = FieldContext.open(collector, name, value, field_rules)
            for rule in field_rules:
                if isinstance(rule, Message):
                    continue
                if not check(rule, value, patterns=self.patterns):
                    ctx.fail(rule)
        result = collector.result()
        logger.debug(
            "Validated %s: %d field(s), %d error(s)", type(self.record).__name__, len(self.fields), len(result.errors)
        )
        return result

    def validate(self, sink: Any | None = None) -> bool:
        """
        Run and write messages into a sink.
        执行校验并将消息写入接收器。

        Args:
            sink: Mapping, record, or None (no-op).
                映射、记录或 None（不写入）。

        Returns:
            bool: True iff no rule failed.
            bool: 当且仅当没有规则失败时为 True。

        Raises:
            SinkWriteError: The sink cannot receive a failing field (strict mode).
                接收器无法接收失败字段（严格模式）。
        """
        result = self.run()
        write_into(
            sink, result.messages(), strict=self.config.strict_sink, skip_private=self.config.skip_private
        )
        return result.ok


def new(record: Any, fields: Fields, *, config: ValidateConfig | None = None) -> Validator:
    """
    Create a validator for a record.
    为记录创建校验器。

    Examples:
        >>> errs: dict[str, str] = {}
        >>> new({"Name": "foo"}, {"Name": [Required()]}).validate(errs)
        True
    """
    return Validator(record, fields, config=config)


def validate(record: Any, fields: Fields, *, config: ValidateConfig | None = None) -> tuple[dict[str, str], bool]:
    """
    Validate a record and return its messages.
    校验记录并返回消息。

    Args:
        record: Record to validate.
            待校验记录。
        fields: Field name -> ordered rules.
            字段名 -> 有序规则列表。
        config: Validation configuration.
            校验配置。

    Returns:
        tuple[dict[str, str], bool]: Field -> message map and overall flag.
        tuple[dict[str, str], bool]: 字段 -> 消息映射与总体结果。
    """
    result = Validator(record, fields, config=config).run()
    return result.messages(), result.ok
