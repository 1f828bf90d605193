"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rules.py
@DateTime: 2026-02-08
@Docs: Rule variants, constructors and the rule-list builder.
规则变体、构造器与规则列表构建器。

Each rule kind is its own frozen dataclass carrying a typed payload. Rules
hold no callables; the engine dispatches on the variant.
每种规则是独立的不可变数据类，携带类型化负载；规则不保存可调用对象，由引擎按变体分派。

Examples:
        >>> from record_validate.rules import Max, Message, Min, Required, rules
        >>> rules(Required, Min(2), Max(20), Message("bad name"))
        [Required(), Min(n=2), Max(n=20), Message(text='bad name')]
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar, TypeAlias

from record_validate.exceptions import RuleConfigError


class RuleKind(StrEnum):
    """
    Rule kind enum.
    规则类型枚举。
    """

    REQUIRED = "required"
    EMAIL = "email"
    URL = "url"
    MIN = "min"
    MAX = "max"
    MESSAGE = "message"


DEFAULT_MESSAGES: dict[RuleKind, str] = {
    RuleKind.REQUIRED: "{field} is a required field",
    RuleKind.EMAIL: "email address is invalid",
    RuleKind.URL: "url is invalid",
    RuleKind.MIN: "{field} should be at least {n} characters long",
    RuleKind.MAX: "{field} should be maximum {n} characters long",
}


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Rule base class.
    规则基类。

    Notes:
        Subclasses set `kind` and declare their payload as dataclass fields.
        子类设置 `kind` 并以数据类字段声明负载。
    """

    kind: ClassVar[RuleKind]

    def describe(self) -> dict[str, Any]:
        """
        Return a plain description of the rule.
        返回规则的简单描述。

        Returns:
            dict[str, Any]: `{"kind": ..., "value": ...}`.
            dict[str, Any]: `{"kind": ..., "value": ...}`。
        """
        return {"kind": str(self.kind), "value": None}


@dataclass(frozen=True, slots=True)
class Required(Rule):
    """Value must be a non-empty string.
    值必须为非空字符串。
    """

    kind: ClassVar[RuleKind] = RuleKind.REQUIRED


@dataclass(frozen=True, slots=True)
class Email(Rule):
    """Value must be a lowercase email address.
    值必须为小写邮箱地址。
    """

    kind: ClassVar[RuleKind] = RuleKind.EMAIL


@dataclass(frozen=True, slots=True)
class Url(Rule):
    """Value must be a lowercase http(s) URL with a dotted host.
    值必须为主机名带点的小写 http(s) URL。
    """

    kind: ClassVar[RuleKind] = RuleKind.URL


def _require_int(kind: RuleKind, n: Any) -> None:
    # bool is an int subclass but never a meaningful bound
    if isinstance(n, bool) or not isinstance(n, int):
        raise RuleConfigError(
            message=f"{kind} bound must be an int, got {type(n).__name__} / {kind} 边界必须为整数",
            details={"kind": str(kind), "value": n},
        )


@dataclass(frozen=True, slots=True)
class Min(Rule):
    """String length or integer value must be >= n.
    字符串长度或整数值必须 >= n。
    """

    kind: ClassVar[RuleKind] = RuleKind.MIN
    n: int

    def __post_init__(self) -> None:
        _require_int(self.kind, self.n)

    def describe(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "value": self.n}


@dataclass(frozen=True, slots=True)
class Max(Rule):
    """String length or integer value must be <= n.
    字符串长度或整数值必须 <= n。
    """

    kind: ClassVar[RuleKind] = RuleKind.MAX
    n: int

    def __post_init__(self) -> None:
        _require_int(self.kind, self.n)

    def describe(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "value": self.n}


@dataclass(frozen=True, slots=True)
class Message(Rule):
    """Override message for the field; never fails on its own.
    字段的覆盖消息；自身从不失败。
    """

    kind: ClassVar[RuleKind] = RuleKind.MESSAGE
    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise RuleConfigError(
                message=f"message text must be a str, got {type(self.text).__name__} / 消息文本必须为字符串",
                details={"kind": str(self.kind), "value": self.text},
            )

    def describe(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "value": self.text}


RuleBuilder: TypeAlias = Callable[[], Rule]
Fields: TypeAlias = dict[str, list[Rule]]


def default_message(rule: Rule, field: str) -> str:
    """
    Format the default message of a rule for a field.
    为字段格式化规则的默认消息。

    Args:
        rule: Failing rule.
            失败的规则。
        field: Field name.
            字段名。

    Returns:
        str: Formatted message.
        str: 格式化后的消息。
    """
    match rule:
        case Min(n=n) | Max(n=n):
            return DEFAULT_MESSAGES[rule.kind].format(field=field, n=n)
        case Message(text=text):
            return text
        case _:
            return DEFAULT_MESSAGES[rule.kind].format(field=field)


def _ensure_known(rule: Rule, builder: Any) -> Rule:
    kind = getattr(rule, "kind", None)
    if isinstance(rule, Message) or (isinstance(kind, str) and kind in DEFAULT_MESSAGES):
        return rule
    raise RuleConfigError(
        message=f"Unknown rule kind {kind!r} on {type(rule).__name__} / 未知规则类型 {kind!r}",
        details={"value": repr(builder), "kind": None if kind is None else str(kind)},
    )


def rules(*builders: Rule | Callable[[], Rule]) -> list[Rule]:
    """
    Build an ordered rule list for one field.
    为单个字段构建有序规则列表。

    Args:
        *builders: Rule instances or zero-argument callables returning one
            (rule classes without payload, such as `Required`, qualify).
            规则实例或返回规则的零参数可调用对象（如 `Required` 这类无负载规则类）。

    Returns:
        list[Rule]: Rules in the given order.
        list[Rule]: 按给定顺序的规则列表。

    Raises:
        RuleConfigError: A builder is not a rule, does not produce one, or
            produces a rule whose kind has no default message.
            构建项不是规则、无法生成规则，或生成的规则类型没有默认消息。
    """
    built: list[Rule] = []
    for b in builders:
        if isinstance(b, Rule):
            built.append(_ensure_known(b, b))
            continue
        if not callable(b):
            raise RuleConfigError(
                message=f"Not a rule or rule builder: {b!r} / 不是规则或规则构建器",
                details={"value": repr(b)},
            )
        try:
            rule = b()
        except TypeError as exc:
            raise RuleConfigError(
                message=f"Rule builder needs arguments: {b!r} / 规则构建器缺少参数",
                details={"value": repr(b), "error": str(exc)},
            ) from exc
        if not isinstance(rule, Rule):
            raise RuleConfigError(
                message=f"Rule builder returned {type(rule).__name__} / 规则构建器未返回规则",
                details={"value": repr(b)},
            )
        built.append(_ensure_known(rule, b))
    return built
