"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-08
@Docs: Package exports for record_validate.
record_validate 包导出定义。
"""

from record_validate.accessor import FieldAssign, FieldLookup, get_field_value, has_field, set_field_value
from record_validate.config import ValidateConfig, resolve_config
from record_validate.engine import Validator, check, new, validate
from record_validate.exceptions import RecordValidateError, RuleConfigError, SinkWriteError
from record_validate.patterns import DEFAULT_PATTERNS, Patterns
from record_validate.rules import (
    Email,
    Fields,
    Max,
    Message,
    Min,
    Required,
    Rule,
    RuleBuilder,
    RuleKind,
    Url,
    rules,
)
from record_validate.schemas import FieldErrorItem, ValidationResult
from record_validate.sinks import write_into

__all__ = [
    "Rule",
    "RuleKind",
    "RuleBuilder",
    "Required",
    "Email",
    "Url",
    "Min",
    "Max",
    "Message",
    "rules",
    "Fields",
    "check",
    "validate",
    "Validator",
    "new",
    "ValidationResult",
    "FieldErrorItem",
    "write_into",
    "get_field_value",
    "set_field_value",
    "has_field",
    "FieldLookup",
    "FieldAssign",
    "ValidateConfig",
    "resolve_config",
    "RecordValidateError",
    "RuleConfigError",
    "SinkWriteError",
    "Patterns",
    "DEFAULT_PATTERNS",
]
