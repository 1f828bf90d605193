"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-02-08
@Docs: Validation configuration helpers.
校验配置助手。

Configuration helpers for record validation.
记录校验配置助手。

Configurable via function parameters or environment variables.
支持通过函数参数或环境变量进行配置。

Environment variables / 环境变量:
        - RECORD_VALIDATE_STRICT_SINK:
            Raise when a record sink lacks a target field (default: true).
            记录型接收器缺少目标字段时抛出异常（默认 true）。
        - RECORD_VALIDATE_SKIP_PRIVATE:
            Skip field names starting with "_" (default: true).
            跳过以 "_" 开头的字段名（默认 true）。

Examples:
        Use defaults / 使用默认值:

        >>> from record_validate.config import resolve_config
        >>> cfg = resolve_config()
        >>> cfg.strict_sink
        True

        Lenient sink / 宽松接收器:

        >>> resolve_config(strict_sink=False).strict_sink
        False
"""

import os
from dataclasses import dataclass

from record_validate.exceptions import RecordValidateError

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class ValidateConfig:
    """Record validation configuration.

    记录校验配置。

    Attributes:
        strict_sink: Raise SinkWriteError when a sink field is missing.
            接收器字段缺失时抛出 SinkWriteError。
        skip_private: Skip non-public field names instead of reading them.
            跳过非公开字段名而不读取。
    """

    strict_sink: bool = True
    skip_private: bool = True


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_bool(name: str, value: str | None) -> bool | None:
    """
    Parse a boolean environment value.
    解析布尔型环境变量值。

    Args:
        name: Environment variable name (for error reporting).
            环境变量名（用于错误提示）。
        value: Raw value.
            原始值。

    Returns:
        bool | None: Parsed flag, or None when unset.
        bool | None: 解析后的开关；未设置时为 None。
    """
    if value is None:
        return None
    key = value.strip().lower()
    if key in _TRUTHY:
        return True
    if key in _FALSY:
        return False
    raise RecordValidateError(
        message=f"Invalid boolean for {name}: {value!r} / {name} 的布尔值无效：{value!r}",
        details={"name": name, "value": value},
        error_code="invalid_config",
    )


def resolve_config(
    *,
    strict_sink: bool | None = None,
    skip_private: bool | None = None,
    env_prefix: str = "RECORD_VALIDATE",
) -> ValidateConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

    Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_STRICT_SINK`, `{env_prefix}_SKIP_PRIVATE`
           环境变量
        3) defaults / 默认值

    Args:
        strict_sink: Raise on missing sink fields.
            接收器字段缺失时是否抛出异常。
        skip_private: Skip non-public field names.
            是否跳过非公开字段名。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 RECORD_VALIDATE）。

    Returns:
        A ValidateConfig instance.
            返回 ValidateConfig 配置实例。

    Raises:
        RecordValidateError: An environment flag is not a boolean.
            环境变量不是合法布尔值。
    """
    strict_name = f"{env_prefix}_STRICT_SINK"
    private_name = f"{env_prefix}_SKIP_PRIVATE"
    if strict_sink is None:
        strict_sink = _parse_bool(strict_name, _env_get(strict_name))
    if skip_private is None:
        skip_private = _parse_bool(private_name, _env_get(private_name))
    return ValidateConfig(
        strict_sink=True if strict_sink is None else strict_sink,
        skip_private=True if skip_private is None else skip_private,
    )
