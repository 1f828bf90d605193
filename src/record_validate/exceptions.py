"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-02-08
@Docs: Record validation error hierarchy.
记录校验异常体系。

Per-field validation failures are data, not exceptions. The errors below
only signal programming mistakes: malformed rules and unwritable sinks.
逐字段校验失败属于数据而非异常；以下异常仅表示编程错误：规则非法或错误接收器不可写。
"""

from typing import Any


class RecordValidateError(Exception):
    """
    Record validation errors.
    记录校验异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "record_validate_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code


class RuleConfigError(RecordValidateError):
    """
    Rule configuration error.
    规则配置错误。

    Raised when a rule is built with a payload of the wrong type.
    规则负载类型错误时抛出。
    """

    def __init__(self, *, message: str, details: Any | None = None, error_code: str = "rule_config_error") -> None:
        super().__init__(message=message, details=details, error_code=error_code)


class SinkWriteError(RecordValidateError):
    """
    Sink write error.
    错误接收器写入错误。

    Raised when a record sink lacks a field that should receive a message.
    记录型接收器缺少应接收消息的字段时抛出。
    """

    def __init__(self, *, message: str, details: Any | None = None, error_code: str = "sink_write_error") -> None:
        super().__init__(message=message, details=details, error_code=error_code)
