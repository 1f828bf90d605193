"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: sinks.py
@DateTime: 2026-02-08
@Docs: Error sink adapters.
错误接收器适配器。

A sink receives the field -> message map of a finished run:
接收器接收一次完整校验的字段 -> 消息映射：
- None: writes are skipped.
    None：跳过写入。
- MutableMapping: entries are set per field.
    可变映射：逐字段写入条目。
- record: named fields are assigned via the field accessor.
    记录：通过字段访问器为同名字段赋值。
"""

import logging
from collections.abc import Mapping
from typing import Any

from record_validate.accessor import set_field_value
from record_validate.exceptions import SinkWriteError

logger = logging.getLogger(__name__)


def write_into(
    sink: Any | None, messages: Mapping[str, str], *, strict: bool = True, skip_private: bool = True
) -> None:
    """
    Write messages into a sink.
    将消息写入接收器。

    Every write is attempted before failing, so one error lists all
    unwritable fields.
    失败前会尝试全部写入，单个异常列出所有不可写字段。

    Args:
        sink: Mapping, record, or None.
            映射、记录或 None。
        messages: Field -> message map.
            字段 -> 消息映射。
        strict: Raise SinkWriteError on unwritable fields instead of logging.
            遇到不可写字段时抛出 SinkWriteError，而非仅记录日志。
        skip_private: Reject names starting with "_" on attribute-based sinks.
            对基于属性的接收器拒绝以 "_" 开头的名称。

    Raises:
        SinkWriteError: Some fields could not be written (strict mode).
            存在无法写入的字段（严格模式）。
    """
    if sink is None:
        return
    failed: list[str] = []
    for name, message in messages.items():
        try:
            set_field_value(sink, name, message, skip_private=skip_private)
        except SinkWriteError:
            failed.append(name)
    if not failed:
        return
    if strict:
        raise SinkWriteError(
            message=f"Sink {type(sink).__name__} cannot receive fields: {', '.join(failed)} "
            f"/ 接收器 {type(sink).__name__} 无法接收字段：{', '.join(failed)}",
            details={"fields": failed, "sink": type(sink).__name__},
        )
    logger.warning("Skipped sink fields %s on %s", failed, type(sink).__name__)
