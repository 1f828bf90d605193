"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: accessor.py
@DateTime: 2026-02-08
@Docs: Read and write named fields on arbitrary records.
在任意记录上按名称读写字段。

Record shapes, in lookup order / 支持的记录形态（按查找顺序）:
- FieldLookup / FieldAssign: explicit `get_field` / `set_field` hooks.
    显式的 `get_field` / `set_field` 钩子。
- Mapping / MutableMapping: keys are field names.
    映射：键即字段名。
- pydantic BaseModel: declared model fields.
    pydantic 模型：声明的模型字段。
- dataclass instances: declared dataclass fields.
    数据类实例：声明的数据类字段。
- other objects: public instance attributes, slots and non-callable class attributes.
    其他对象：公开实例属性、slots 以及非可调用类属性。

Names starting with "_" are not public and do not resolve unless
`skip_private` is off.
以 "_" 开头的名称视为非公开，除非关闭 `skip_private`，否则不解析。
"""

import dataclasses
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from record_validate.exceptions import SinkWriteError

logger = logging.getLogger(__name__)


@runtime_checkable
class FieldLookup(Protocol):
    """
    Explicit read hook for records.
    记录的显式读取钩子。
    """

    def get_field(self, name: str) -> Any: ...


@runtime_checkable
class FieldAssign(Protocol):
    """
    Explicit write hook for sink records.
    接收器记录的显式写入钩子。
    """

    def set_field(self, name: str, value: Any) -> None: ...


def is_public(name: str) -> bool:
    """Return True if the field name is public.
    字段名是否公开。
    """
    return bool(name) and not name.startswith("_")


def _class_attributes(cls: type) -> set[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        if klass is object:
            continue
        for key, attr in vars(klass).items():
            if not is_public(key) or isinstance(attr, (classmethod, staticmethod)):
                continue
            if isinstance(attr, property) or not callable(attr):
                names.add(key)
    return names


def _declared_fields(record: Any) -> set[str] | None:
    """Return the declared field names of a struct-like record.
    返回类结构记录声明的字段名。

    Returns:
        set[str] | None: Field names, or None when the value is not struct-like.
            字段名集合；若不是类结构值则返回 None。
    """
    if record is None or isinstance(record, (type, str, bytes, bytearray, int, float, complex)):
        return None
    if isinstance(record, BaseModel):
        return set(type(record).model_fields)
    if dataclasses.is_dataclass(record):
        return {f.name for f in dataclasses.fields(record)}
    names = _class_attributes(type(record))
    instance_dict = getattr(record, "__dict__", None)
    if isinstance(instance_dict, dict):
        names.update(k for k in instance_dict if is_public(k))
    return names


def has_field(record: Any, name: str) -> bool:
    """
    Check whether the record exposes a public field.
    检查记录是否暴露该公开字段。

    Args:
        record: Record instance.
            记录实例。
        name: Field name.
            字段名。

    Returns:
        bool: True when the field exists and is public.
        bool: 字段存在且公开时为 True。
    """
    if not is_public(name):
        return False
    if isinstance(record, Mapping):
        return name in record
    names = _declared_fields(record)
    return names is not None and name in names


def get_field_value(record: Any, name: str, *, skip_private: bool = True) -> Any | None:
    """
    Read a field value by name.
    按名称读取字段值。

    Never raises for missing fields: absent values read as None. A property
    that raises while being read also reads as None.
    字段缺失时不抛出异常，缺失值读作 None；读取时抛出异常的属性同样读作 None。

    Args:
        record: Record instance.
            记录实例。
        name: Field name.
            字段名。
        skip_private: Treat names starting with "_" as absent.
            将以 "_" 开头的名称视为缺失。

    Returns:
        Any | None: Field value, or None when absent.
        Any | None: 字段值；缺失时为 None。
    """
    if not name or (skip_private and not is_public(name)):
        return None
    if isinstance(record, FieldLookup):
        return record.get_field(name)
    if isinstance(record, Mapping):
        return record.get(name)
    names = _declared_fields(record)
    if names is None:
        return None
    if name not in names and skip_private:
        return None
    try:
        return getattr(record, name)
    except Exception as exc:
        logger.debug("Reading %s.%s failed, treated as absent: %r", type(record).__name__, name, exc)
        return None


def set_field_value(record: Any, name: str, value: Any, *, skip_private: bool = True) -> None:
    """
    Write a field value by name.
    按名称写入字段值。

    Mappings and FieldAssign sinks accept any key; the public-name check only
    applies to attribute-based records.
    映射与 FieldAssign 接收器接受任意键；公开名称检查仅作用于基于属性的记录。

    Args:
        record: Sink record instance.
            接收器记录实例。
        name: Field name.
            字段名。
        value: Value to assign.
            要写入的值。
        skip_private: Reject names starting with "_" on attribute-based records.
            对基于属性的记录拒绝以 "_" 开头的名称。

    Raises:
        SinkWriteError: The field is absent, not public, or not assignable.
            字段缺失、非公开或不可写。
    """
    if isinstance(record, FieldAssign):
        record.set_field(name, value)
        return
    if isinstance(record, MutableMapping):
        record[name] = value
        return
    if not name or (skip_private and not is_public(name)):
        raise SinkWriteError(
            message=f"Sink field is not public: {name} / 接收器字段非公开：{name}",
            details={"fields": [name]},
        )
    if isinstance(record, Mapping):
        present = name in record
    else:
        names = _declared_fields(record)
        present = names is not None and (name in names or (not skip_private and name in dir(record)))
    if not present:
        raise SinkWriteError(
            message=f"Sink has no field {name} / 接收器缺少字段 {name}",
            details={"fields": [name], "sink": type(record).__name__},
        )
    try:
        setattr(record, name, value)
    except (AttributeError, TypeError, PydanticValidationError) as exc:
        raise SinkWriteError(
            message=f"Sink field {name} is not assignable / 接收器字段 {name} 不可写",
            details={"fields": [name], "sink": type(record).__name__, "error": str(exc)},
        ) from exc
