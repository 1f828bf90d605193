"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-02-08
@Docs: Shared test fixtures for the record-validate test suite.
测试套件的公共 fixtures。
"""

import os
from collections.abc import Iterator
from dataclasses import dataclass
from unittest.mock import patch

import pytest
from pydantic import BaseModel


@dataclass
class Person:
    """Dataclass record.
    数据类记录。
    """

    FirstName: str = ""
    LastName: str = ""
    Email: str = ""
    Age: int = 0


@dataclass
class CustomError:
    """Record sink with message fields.
    带消息字段的记录型接收器。
    """

    FirstName: str = ""
    Name: str = ""


class Account(BaseModel):
    """Pydantic record.
    Pydantic 记录。
    """

    Name: str = ""
    Url: str = ""


class Slotted:
    """Slotted record.
    使用 slots 的记录。
    """

    __slots__ = ("Name", "_secret")

    def __init__(self, name: str) -> None:
        self.Name = name
        self._secret = "hidden"


class Plain:
    """Plain object record.
    普通对象记录。
    """

    def __init__(self, **attrs: object) -> None:
        for k, v in attrs.items():
            setattr(self, k, v)

    def greet(self) -> str:
        return "hi"


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Remove RECORD_VALIDATE_* variables for each test.
    每个测试清除 RECORD_VALIDATE_* 环境变量。
    """
    env = {k: v for k, v in os.environ.items() if not k.startswith("RECORD_VALIDATE_")}
    with patch.dict(os.environ, env, clear=True):
        yield
