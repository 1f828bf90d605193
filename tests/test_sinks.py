"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_sinks.py
@DateTime: 2026-02-08
@Docs: Tests for sinks.py module and record sinks end to end.
sinks.py 模块及记录型接收器端到端测试。
"""

import logging

import pytest

from record_validate.config import ValidateConfig
from record_validate.engine import new, validate
from record_validate.exceptions import SinkWriteError
from record_validate.rules import Max, Message, Min, Required, rules
from record_validate.sinks import write_into
from tests.conftest import Account, CustomError, Person


class TestWriteInto:
    """Tests for write_into.
    write_into 测试。
    """

    def test_none_sink_is_noop(self) -> None:
        """None sink is skipped / None 接收器被跳过。"""
        write_into(None, {"Name": "bad"})

    def test_map_sink(self) -> None:
        """Map sink is updated in place / 映射接收器被原地更新。"""
        errs: dict[str, str] = {"Stale": "kept"}
        write_into(errs, {"Name": "bad"})
        assert errs == {"Stale": "kept", "Name": "bad"}

    def test_map_sink_accepts_private_keys(self) -> None:
        """Map sink takes underscore keys / 映射接收器接受下划线键。"""
        errs: dict[str, str] = {}
        write_into(errs, {"_token": "bad"})
        assert errs == {"_token": "bad"}

    def test_record_sink(self) -> None:
        """Record sink fields are assigned / 记录型接收器字段被赋值。"""
        errs = CustomError()
        write_into(errs, {"FirstName": "missing", "Name": "bad"})
        assert errs.FirstName == "missing"
        assert errs.Name == "bad"

    def test_strict_collects_all_missing_fields(self) -> None:
        """One error lists every unwritable field / 单个异常列出所有不可写字段。"""
        errs = CustomError()
        with pytest.raises(SinkWriteError) as exc_info:
            write_into(errs, {"Email": "bad", "Name": "bad", "Age": "bad"})
        assert exc_info.value.details["fields"] == ["Email", "Age"]
        assert errs.Name == "bad"

    def test_lenient_logs_and_skips(self, caplog: pytest.LogCaptureFixture) -> None:
        """Lenient mode logs a warning / 宽松模式记录警告。"""
        errs = CustomError()
        with caplog.at_level(logging.WARNING, logger="record_validate.sinks"):
            write_into(errs, {"Email": "bad", "Name": "bad"}, strict=False)
        assert errs.Name == "bad"
        assert "Skipped sink fields" in caplog.text


class TestValidatorWithRecordSink:
    """Tests for Validator.validate with record sinks.
    Validator.validate 配合记录型接收器测试。
    """

    def test_message_lands_on_sink_field(self) -> None:
        """Override message written to the sink field / 覆盖消息写入接收器字段。"""
        data = Person(FirstName="", LastName="GG", Email="cryptoanthdm@gmail.com")
        errs = CustomError()
        ok = new(
            data,
            {"FirstName": rules(Required, Min(10), Max(100), Message("The name needs to present"))},
        ).validate(errs)
        assert ok is False
        assert errs.FirstName == "The name needs to present"
        assert errs.Name == ""

    def test_pydantic_sink(self) -> None:
        """Pydantic model as sink / pydantic 模型作为接收器。"""
        sink = Account()
        ok = new({"Name": ""}, {"Name": rules(Required)}).validate(sink)
        assert ok is False
        assert sink.Name == "Name is a required field"

    def test_missing_sink_field_raises_in_strict_mode(self) -> None:
        """Strict mode raises on missing sink field / 严格模式下接收器字段缺失时抛出异常。"""
        with pytest.raises(SinkWriteError):
            new(Person(), {"LastName": rules(Required)}).validate(CustomError())

    def test_missing_sink_field_skipped_in_lenient_mode(self) -> None:
        """Lenient mode still reports the flag / 宽松模式仍返回结果。"""
        ok = new(Person(), {"LastName": rules(Required)}, config=ValidateConfig(strict_sink=False)).validate(
            CustomError()
        )
        assert ok is False

    def test_passing_run_never_touches_sink(self) -> None:
        """No failures means no writes, even to an incompatible sink / 无失败则不写入。"""
        assert new(Person(LastName="GG"), {"LastName": rules(Required)}).validate(CustomError()) is True

    def test_map_sink_matches_functional_result_for_private_names(self) -> None:
        """Map sink equals validate() output with skip_private off / 关闭 skip_private 时映射接收器与 validate() 输出一致。"""
        config = ValidateConfig(skip_private=False)
        fields = {"_token": rules(Required)}
        expected, expected_ok = validate({"_token": ""}, fields, config=config)
        errs: dict[str, str] = {}
        ok = new({"_token": ""}, fields, config=config).validate(errs)
        assert ok is expected_ok is False
        assert errs == expected == {"_token": "_token is a required field"}
