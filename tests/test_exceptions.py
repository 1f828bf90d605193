"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-02-08
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

from record_validate.exceptions import RecordValidateError, RuleConfigError, SinkWriteError


class TestRecordValidateError:
    """Tests for RecordValidateError.
    RecordValidateError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = RecordValidateError(message="test error", details={"key": "val"}, error_code="custom_error")
        assert exc.message == "test error"
        assert exc.details == {"key": "val"}
        assert exc.error_code == "custom_error"

    def test_defaults(self) -> None:
        """Default error_code and details / 默认 error_code 与 details。"""
        exc = RecordValidateError(message="msg")
        assert exc.error_code == "record_validate_error"
        assert exc.details is None

    def test_str_returns_message(self) -> None:
        """str(exc) returns message / str(exc) 返回 message 内容。"""
        assert str(RecordValidateError(message="hello world")) == "hello world"


class TestSubclasses:
    """Tests for exception subclasses.
    异常子类测试。
    """

    def test_rule_config_error(self) -> None:
        """RuleConfigError is a RecordValidateError / RuleConfigError 是 RecordValidateError 子类。"""
        exc = RuleConfigError(message="bad rule")
        assert isinstance(exc, RecordValidateError)
        assert exc.error_code == "rule_config_error"

    def test_sink_write_error(self) -> None:
        """SinkWriteError is a RecordValidateError / SinkWriteError 是 RecordValidateError 子类。"""
        exc = SinkWriteError(message="bad sink", details={"fields": ["Name"]})
        assert isinstance(exc, RecordValidateError)
        assert exc.error_code == "sink_write_error"

    def test_catchable_as_base(self) -> None:
        """SinkWriteError can be caught as RecordValidateError / 可被基类捕获。"""
        try:
            raise SinkWriteError(message="sink failed")
        except RecordValidateError as exc:
            assert exc.message == "sink failed"
