"""
tests/core/test_exceptions.py - core/exceptions.py 테스트
"""

from core.exceptions import (
    ConfigError,
    InvalidRegionError,
    LHError,
    NotificationError,
    QueryExecutionError,
    format_error_for_user,
    is_auth_failure,
)


class TestLHError:
    """베이스 예외 테스트"""

    def test_message_only(self):
        error = LHError("실패")
        assert str(error) == "실패"
        assert error.cause is None
        assert error.details == {}

    def test_with_cause(self):
        cause = ValueError("원인")
        error = LHError("실패", cause=cause)
        assert str(error) == "실패: 원인"

    def test_to_dict(self):
        error = LHError("실패", details={"k": "v"})
        data = error.to_dict()
        assert data["error_type"] == "LHError"
        assert data["message"] == "실패"
        assert data["cause"] is None
        assert data["details"] == {"k": "v"}


class TestInvalidRegionError:
    """리전 오류 메시지 형식"""

    def test_message_contains_region(self):
        error = InvalidRegionError("eu-west", "lakehouse")
        assert str(error) == "eu-west is an invalid ClickHouse analytics region"
        assert error.region == "eu-west"
        assert error.provider == "lakehouse"

    def test_is_config_error(self):
        error = InvalidRegionError("mars-1")
        assert isinstance(error, ConfigError)
        assert isinstance(error, LHError)
        assert error.config_key == "region"
        assert error.details["region"] == "mars-1"

    def test_empty_region(self):
        assert str(InvalidRegionError("")) == " is an invalid ClickHouse analytics region"


class TestQueryExecutionError:
    """쿼리 오류"""

    def test_with_status(self):
        error = QueryExecutionError(url="https://ch:8443", message="Code: 516", status_code=401)
        assert "HTTP 401" in str(error)
        assert "Code: 516" in str(error)
        assert error.details["status_code"] == 401

    def test_is_auth_failure(self):
        assert is_auth_failure(QueryExecutionError(url="u", message="", status_code=403))
        assert not is_auth_failure(QueryExecutionError(url="u", message="", status_code=500))
        assert not is_auth_failure(ValueError("x"))


class TestNotificationError:
    """Slack 오류"""

    def test_error_code_in_message(self):
        error = NotificationError("chat.postMessage", error_code="channel_not_found")
        assert "channel_not_found" in str(error)
        assert error.error_code == "channel_not_found"


class TestFormatErrorForUser:
    """사용자 메시지 포맷"""

    def test_custom_error(self):
        assert format_error_for_user(InvalidRegionError("eu-west")) == (
            "eu-west is an invalid ClickHouse analytics region"
        )

    def test_generic_error(self):
        assert format_error_for_user(RuntimeError("boom")) == "RuntimeError: boom"
