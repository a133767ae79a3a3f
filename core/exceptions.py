"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    LHError (베이스)
    ├── ConfigError (설정 관련)
    │   └── InvalidRegionError (등록되지 않은 리전)
    ├── QueryExecutionError (ClickHouse 쿼리 실행)
    └── NotificationError (Slack 전송)

Usage:
    from core.exceptions import QueryExecutionError

    try:
        response = requests.post(url, data=query, timeout=timeout)
    except requests.RequestException as e:
        raise QueryExecutionError(url=url, message="요청 실패", cause=e)
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class LHError(Exception):
    """Lakehouse CLI 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(LHError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class InvalidRegionError(ConfigError):
    """클러스터 레지스트리에 없는 리전

    메시지는 리전 문자열을 그대로 포함합니다 (운영 알림 파싱용).
    """

    def __init__(self, region: str, provider: str = ""):
        LHError.__init__(self, f"{region} is an invalid ClickHouse analytics region")
        self.config_key = "region"
        self.region = region
        self.provider = provider
        self.details.update({"config_key": "region", "region": region, "provider": provider})


# =============================================================================
# 쿼리 실행 관련 예외
# =============================================================================


class QueryExecutionError(LHError):
    """ClickHouse 쿼리 실행 예외

    연결/인증/쿼리 오류를 모두 포함합니다. 서버 응답 본문은 그대로 보존합니다.
    """

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        full_message = f"ClickHouse 쿼리 실패 [{url}]"
        if status_code is not None:
            full_message = f"{full_message} (HTTP {status_code})"
        if message:
            full_message = f"{full_message}: {message}"
        super().__init__(full_message, cause)
        self.url = url
        self.status_code = status_code
        self.details.update({"url": url, "status_code": status_code})


# =============================================================================
# 알림 관련 예외
# =============================================================================


class NotificationError(LHError):
    """Slack 메시지 전송 예외"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        full_message = "Slack 전송 실패"
        if error_code:
            full_message = f"{full_message} ({error_code})"
        if message:
            full_message = f"{full_message}: {message}"
        super().__init__(full_message, cause)
        self.error_code = error_code
        self.details["error_code"] = error_code


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def is_auth_failure(error: Exception) -> bool:
    """ClickHouse 인증 실패인지 확인

    Args:
        error: 확인할 예외

    Returns:
        HTTP 401/403 응답이면 True
    """
    if isinstance(error, QueryExecutionError):
        return error.status_code in (401, 403)
    return False


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, LHError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    return f"{error.__class__.__name__}: {error}"
