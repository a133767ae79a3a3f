"""
core/config.py - 전역 설정

애플리케이션 전체에서 공유하는 불변 설정과 환경변수 헬퍼를 제공합니다.

Usage:
    from core.config import settings, get_version, LogConfig

    timeout = settings.HTTP_TIMEOUT
    log_config = LogConfig.from_env()
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from importlib import metadata
from pathlib import Path

logger = logging.getLogger(__name__)

# 설치 배포판 이름 (version.txt 없을 때 사용)
DISTRIBUTION_NAME = "lakehouse-cli"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환 (알 수 없는 값이면 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (변환 실패 시 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.debug("정수가 아닌 환경변수 %s=%r, 기본값 %d 사용", name, value, default)
        return default


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (불변)"""

    # 클러스터
    DEFAULT_PROVIDER: str = "lakehouse"
    DEFAULT_CLUSTER_USER: str = "default"

    # HTTP (ClickHouse, Slack 공통), LH_HTTP_TIMEOUT 으로 변경 가능
    HTTP_TIMEOUT: int = field(default_factory=lambda: get_env_int("LH_HTTP_TIMEOUT", 60))

    # Slack
    SLACK_API_URL: str = "https://slack.com/api"
    DEFAULT_SLACK_CHANNEL: str = "#lakehouse-usage"


settings = Settings()


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 로드

    소스 트리의 version.txt를 우선 사용하고, 없으면 설치된 배포판 메타데이터를 읽습니다.

    Returns:
        버전 문자열 (둘 다 없으면 "0.0.0")
    """
    version_file = get_project_root() / "version.txt"
    try:
        version = version_file.read_text(encoding="utf-8").strip()
        if version:
            return version
    except OSError:
        logger.debug("version.txt 없음: %s", version_file)

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def get_default_slack_channel() -> str:
    """SLACK_CHANNEL 환경변수 또는 기본 채널"""
    return os.environ.get("SLACK_CHANNEL") or settings.DEFAULT_SLACK_CHANNEL


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정

    Attributes:
        level: 로그 레벨 이름 (INFO, DEBUG, ...)
        format: logging 포맷 문자열
        date_format: 날짜 포맷
    """

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL / LOG_FORMAT 환경변수에서 로드"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
            date_format=default.date_format,
        )

    def apply(self, debug: bool = False) -> None:
        """logging.basicConfig에 적용"""
        level = logging.DEBUG if debug else getattr(logging, self.level, logging.INFO)
        logging.basicConfig(level=level, format=self.format, datefmt=self.date_format)
        # urllib3 연결 로그 제한
        logging.getLogger("urllib3").setLevel(logging.WARNING)
