# core/__init__.py
"""
core - Lakehouse CLI 인프라

CLI가 사용하는 클러스터 레지스트리, 쿼리 클라이언트, 알림, 사용량 분석을 포함하는
최상위 패키지입니다.

아키텍처:
    core/
    ├── providers/      # (provider, region) -> ClickHouse URL 레지스트리
    ├── clickhouse/     # ClickHouse HTTP 쿼리 클라이언트
    ├── notify/         # Slack 전송
    ├── usage/          # 테이블 사용량 분류 및 메시지 포맷
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings
    timeout = settings.HTTP_TIMEOUT

    # 예외 처리
    from core.exceptions import LHError, format_error_for_user
    try:
        run_usage_report(config)
    except LHError as e:
        print(format_error_for_user(e))

    # 사용량 보고
    from core.usage import UsageReportConfig, run_usage_report
    report = run_usage_report(UsageReportConfig(region="eu-west-1", env="prod"))
"""

from core import clickhouse, config, exceptions, notify, providers, usage

__all__: list[str] = [
    # 서브패키지
    "clickhouse",
    "notify",
    "providers",
    "usage",
    # 모듈
    "config",
    "exceptions",
]
