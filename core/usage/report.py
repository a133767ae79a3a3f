"""
core/usage/report.py - Lakehouse 테이블 사용량 보고

어제 하루 동안의 테이블 사용량을 조회하여 Slack에 게시합니다.

실행 순서 (분기 없음):
    1. 리전 -> 클러스터 URL 확인 (실패 시 쿼리 실행 없이 중단)
    2. USAGE_QUERY 실행
    3. 사용/미사용 테이블 분류
    4. 요약/상세 메시지 생성
    5. 상세 메시지 표준 출력
    6. Slack 요약 전송 + 스레드 상세

모든 오류는 그대로 전파됩니다. Slack 전송이 실패해도 5단계 출력은 이미 끝난 상태입니다.

Usage:
    from core.usage import UsageReportConfig, run_usage_report

    config = UsageReportConfig(region="eu-west-1", env="prod", cloud="aws", slack_token="xoxb-...")
    report = run_usage_report(config)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from core.clickhouse import QueryResponse, execute_query
from core.exceptions import QueryExecutionError
from core.notify import SlackNotifier
from core.providers import ClickHouseCredentials, resolve_cluster_url

from .classifier import classify_rows
from .formatter import format_detail, format_summary
from .models import UsageReport, UsageReportConfig, parse_rows
from .query import USAGE_QUERY

logger = logging.getLogger(__name__)

QueryExecutor = Callable[..., QueryResponse]


def run_usage_report(
    config: UsageReportConfig,
    execute: QueryExecutor = execute_query,
    notifier: SlackNotifier | None = None,
) -> UsageReport:
    """사용량 조회 후 Slack 게시

    Args:
        config: 실행 설정
        execute: 쿼리 실행 함수 (테스트 주입용)
        notifier: Slack 전송기 (None이면 config로 생성)

    Returns:
        UsageReport

    Raises:
        InvalidRegionError: 등록되지 않은 리전
        QueryExecutionError: 쿼리 실패 또는 응답 행 변환 실패
        NotificationError: Slack 전송 실패
    """
    if config.url:
        logger.warning("--url 은 현재 사용되지 않습니다 (리전 레지스트리 사용): %s", config.url)

    url = resolve_cluster_url(config.provider, config.region, config.env)
    credentials = ClickHouseCredentials(user=config.user, password=config.password)

    response = execute(USAGE_QUERY, url, credentials, timeout=config.timeout)
    try:
        rows = parse_rows(response.data)
    except (TypeError, ValueError) as e:
        raise QueryExecutionError(url=url, message="응답 행 변환 실패", cause=e) from e

    used_tables, unused_tables = classify_rows(rows)
    logger.info("사용 테이블 %d개, 미사용 테이블 %d개", len(used_tables), len(unused_tables))

    summary = format_summary(config.cloud, config.region, config.env, used_tables, unused_tables)
    detail = format_detail(used_tables, unused_tables)
    # rich 대신 print: 탭 유지
    print(detail)

    if notifier is None:
        notifier = SlackNotifier(config.slack_token, channel=config.slack_channel, timeout=config.timeout)
    notifier.publish_msg_in_thread(summary, detail)

    return UsageReport(
        used_tables=used_tables,
        unused_tables=unused_tables,
        summary=summary,
        detail=detail,
    )
