"""
core/clickhouse/client.py - ClickHouse HTTP 쿼리 클라이언트

ClickHouse HTTP 인터페이스로 쿼리를 보내고 FORMAT JSON 응답을 파싱합니다.

Features:
- X-ClickHouse-User / X-ClickHouse-Key 헤더 인증
- default_format=JSON 으로 meta/data/rows/statistics 수신
- 전송 오류, HTTP 오류, JSON 파싱 오류를 QueryExecutionError로 통일
- 재시도 없음 (타임아웃은 requests에 위임)

Usage:
    from core.clickhouse import execute_query
    from core.providers import ClickHouseCredentials

    response = execute_query("SELECT 1 AS x", url, ClickHouseCredentials("default", ""))
    for row in response.data:
        print(row["x"])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from core.config import settings
from core.exceptions import QueryExecutionError
from core.providers.types import ClickHouseCredentials

logger = logging.getLogger(__name__)

# 서버 오류 메시지는 길 수 있음 (스택 포함)
MAX_ERROR_TEXT = 500


@dataclass
class QueryResponse:
    """FORMAT JSON 응답

    Attributes:
        meta: 컬럼 정보 [{"name": ..., "type": ...}, ...]
        data: 행 목록 (컬럼명 -> 값)
        rows: 행 수
        statistics: elapsed, rows_read, bytes_read
    """

    meta: list[dict[str, str]] = field(default_factory=list)
    data: list[dict[str, Any]] = field(default_factory=list)
    rows: int = 0
    statistics: dict[str, Any] = field(default_factory=dict)

    @property
    def columns(self) -> list[str]:
        return [m.get("name", "") for m in self.meta]

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> QueryResponse:
        data = payload.get("data") or []
        return cls(
            meta=payload.get("meta") or [],
            data=data,
            rows=int(payload.get("rows", len(data))),
            statistics=payload.get("statistics") or {},
        )


@dataclass(frozen=True)
class QuerySettings:
    """쿼리 끝에 붙는 SETTINGS 절

    Attributes:
        join_use_nulls: OUTER JOIN 빈 쪽 컬럼을 기본값 대신 NULL로 채움
        skip_unavailable_shards: 응답 없는 샤드 건너뛰기
    """

    join_use_nulls: bool = False
    skip_unavailable_shards: bool = False


def build_settings(query_settings: QuerySettings) -> str:
    """SETTINGS 절 생성

    활성화된 항목이 없으면 빈 문자열을 반환합니다.

    Example:
        >>> build_settings(QuerySettings(True, True))
        ' SETTINGS join_use_nulls = 1, skip_unavailable_shards = 1'
    """
    enabled = []
    if query_settings.join_use_nulls:
        enabled.append("join_use_nulls = 1")
    if query_settings.skip_unavailable_shards:
        enabled.append("skip_unavailable_shards = 1")

    if not enabled:
        return ""
    return " SETTINGS " + ", ".join(enabled)


def _error_text(response: requests.Response) -> str:
    text = (response.text or "").strip()
    if len(text) > MAX_ERROR_TEXT:
        text = text[:MAX_ERROR_TEXT] + "..."
    return text


def execute_query(
    query: str,
    url: str,
    credentials: ClickHouseCredentials,
    timeout: int | None = None,
) -> QueryResponse:
    """쿼리 실행

    Args:
        query: SQL 문자열 (FORMAT 절 없이)
        url: ClickHouse HTTP 엔드포인트
        credentials: 접속 계정
        timeout: 요청 타임아웃 (초, None이면 settings.HTTP_TIMEOUT)

    Returns:
        QueryResponse

    Raises:
        QueryExecutionError: 연결/인증/쿼리 실패
    """
    headers = {
        "X-ClickHouse-User": credentials.user,
        "X-ClickHouse-Key": credentials.password,
    }
    params = {"default_format": "JSON"}

    logger.debug("ClickHouse 쿼리 실행: %s (user=%s)", url, credentials.user)

    try:
        response = requests.post(
            url,
            params=params,
            data=query.encode("utf-8"),
            headers=headers,
            timeout=timeout or settings.HTTP_TIMEOUT,
        )
    except requests.RequestException as e:
        raise QueryExecutionError(url=url, message="요청 실패", cause=e) from e

    if not response.ok:
        raise QueryExecutionError(
            url=url,
            message=_error_text(response),
            status_code=response.status_code,
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise QueryExecutionError(
            url=url,
            message="JSON 응답 파싱 실패",
            status_code=response.status_code,
            cause=e,
        ) from e

    if not isinstance(payload, dict):
        raise QueryExecutionError(url=url, message="예상하지 못한 응답 형식", status_code=response.status_code)

    result = QueryResponse.from_dict(payload)
    logger.debug("응답 컬럼: %s", result.columns)
    logger.info(
        "ClickHouse 쿼리 완료: %d rows (%.3fs)",
        result.rows,
        float(result.statistics.get("elapsed", 0.0)),
    )
    return result
