# core/clickhouse - ClickHouse HTTP 클라이언트
"""
ClickHouse 쿼리 실행 모듈

Usage:
    from core.clickhouse import QuerySettings, build_settings, execute_query
"""

from .client import QueryResponse, QuerySettings, build_settings, execute_query

__all__ = [
    "QueryResponse",
    "QuerySettings",
    "build_settings",
    "execute_query",
]
