# core/providers - ClickHouse 클러스터 레지스트리
"""
클러스터 접속 정보 모듈

Usage:
    from core.providers import LAKEHOUSE, ClickHouseCredentials, resolve_cluster_url

    url = resolve_cluster_url(LAKEHOUSE, "eu-west-1", "prod")
    creds = ClickHouseCredentials(user="default", password="secret")
"""

from .registry import (
    CLUSTERS_FILE_ENV,
    LAKEHOUSE,
    get_cluster_registry,
    list_regions,
    load_registry,
    resolve_cluster_url,
)
from .types import ClickHouseCredentials, ClusterRegistry

__all__ = [
    "CLUSTERS_FILE_ENV",
    "LAKEHOUSE",
    "ClickHouseCredentials",
    "ClusterRegistry",
    "get_cluster_registry",
    "list_regions",
    "load_registry",
    "resolve_cluster_url",
]
