"""
core/providers/registry.py - ClickHouse 클러스터 레지스트리

YAML 설정 파일에서 (provider, region) -> URL 템플릿 매핑을 로드하고
환경명을 치환하여 접속 URL을 생성합니다.

Usage:
    from core.providers import resolve_cluster_url

    url = resolve_cluster_url("lakehouse", "eu-west-1", "prod")
    # "https://lakehouse-prod.eu-west-1.aws.clickhouse.internal:8443"
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from core.exceptions import ConfigError, InvalidRegionError

from .types import ClusterRegistry

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent / "config"
DEFAULT_CLUSTERS_FILE = CONFIG_DIR / "clusters.yaml"

# 레지스트리 파일 경로 오버라이드
CLUSTERS_FILE_ENV = "LAKEHOUSE_CLUSTERS_FILE"

LAKEHOUSE = "lakehouse"


def _clusters_file() -> Path:
    override = os.environ.get(CLUSTERS_FILE_ENV)
    return Path(override) if override else DEFAULT_CLUSTERS_FILE


@lru_cache(maxsize=1)
def load_registry(path: str | None = None) -> ClusterRegistry:
    """레지스트리 파일 로드

    Args:
        path: YAML 파일 경로 (None이면 환경변수 또는 기본 파일)

    Returns:
        {provider: {region: url_template}} 형태의 불변 레지스트리

    Raises:
        ConfigError: 파일이 없거나 형식이 잘못된 경우
    """
    config_file = Path(path) if path else _clusters_file()

    try:
        with config_file.open(encoding="utf-8") as f:
            raw: Any = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError("clusters", f"레지스트리 파일을 열 수 없음: {config_file}", cause=e) from e
    except yaml.YAMLError as e:
        raise ConfigError("clusters", f"YAML 파싱 실패: {config_file}", cause=e) from e

    if not isinstance(raw, dict):
        raise ConfigError("clusters", f"provider 매핑이 아님: {config_file}")

    clusters: dict[str, dict[str, str]] = {}
    for provider, regions in raw.items():
        if not isinstance(regions, dict):
            raise ConfigError("clusters", f"{provider}: region 매핑이 아님")
        for region, template in regions.items():
            if not isinstance(template, str) or "{env}" not in template:
                raise ConfigError("clusters", f"{provider}/{region}: URL 템플릿에 {{env}} 없음")
            # {env} 외 자리표시자는 resolve 시점에 KeyError
            try:
                template.format(env="")
            except (KeyError, IndexError, ValueError) as e:
                raise ConfigError("clusters", f"{provider}/{region}: {{env}} 외 자리표시자 사용", cause=e) from e
        clusters[str(provider)] = {str(r): t for r, t in regions.items()}

    logger.debug("클러스터 레지스트리 로드: %s (%d providers)", config_file, len(clusters))
    return ClusterRegistry(clusters)


def get_cluster_registry() -> ClusterRegistry:
    """프로세스 전역 레지스트리 반환 (캐시됨)"""
    override = os.environ.get(CLUSTERS_FILE_ENV)
    return load_registry(override)


def list_regions(provider: str = LAKEHOUSE) -> list[str]:
    """provider에 등록된 리전 목록 (정렬)"""
    return sorted(get_cluster_registry().regions(provider))


def resolve_cluster_url(
    provider: str,
    region: str,
    env: str,
    registry: ClusterRegistry | None = None,
) -> str:
    """(provider, region)의 URL 템플릿에 환경명을 치환

    Args:
        provider: 클러스터 종류 (예: "lakehouse")
        region: 리전 (예: "eu-west-1")
        env: 환경명 (예: "prod")
        registry: 테스트용 레지스트리 (None이면 전역 레지스트리)

    Returns:
        접속 URL

    Raises:
        InvalidRegionError: 등록되지 않은 provider/region
    """
    registry = registry if registry is not None else get_cluster_registry()

    template = registry.get(provider, region)
    if template is None:
        raise InvalidRegionError(region, provider)

    return template.format(env=env)
