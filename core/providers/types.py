"""
core/providers/types.py - 클러스터 접속 정보 타입
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ClickHouseCredentials:
    """ClickHouse 접속 계정"""

    user: str = "default"
    password: str = ""

    def __repr__(self) -> str:
        # 비밀번호는 로그/트레이스백에 남기지 않음
        return f"ClickHouseCredentials(user={self.user!r}, password='***')"


class ClusterRegistry:
    """provider -> region -> URL 템플릿 2단계 조회 테이블 (읽기 전용)"""

    def __init__(self, clusters: Mapping[str, Mapping[str, str]]):
        self._clusters = MappingProxyType(
            {provider: MappingProxyType(dict(regions)) for provider, regions in clusters.items()}
        )

    def get(self, provider: str, region: str) -> str | None:
        """URL 템플릿 조회 (없으면 None)"""
        regions = self._clusters.get(provider)
        if regions is None:
            return None
        return regions.get(region)

    def providers(self) -> list[str]:
        return list(self._clusters)

    def regions(self, provider: str) -> list[str]:
        return list(self._clusters.get(provider, {}))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.get(*key) is not None

    def __repr__(self) -> str:
        return f"ClusterRegistry(providers={self.providers()!r})"
