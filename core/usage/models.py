"""
core/usage/models.py - 테이블 사용량 데이터 타입
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from core.config import settings


def _to_int(value: Any) -> int:
    """ClickHouse JSON 정수 변환

    UInt64는 따옴표 문자열("5")로 오고, OUTER JOIN 빈 쪽은 null로 옵니다.
    """
    if value is None or value == "":
        return 0
    return int(value)


@dataclass(frozen=True)
class UsageRow:
    """사용량 쿼리 결과 행

    count > 0 이면 table, 아니면 unused_table이 의미 있는 값입니다.

    Attributes:
        table: 쿼리 로그에 나타난 테이블 (use_table_name)
        count: 어제 성공한 SELECT 수 (cnt)
        unused_table: system.tables 쪽 테이블 이름 (table_name)
    """

    table: str = ""
    count: int = 0
    unused_table: str = ""

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> UsageRow:
        return cls(
            table=row.get("use_table_name") or "",
            count=_to_int(row.get("cnt")),
            unused_table=row.get("table_name") or "",
        )


def parse_rows(data: list[dict[str, Any]]) -> list[UsageRow]:
    """FORMAT JSON data 배열을 UsageRow 목록으로 변환"""
    return [UsageRow.from_dict(row) for row in data]


@dataclass(frozen=True)
class UsageReportConfig:
    """lakehouse-usage 실행 설정

    CLI 플래그 값을 그대로 담아 오케스트레이션 함수에 전달합니다.
    """

    region: str
    env: str
    cloud: str = ""
    user: str = settings.DEFAULT_CLUSTER_USER
    password: str = field(default="", repr=False)
    slack_token: str = field(default="", repr=False)
    slack_channel: str | None = None
    url: str = ""  # 예약 (미사용)
    provider: str = settings.DEFAULT_PROVIDER
    timeout: int = settings.HTTP_TIMEOUT


@dataclass(frozen=True)
class UsageReport:
    """실행 결과

    Attributes:
        used_tables: 테이블 -> 쿼리 수 (결과 순서 유지)
        unused_tables: 미사용 테이블 (결과 순서 유지)
        summary: Slack 요약 메시지
        detail: Slack 스레드 상세 메시지
    """

    used_tables: dict[str, int]
    unused_tables: list[str]
    summary: str
    detail: str

    @property
    def used_count(self) -> int:
        return len(self.used_tables)

    @property
    def unused_count(self) -> int:
        return len(self.unused_tables)
