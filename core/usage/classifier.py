"""
core/usage/classifier.py - 사용/미사용 테이블 분류
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import UsageRow


def classify_rows(rows: Iterable[UsageRow]) -> tuple[dict[str, int], list[str]]:
    """쿼리 결과를 사용 테이블 매핑과 미사용 테이블 목록으로 분리

    count > 0 인 행은 사용 테이블(같은 이름이 반복되면 마지막 값),
    나머지 행은 미사용 목록에 결과 순서대로 추가됩니다.

    Args:
        rows: UsageRow 목록

    Returns:
        (used_tables, unused_tables)
    """
    used_tables: dict[str, int] = {}
    unused_tables: list[str] = []

    for row in rows:
        if row.count > 0:
            used_tables[row.table] = row.count
        else:
            unused_tables.append(row.unused_table)

    return used_tables, unused_tables
