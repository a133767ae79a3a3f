"""
core/usage/formatter.py - Slack 메시지 포맷

요약 한 줄과 스레드에 붙일 상세 메시지(코드 블록)를 생성합니다.
출력 형식은 하위 자동화가 파싱하므로 공백 하나까지 유지해야 합니다.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

SUMMARY_TEMPLATE = (
    "[{cloud}][{region}][{env}] Yesterday {used} tables have been used on the Lakehouse and {unused}  not used."
)

DETAIL_TEMPLATE = "Detailed data consistency:```\nUsed Tables:\n{used}\nUnused Tables:\n{unused}```"


def format_summary(
    cloud: str,
    region: str,
    env: str,
    used_tables: Mapping[str, int],
    unused_tables: Sequence[str],
) -> str:
    """요약 메시지"""
    return SUMMARY_TEMPLATE.format(
        cloud=cloud,
        region=region,
        env=env,
        used=len(used_tables),
        unused=len(unused_tables),
    )


def used_tables_to_string(used_tables: Mapping[str, int]) -> str:
    """사용 테이블별 "이름<TAB>쿼리 수" 줄 목록 (매핑 순서)"""
    return "".join(f"{name}\t{count}\n" for name, count in used_tables.items())


def format_detail(used_tables: Mapping[str, int], unused_tables: Sequence[str]) -> str:
    """스레드 상세 메시지"""
    return DETAIL_TEMPLATE.format(
        used=used_tables_to_string(used_tables),
        unused=",".join(unused_tables),
    )
