# core/usage - Lakehouse 테이블 사용량 보고
"""
테이블 사용량 분석 모듈

Usage:
    from core.usage import UsageReportConfig, run_usage_report

    report = run_usage_report(UsageReportConfig(region="eu-west-1", env="prod"))
    print(report.summary)
"""

from .classifier import classify_rows
from .formatter import format_detail, format_summary
from .models import UsageReport, UsageReportConfig, UsageRow, parse_rows
from .query import USAGE_QUERY
from .report import run_usage_report

__all__ = [
    "USAGE_QUERY",
    "UsageReport",
    "UsageReportConfig",
    "UsageRow",
    "classify_rows",
    "format_detail",
    "format_summary",
    "parse_rows",
    "run_usage_report",
]
