"""
tests/conftest.py - pytest 공통 픽스처

ClickHouse/Slack HTTP 응답 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(usage_config, clickhouse_payload):
        # usage_config: 테스트용 UsageReportConfig
        # clickhouse_payload: FORMAT JSON 응답 딕셔너리
        pass
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    for name in (
        "SLACK_TOKEN",
        "SLACK_CHANNEL",
        "LAKEHOUSE_CLUSTERS_FILE",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LH_HTTP_TIMEOUT",
        "LH_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)

    from core.providers import load_registry

    load_registry.cache_clear()

    yield

    load_registry.cache_clear()


# =============================================================================
# 데이터 픽스처
# =============================================================================


@pytest.fixture
def clickhouse_payload():
    """USAGE_QUERY FORMAT JSON 응답 (UInt64는 문자열, 빈 쪽은 null)"""
    return {
        "meta": [
            {"name": "use_table_name", "type": "Nullable(String)"},
            {"name": "cnt", "type": "Nullable(UInt64)"},
            {"name": "table_name", "type": "Nullable(String)"},
        ],
        "data": [
            {"use_table_name": "orders", "cnt": "12", "table_name": "orders"},
            {"use_table_name": "sessions", "cnt": "5", "table_name": "sessions"},
            {"use_table_name": None, "cnt": None, "table_name": "staging_tmp"},
            {"use_table_name": None, "cnt": None, "table_name": "legacy_events"},
        ],
        "rows": 4,
        "statistics": {"elapsed": 0.012, "rows_read": 1024, "bytes_read": 65536},
    }


@pytest.fixture
def usage_config():
    """테스트용 UsageReportConfig"""
    from core.usage import UsageReportConfig

    return UsageReportConfig(
        region="eu-west-1",
        env="prod",
        cloud="aws",
        user="reader",
        password="secret",
        slack_token="xoxb-test",
        slack_channel="#test-channel",
    )


def make_response(status_code=200, json_data=None, text=""):
    """requests.Response 모킹"""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def mock_response():
    """make_response 팩토리 픽스처"""
    return make_response
