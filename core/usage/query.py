"""
core/usage/query.py - 어제 테이블 사용량 쿼리

system.query_log 의 어제 SELECT 쿼리를 테이블별로 집계하고
system.tables 와 FULL OUTER JOIN 하여 사용되지 않은 테이블도 함께 반환합니다.

컬럼:
    use_table_name: 쿼리 로그에 나타난 테이블
    cnt: 성공한 SELECT 수 (type 2/3/4)
    table_name: default 데이터베이스의 테이블 이름
"""

from core.clickhouse import QuerySettings, build_settings

USAGE_QUERY_SETTINGS = QuerySettings(join_use_nulls=True, skip_unavailable_shards=True)

USAGE_QUERY = (
    "SELECT _table AS use_table_name, "
    "cnt, "
    "st.name AS table_name "
    "FROM "
    "( "
    "SELECT splitByChar('.', `table`)[2] AS _table, "
    "count(1) AS cnt "
    "FROM system.query_log "
    "ARRAY JOIN tables AS `table` "
    "WHERE event_date = yesterday() "
    "AND NOT hasAny(databases, ['system']) "
    "AND query_kind = 'Select' "
    "AND NOT startsWith(_table, '_tmp') "
    "AND type IN (2, 3, 4) "
    "GROUP BY _table "
    ") AS used_tables "
    "FULL OUTER JOIN system.tables AS st ON st.name = _table "
    "WHERE st.database = 'default' "
    "ORDER BY used_tables.cnt DESC" + build_settings(USAGE_QUERY_SETTINGS)
)
