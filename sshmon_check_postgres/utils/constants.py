# sshmon_check_postgres/utils/constants.py
"""Constants for sshmon-check-postgres."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    RESOLUTION_ERROR = "RESOLUTION_ERROR"
    IO_ERROR = "IO_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    INTEGRITY_ERROR = "INTEGRITY_ERROR"
    QUERY_ERROR = "QUERY_ERROR"


DEFAULT_PORT = 5432
DEFAULT_CONN_TIMEOUT = 5
DEFAULT_DNS_PORT = 53
DNS_TIMEOUT = 2.0

LIVENESS_VALUE = "test"

LIVENESS_SQL = "SELECT 'test' AS value"

LOCKS_SQL = """
    SELECT
        COUNT(*)
    FROM pg_catalog.pg_locks blockedl
    INNER JOIN pg_stat_activity blockeda
        ON blockedl.pid = blockeda.pid
    WHERE
        (now() - blockeda.query_start) > $1
"""

QUERIES_SQL = """
    SELECT
        COUNT(*) AS count
    FROM pg_stat_activity
    WHERE
        (now() - pg_stat_activity.query_start) > $1
"""
