# sshmon_check_postgres/services/checks.py
"""Health check queries run against an open connection."""

import logging
from datetime import timedelta

import asyncpg

from sshmon_check_postgres.utils.constants import (
    LIVENESS_SQL,
    LIVENESS_VALUE,
    LOCKS_SQL,
    QUERIES_SQL,
)
from sshmon_check_postgres.utils.exceptions import (
    DatabaseConnectionError,
    IntegrityCheckError,
    QueryExecutionError,
)

logger = logging.getLogger("sshmon_check_postgres.checks")

_QUERY_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


async def check_connection(conn: asyncpg.Connection) -> None:
    """Run a round-trip query and verify its result.

    Args:
        conn: Open database connection.

    Raises:
        DatabaseConnectionError: If the query fails.
        IntegrityCheckError: If the server returns anything but ``'test'``.
    """
    try:
        value = await conn.fetchval(LIVENESS_SQL)
    except _QUERY_ERRORS as e:
        raise DatabaseConnectionError(str(e)) from e

    if value != LIVENESS_VALUE:
        raise IntegrityCheckError(value)


async def check_locks(conn: asyncpg.Connection, max_lock_age: int) -> int:
    """Count locks whose backend has been running its query too long.

    Args:
        conn: Open database connection.
        max_lock_age: Maximum lock age in seconds.

    Returns:
        Number of locks exceeding the age.
    """
    try:
        count = await conn.fetchval(LOCKS_SQL, timedelta(seconds=max_lock_age))
    except _QUERY_ERRORS as e:
        raise QueryExecutionError(str(e), check="locks") from e

    logger.debug("%s locks older than %ss", count, max_lock_age)
    return count or 0


async def check_queries(conn: asyncpg.Connection, max_query_duration: int) -> int:
    """Count queries running longer than the given duration.

    Args:
        conn: Open database connection.
        max_query_duration: Maximum query duration in seconds.

    Returns:
        Number of queries exceeding the duration.
    """
    try:
        count = await conn.fetchval(QUERIES_SQL, timedelta(seconds=max_query_duration))
    except _QUERY_ERRORS as e:
        raise QueryExecutionError(str(e), check="queries") from e

    logger.debug("%s queries running longer than %ss", count, max_query_duration)
    return count or 0
