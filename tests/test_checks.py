# tests/test_checks.py
"""Tests for the check queries."""

from datetime import timedelta

import asyncpg
import pytest

from sshmon_check_postgres.services.checks import (
    check_connection,
    check_locks,
    check_queries,
)
from sshmon_check_postgres.utils.constants import LIVENESS_SQL, LOCKS_SQL, QUERIES_SQL
from sshmon_check_postgres.utils.exceptions import (
    DatabaseConnectionError,
    IntegrityCheckError,
    QueryExecutionError,
)


class TestCheckConnection:
    """Liveness check tests."""

    @pytest.mark.asyncio
    async def test_passes(self, conn):
        """Test a server answering 'test'."""
        await check_connection(conn)
        conn.fetchval.assert_awaited_once_with(LIVENESS_SQL)

    @pytest.mark.asyncio
    async def test_unexpected_value(self, conn):
        """Test a server answering something else."""
        conn.fetchval.return_value = "TEST"
        with pytest.raises(IntegrityCheckError):
            await check_connection(conn)

    @pytest.mark.asyncio
    async def test_query_error(self, conn):
        """Test a failing liveness query."""
        conn.fetchval.side_effect = asyncpg.InterfaceError("connection is closed")
        with pytest.raises(DatabaseConnectionError) as exc_info:
            await check_connection(conn)
        assert exc_info.value.message == "connection is closed"


class TestThresholdChecks:
    """Lock and query check tests."""

    @pytest.mark.asyncio
    async def test_locks_count(self, conn):
        """Test the lock count and its interval parameter."""
        conn.fetchval.return_value = 3
        assert await check_locks(conn, 30) == 3
        conn.fetchval.assert_awaited_once_with(LOCKS_SQL, timedelta(seconds=30))

    @pytest.mark.asyncio
    async def test_queries_count(self, conn):
        """Test the query count and its interval parameter."""
        conn.fetchval.return_value = 0
        assert await check_queries(conn, 120) == 0
        conn.fetchval.assert_awaited_once_with(QUERIES_SQL, timedelta(seconds=120))

    @pytest.mark.asyncio
    async def test_null_count(self, conn):
        """Test that a NULL count reads as zero."""
        conn.fetchval.return_value = None
        assert await check_locks(conn, 30) == 0

    @pytest.mark.asyncio
    async def test_lock_query_error(self, conn):
        """Test a failing lock query."""
        conn.fetchval.side_effect = asyncpg.InterfaceError("boom")
        with pytest.raises(QueryExecutionError) as exc_info:
            await check_locks(conn, 30)
        assert exc_info.value.details == {"check": "locks"}

    @pytest.mark.asyncio
    async def test_query_check_error(self, conn):
        """Test a failing duration query."""
        conn.fetchval.side_effect = ConnectionResetError("reset by peer")
        with pytest.raises(QueryExecutionError) as exc_info:
            await check_queries(conn, 30)
        assert exc_info.value.details == {"check": "queries"}
