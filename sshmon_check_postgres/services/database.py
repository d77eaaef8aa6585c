# sshmon_check_postgres/services/database.py
"""Database connection services."""

import asyncio
import logging

import asyncpg

from sshmon_check_postgres.utils.exceptions import DatabaseConnectionError

logger = logging.getLogger("sshmon_check_postgres.database")


async def open_connection(**params) -> asyncpg.Connection:
    """Open a single PostgreSQL connection.

    Args:
        **params: Keyword arguments for ``asyncpg.connect``.

    Returns:
        An open asyncpg connection.

    Raises:
        DatabaseConnectionError: If the connection can't be established.
    """
    logger.debug(
        "Connecting to %s:%s database=%s user=%s",
        params.get("host"),
        params.get("port"),
        params.get("database"),
        params.get("user"),
    )
    try:
        return await asyncpg.connect(**params)
    except asyncio.TimeoutError as e:
        raise DatabaseConnectionError("timeout expired") from e
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, OverflowError, ValueError) as e:
        raise DatabaseConnectionError(str(e)) from e


async def close_connection(conn: asyncpg.Connection) -> None:
    """Close a connection.

    Args:
        conn: The connection to close.
    """
    try:
        await conn.close(timeout=5)
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as e:
        logger.warning("Error closing connection: %s", e)
        conn.terminate()
