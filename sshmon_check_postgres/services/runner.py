# sshmon_check_postgres/services/runner.py
"""The probe's check sequence."""

import logging

import asyncpg

from sshmon_check_postgres.config import Config
from sshmon_check_postgres.models.result import CheckResult
from sshmon_check_postgres.services.checks import (
    check_connection,
    check_locks,
    check_queries,
)
from sshmon_check_postgres.services.database import open_connection, close_connection
from sshmon_check_postgres.services.password import read_password_file
from sshmon_check_postgres.services.resolver import resolve_host
from sshmon_check_postgres.utils.exceptions import (
    DatabaseConnectionError,
    IntegrityCheckError,
    PasswordFileError,
    QueryExecutionError,
    ResolutionError,
)

logger = logging.getLogger("sshmon_check_postgres.runner")


class CheckRunner:
    """Runs the checks in order and stops at the first failure.

    Steps:
    1. resolve the host via the alternate DNS server (if configured)
    2. read the password file (if configured)
    3. open the connection
    4. liveness query
    5. lock age check (if max lock age > 0)
    6. query duration check (if max query duration > 0)

    Every failing step produces a CRIT result, an exceeded threshold a WARN
    result. The connection is closed however the run ends.
    """

    def __init__(self, config: Config):
        self.config = config

    async def run(self) -> CheckResult:
        """Execute the check sequence.

        Returns:
            The single result of this run.
        """
        config = self.config

        try:
            host = await self._resolve_host()
        except ResolutionError as e:
            return CheckResult.crit(
                f"Error resolving ip of {config.host} via dns {config.dns}: {e.message}"
            )

        try:
            password = self._resolve_password()
        except PasswordFileError as e:
            return CheckResult.crit(
                f"Error reading password file {config.password_file}: {e.message}",
                exit_code=1
            )

        try:
            conn = await open_connection(**config.connect_params(host, password))
        except DatabaseConnectionError as e:
            return CheckResult.crit(
                f"Error connecting to postgres database '{config.database}' "
                f"on {host}:{config.port} using user '{config.user}': {e.message}"
            )

        try:
            return await self._run_checks(conn, host)
        finally:
            await close_connection(conn)

    async def _resolve_host(self) -> str:
        if not self.config.dns:
            return self.config.host
        return await resolve_host(self.config.host, self.config.dns)

    def _resolve_password(self) -> str:
        if not self.config.password_file:
            return self.config.password
        logger.debug("Reading password from %s", self.config.password_file)
        return read_password_file(self.config.password_file)

    async def _run_checks(self, conn: asyncpg.Connection, host: str) -> CheckResult:
        config = self.config
        location = f"database '{config.database}' on {host}:{config.port}"

        try:
            await check_connection(conn)
        except (DatabaseConnectionError, IntegrityCheckError) as e:
            return CheckResult.crit(f"Error testing connection on {location}: {e.message}")

        if config.lock_check_enabled:
            try:
                count = await check_locks(conn, config.max_lock_age)
            except QueryExecutionError as e:
                return CheckResult.crit(f"Error loading active locks for {location}: {e.message}")

            if count > 0:
                return CheckResult.warn(
                    f"{count} locks on {location} have exceeded "
                    f"the max age of {config.max_lock_age} seconds"
                )

        if config.query_check_enabled:
            try:
                count = await check_queries(conn, config.max_query_duration)
            except QueryExecutionError as e:
                return CheckResult.crit(
                    f"Error loading long running queries for {location}: {e.message}"
                )

            if count > 0:
                return CheckResult.warn(
                    f"{count} queries on {location} have exceeded "
                    f"the max duration of {config.max_query_duration} seconds"
                )

        return CheckResult.ok(f"Postgres {location} is up and running")
