# sshmon_check_postgres/config.py
"""Configuration management for sshmon-check-postgres."""

from pydantic import BaseModel, ConfigDict
from typing import Any

from sshmon_check_postgres.utils.constants import DEFAULT_PORT, DEFAULT_CONN_TIMEOUT


class Config(BaseModel):
    """Probe settings, built once from the command line."""

    service: str = ""

    # PostgreSQL connection configuration
    host: str = ""
    port: int = DEFAULT_PORT
    database: str = ""
    user: str = ""
    password: str = ""
    password_file: str = ""
    dns: str = ""
    conn_timeout: int = DEFAULT_CONN_TIMEOUT

    # Thresholds, anything <= 0 disables the check
    max_lock_age: int = 0
    max_query_duration: int = 0

    debug: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def service_name(self) -> str:
        """Label used in the status line."""
        return self.service or f"Postgres_{self.host}"

    @property
    def lock_check_enabled(self) -> bool:
        return self.max_lock_age > 0

    @property
    def query_check_enabled(self) -> bool:
        return self.max_query_duration > 0

    def connect_params(self, host: str, password: str) -> dict[str, Any]:
        """Get the keyword arguments for ``asyncpg.connect``.

        Args:
            host: Host to connect to, possibly already resolved to an IP.
            password: Password to use, possibly read from the password file.

        Returns:
            Connection parameters for the driver.
        """
        params: dict[str, Any] = {
            "host": host or None,
            "port": self.port,
            "database": self.database or None,
            "user": self.user or None,
            "password": password or None,
        }
        if self.conn_timeout > 0:
            params["timeout"] = self.conn_timeout
        return params
