# sshmon_check_postgres/services/__init__.py
"""Service modules for sshmon-check-postgres."""

from sshmon_check_postgres.services.database import (
    open_connection,
    close_connection,
)
from sshmon_check_postgres.services.resolver import resolve_host, parse_server
from sshmon_check_postgres.services.password import read_password_file
from sshmon_check_postgres.services.checks import (
    check_connection,
    check_locks,
    check_queries,
)
from sshmon_check_postgres.services.runner import CheckRunner

__all__ = [
    # Database
    "open_connection",
    "close_connection",
    # Inputs
    "resolve_host",
    "parse_server",
    "read_password_file",
    # Checks
    "check_connection",
    "check_locks",
    "check_queries",
    "CheckRunner",
]
