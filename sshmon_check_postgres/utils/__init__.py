# sshmon_check_postgres/utils/__init__.py
"""Utility modules for sshmon-check-postgres."""

from sshmon_check_postgres.utils.constants import ErrorCode
from sshmon_check_postgres.utils.exceptions import (
    CheckError,
    ResolutionError,
    PasswordFileError,
    DatabaseConnectionError,
    IntegrityCheckError,
    QueryExecutionError,
)

__all__ = [
    "ErrorCode",
    "CheckError",
    "ResolutionError",
    "PasswordFileError",
    "DatabaseConnectionError",
    "IntegrityCheckError",
    "QueryExecutionError",
]
