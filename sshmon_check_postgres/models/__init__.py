# sshmon_check_postgres/models/__init__.py
"""Data models for sshmon-check-postgres."""

from sshmon_check_postgres.models.result import (
    Severity,
    CheckResult,
)

__all__ = [
    "Severity",
    "CheckResult",
]
