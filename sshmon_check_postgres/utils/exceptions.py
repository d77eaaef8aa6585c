# sshmon_check_postgres/utils/exceptions.py
"""Exception classes for sshmon-check-postgres."""

from sshmon_check_postgres.utils.constants import ErrorCode


class CheckError(Exception):
    """Base exception class for a failed check step."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict | None = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ResolutionError(CheckError):
    """Host could not be resolved via the alternate DNS server."""

    def __init__(self, host: str, server: str, reason: str):
        super().__init__(
            code=ErrorCode.RESOLUTION_ERROR,
            message=f"Can't resolve '{host}' on {server}: {reason}",
            details={"host": host, "dns": server}
        )


class PasswordFileError(CheckError):
    """Password file error."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code=ErrorCode.IO_ERROR,
            message=reason,
            details={"path": path}
        )


class DatabaseConnectionError(CheckError):
    """Database connection error."""

    def __init__(self, message: str):
        super().__init__(
            code=ErrorCode.CONNECTION_ERROR,
            message=message
        )


class IntegrityCheckError(CheckError):
    """Liveness query returned something other than the expected value."""

    def __init__(self, value: object):
        super().__init__(
            code=ErrorCode.INTEGRITY_ERROR,
            message=f"Postgres is crazy (returned '{value}' instead of 'test')",
            details={"value": value}
        )


class QueryExecutionError(CheckError):
    """Query execution error."""

    def __init__(self, message: str, check: str):
        super().__init__(
            code=ErrorCode.QUERY_ERROR,
            message=message,
            details={"check": check}
        )
