# sshmon_check_postgres/models/result.py
"""Check result data models."""

from enum import IntEnum
from pydantic import BaseModel, ConfigDict


class Severity(IntEnum):
    """Monitoring severity, ordered by urgency.

    The numeric value is the code printed at the start of the status line,
    the member name is the text label.
    """

    OK = 0
    WARN = 1
    CRIT = 2
    UNKNOWN = 3


class CheckResult(BaseModel):
    """Outcome of a single probe run."""

    severity: Severity
    message: str
    exit_code: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls, message: str) -> "CheckResult":
        return cls(severity=Severity.OK, message=message)

    @classmethod
    def warn(cls, message: str) -> "CheckResult":
        return cls(severity=Severity.WARN, message=message)

    @classmethod
    def crit(cls, message: str, exit_code: int = 0) -> "CheckResult":
        return cls(severity=Severity.CRIT, message=message, exit_code=exit_code)

    def format(self, service_name: str) -> str:
        """Render the Nagios-style status line (without trailing newline).

        Args:
            service_name: Label identifying the checked service.

        Returns:
            ``"<code> <service> - <text> - <message>"``
        """
        return (
            f"{self.severity.value} {service_name} - "
            f"{self.severity.name} - {self.message}"
        )
