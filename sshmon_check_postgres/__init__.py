# sshmon_check_postgres/__init__.py
"""SSHMon/Nagios health check for PostgreSQL."""

__version__ = "1.0.0"
__build__ = "release"
