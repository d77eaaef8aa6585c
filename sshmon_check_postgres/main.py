# sshmon_check_postgres/main.py
"""Main entry point for the sshmon-check-postgres probe."""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from sshmon_check_postgres import __build__, __version__
from sshmon_check_postgres.config import Config
from sshmon_check_postgres.services.runner import CheckRunner
from sshmon_check_postgres.utils.constants import DEFAULT_PORT, DEFAULT_CONN_TIMEOUT


logger = logging.getLogger("sshmon_check_postgres")

_TRUE = ("1", "t", "T", "TRUE", "true", "True")
_FALSE = ("0", "f", "F", "FALSE", "false", "False")


def parse_bool(value: str) -> bool:
    """Parse a boolean flag value the way Go's strconv.ParseBool does."""
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value '{value}'")


# Bare flag means true, `-flag=false` turns it off
BOOL_FLAG = dict(nargs="?", const=True, default=False, type=parse_bool)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Flags take one or two leading dashes (``-host`` and ``--host``).
    """
    parser = argparse.ArgumentParser(
        prog="sshmon-check-postgres",
        description="SSHMon/Nagios check for PostgreSQL",
        allow_abbrev=False,
    )

    def flag(name: str, **kwargs) -> None:
        parser.add_argument(f"-{name}", f"--{name}", **kwargs)

    flag("v", dest="version", **BOOL_FLAG,
         help="Print the version info and exit")
    flag("service", default="",
         help="Service name (defaults to Postgres_<host>)")
    flag("host", default="", help="Host")
    flag("port", type=int, default=DEFAULT_PORT, help="Port")
    flag("db", dest="database", default="", help="Database")
    flag("user", default="", help="User")
    flag("password", default="", help="Password")
    flag("passwordfile", dest="password_file", default="",
         help="File to read password from")
    flag("dns", default="", help="Use alternate dns server")
    flag("conntimeout", dest="conn_timeout", type=int, default=DEFAULT_CONN_TIMEOUT,
         help="Connection timeout")
    flag("maxlockage", dest="max_lock_age", type=int, default=0,
         help="Maximum lock age in seconds")
    flag("maxqueryduration", dest="max_query_duration", type=int, default=0,
         help="Maximum query duration in seconds")
    flag("debug", **BOOL_FLAG, help="Log diagnostics to stderr")

    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> tuple[Config, bool]:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv``).

    Returns:
        A tuple of (config, version_requested).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    values = vars(args)
    version = values.pop("version")
    return Config(**values), version


def version_banner() -> str:
    """Get the text printed for ``-v``."""
    return (
        f"sshmon-check-postgres {__version__} (Build {__build__})\n"
        "\n"
        "SSHMon/Nagios check for PostgreSQL databases\n"
        "\n"
        "Copyright 2020 by the sshmon-check-postgres authors"
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run the probe once and print its status line.

    Args:
        argv: Command line arguments.

    Returns:
        The process exit code.
    """
    config, version = parse_config(argv)

    if version:
        print(version_banner())
        return 0

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    logger.debug(
        "Checking %s (host=%s port=%d db=%s)",
        config.service_name, config.host, config.port, config.database
    )

    result = asyncio.run(CheckRunner(config).run())

    print(result.format(config.service_name))
    return result.exit_code


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
