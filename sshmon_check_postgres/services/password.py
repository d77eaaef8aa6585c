# sshmon_check_postgres/services/password.py
"""Password file loading."""

from pathlib import Path

from sshmon_check_postgres.utils.exceptions import PasswordFileError


def read_password_file(path: str) -> str:
    """Read a password file.

    The whole content is the password, trailing newlines included.

    Raises:
        PasswordFileError: If the file can't be read or isn't UTF-8.
    """
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PasswordFileError(path, str(e)) from e
