"""Permission formatting helpers."""

import os
import stat
from typing import Union

from dirtools.types import PathType


def fileperms_as_octal(filename: PathType) -> str:
    """Get the permissions of a file as a four-character octal string.

    Unlike ``oct(os.stat(filename).st_mode)``, the file type bits are dropped and the
    result is always zero-padded to four digits.

    Args:
        filename: Path to the file.

    Returns:
        Permissions such as ``'0644'``.

    Raises:
        OSError: If the file cannot be stat-ed.

    Example:
        >>> fileperms_as_octal("/etc/hostname")  # doctest: +SKIP
        '0644'
    """
    return "%04o" % stat.S_IMODE(os.stat(filename).st_mode)


def fileperms_to_string(perms: Union[int, str]) -> str:
    """Return permissions from an octal value (``0o755``) as a string (``'0755'``).

    Strings are returned unchanged, which makes the function idempotent.

    Example:
        >>> fileperms_to_string(0o755)
        '0755'
        >>> fileperms_to_string("0755")
        '0755'
    """
    return perms if isinstance(perms, str) else "%04o" % perms
