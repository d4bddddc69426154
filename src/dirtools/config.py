"""Runtime configuration read from the environment.

Values are looked up on every call so that changes to ``os.environ`` made by the
host application (or a test) are picked up without re-importing anything.

Environment variables:
    DIRTOOLS_ROOT: Project root used by :func:`dirtools.paths.rtr`. ``ROOT`` is
        honoured as a fallback.
    DIRTOOLS_TMP: Directory where :func:`dirtools.filesystem.create_tmp_file`
        creates files. ``TMP`` is honoured as a fallback.
"""

import os
import tempfile
from typing import Optional

from dirtools.types import PathType

ROOT_VARIABLES = ("DIRTOOLS_ROOT", "ROOT")
TMP_VARIABLES = ("DIRTOOLS_TMP", "TMP")

_root_override: Optional[str] = None


def _first_env(names: tuple) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


def set_root(root: Optional[PathType]) -> None:
    """Set the project root programmatically, taking precedence over the environment.

    Args:
        root: The new project root, or None to go back to reading the environment.

    Example:
        >>> set_root("/srv/app")
        >>> get_root()
        '/srv/app'
        >>> set_root(None)
    """
    global _root_override
    _root_override = os.fspath(root) if root is not None else None


def get_root() -> Optional[str]:
    """Get the configured project root, or None if it has not been set."""
    if _root_override is not None:
        return _root_override
    return _first_env(ROOT_VARIABLES)


def get_tmp_dir() -> str:
    """Get the directory for temporary files.

    Returns:
        The configured temporary directory, or the system default when none is set.
    """
    return _first_env(TMP_VARIABLES) or tempfile.gettempdir()
