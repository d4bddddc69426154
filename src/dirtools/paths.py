"""Pure string helpers for paths and filenames.

None of these functions touch the filesystem. Both ``/`` and ``\\`` are treated as
separators regardless of the host platform, so Windows paths can be inspected on
POSIX systems and vice versa.
"""

import os
import re
from typing import Optional
from urllib.parse import urlsplit

from dirtools.config import get_root
from dirtools.exceptions import ConfigurationError, InvalidInputError
from dirtools.types import PathType

SEPARATORS = ("/", "\\")


def is_slash_term(path: PathType) -> bool:
    """Check if a path ends in a slash (i.e. is slash-terminated).

    Args:
        path: The path to check.

    Returns:
        True if the last character is ``/`` or ``\\``.

    Raises:
        InvalidInputError: If the path is empty.

    Example:
        >>> is_slash_term("/tmp/")
        True
        >>> is_slash_term("C:\\\\tmp\\\\")
        True
        >>> is_slash_term("/tmp")
        False
    """
    path = os.fspath(path)
    if not path:
        raise InvalidInputError("Path cannot be empty")
    return path[-1] in SEPARATORS


def add_slash_term(path: PathType) -> str:
    """Add the platform separator to a path, unless it already ends with a slash.

    Example:
        >>> add_slash_term("/tmp") == "/tmp" + os.sep
        True
        >>> add_slash_term("/tmp/")
        '/tmp/'
    """
    path = os.fspath(path)
    return path if is_slash_term(path) else path + os.sep


def get_extension(filename: str) -> Optional[str]:
    """Get the extension of a filename or URL.

    Query strings and fragments are removed, directory components are dropped and the
    extension is everything after the first dot of the basename, so composite
    extensions like ``sql.gz`` are kept whole. A leading dot does not start an
    extension, which keeps hidden files extension-less.

    Args:
        filename: A bare filename, a path (with either separator) or a URL.

    Returns:
        The lower-cased extension, or None if there is none.

    Example:
        >>> get_extension("backup.sql.gz")
        'sql.gz'
        >>> get_extension("http://example.com/BACKUP.SQL.GZ?name=value#top")
        'sql.gz'
        >>> get_extension("C:\\\\withDot.\\\\backup.sql")
        'sql'
        >>> get_extension(".hiddenFile") is None
        True
    """
    if "://" in filename:
        filename = urlsplit(filename).path

    # Basename first, so dots in directory names never count
    basename = re.split(r"[/\\]", filename)[-1]
    basename = basename.split("?", 1)[0].split("#", 1)[0]

    pos = basename.find(".", 1)
    if pos == -1:
        return None
    return basename[pos + 1 :].lower()


def rtr(path: PathType) -> str:
    """Return a path relative to the project root.

    The root is taken from :func:`dirtools.config.get_root`. Paths outside the root,
    and relative paths, are returned unchanged apart from any trailing slash.

    Args:
        path: Absolute path.

    Returns:
        The path relative to the root, without a trailing slash.

    Raises:
        ConfigurationError: If no root path has been configured.

    Example:
        >>> from dirtools.config import set_root
        >>> set_root("/srv/app/")
        >>> rtr("/srv/app/my/folder/")
        'my/folder'
        >>> set_root(None)
    """
    root = get_root()
    if not root:
        raise ConfigurationError(
            "No root path has been set. The root path must be set with the `DIRTOOLS_ROOT` "
            "(or `ROOT`) environment variable or with `dirtools.config.set_root()`"
        )

    path = os.fspath(path)
    if os.path.isabs(path) and path.startswith(root):
        path = os.path.relpath(path, root).replace(os.sep, "/")
        if path == ".":
            path = ""

    return path.rstrip("/")
