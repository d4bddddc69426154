"""Recursive filesystem operations.

Every function here is built on :func:`dirtools.file_system_tree.walk`. Functions that
take ``ignore_errors`` convert a missing root directory (and, for the ones that write,
any ``OSError``) into a ``False`` return value instead of raising. Errors on single
entries met during a walk (an unreadable subdirectory) are always skipped.

None of these operations are atomic: a failure halfway through a recursive delete
leaves whatever the partial operation produced.
"""

import logging
import os
import shutil
import tempfile
from typing import Any, Optional

from dirtools.config import get_tmp_dir
from dirtools.exceptions import DirectoryNotFoundError
from dirtools.file_system_tree.file_system_tree import walk
from dirtools.types import ExclusionSpec, PathType, TreeResult

logger = logging.getLogger(__name__)


def dir_tree(path: PathType, exclusions: ExclusionSpec = False, ignore_errors: bool = False) -> TreeResult:
    """Return the nested directories of a path and the files they contain.

    Args:
        path: The directory path to build the tree from.
        exclusions: ``True`` to skip dot-files and dot-directories, or a name (or list
            of names) of files and directories to skip. A ``"."`` in the list also
            skips dot-entries. Any exclusion rules object is accepted as well.
        ignore_errors: With ``True``, a missing directory gives empty lists instead of
            an exception.

    Returns:
        ``(directories, files)``. Directories start with ``path`` itself (without
        trailing slash); both lists are sorted by full path.

    Raises:
        DirectoryNotFoundError: If ``path`` is not a directory and ``ignore_errors`` is
            False.

    Example:
        >>> dirs, files = dir_tree("/tmp/exampleDir", ["subDir2", "."])  # doctest: +SKIP
        >>> dirs  # doctest: +SKIP
        ['/tmp/exampleDir', '/tmp/exampleDir/emptyDir', '/tmp/exampleDir/subDir1']
    """
    return walk(path, exclusions, ignore_errors)


def is_writable_recursive(dirname: PathType, check_only_dirs: bool = True, ignore_errors: bool = False) -> bool:
    """Tell whether a directory and its subdirectories are readable and writable.

    Args:
        dirname: Path to the directory.
        check_only_dirs: With ``False``, every file is checked too.
        ignore_errors: With ``True``, a missing directory gives ``False`` instead of an
            exception.

    Returns:
        True only if every checked item, the directory itself included, is both
        readable and writable by the current process.

    Raises:
        DirectoryNotFoundError: If ``dirname`` is not a directory and ``ignore_errors``
            is False.
    """
    try:
        directories, files = dir_tree(dirname)
    except DirectoryNotFoundError as e:
        if not ignore_errors:
            raise
        logger.warning("Ignoring error: %s", e)
        return False

    items = directories if check_only_dirs else directories + files
    root = os.fspath(dirname)
    if root not in items:
        items.append(root)

    for item in items:
        if not os.access(item, os.R_OK | os.W_OK):
            logger.debug("Not readable and writable: %s", item)
            return False
    return True


# Misspelled alias of is_writable_recursive
is_writable_resursive = is_writable_recursive


def unlink_recursive(dirname: PathType, exclusions: ExclusionSpec = False, ignore_errors: bool = False) -> bool:
    """Remove every file under a directory, leaving the directories in place.

    Symbolic links are removed themselves; their targets are never touched. To remove
    the directory and everything in it, use :func:`rmdir_recursive` instead.

    Args:
        dirname: The directory path.
        exclusions: Files and directories to keep, in the form accepted by
            :func:`dir_tree`.
        ignore_errors: With ``True``, failures give ``False`` instead of an exception.

    Returns:
        True on success.

    Raises:
        DirectoryNotFoundError: If ``dirname`` is not a directory.
        OSError: If a file cannot be removed.
    """
    try:
        _, files = dir_tree(dirname, exclusions)
        for filename in files:
            logger.debug("Removing %s", filename)
            os.unlink(filename)
        return True
    except OSError as e:
        if not ignore_errors:
            raise
        logger.warning("Ignoring error: %s", e)
        return False


def rmdir_recursive(dirname: PathType) -> bool:
    """Remove a directory and all its contents, subdirectories and files included.

    To remove only the files, leaving the directory structure alone, use
    :func:`unlink_recursive` instead.

    Args:
        dirname: Path to the directory.

    Returns:
        False if ``dirname`` is not a directory (nothing is removed), True once the
        directory has been removed.

    Raises:
        OSError: If anything cannot be removed.
    """
    # islink first: rmtree refuses symlinks, and a link is not the directory itself
    if os.path.islink(dirname) or not os.path.isdir(dirname):
        return False

    logger.debug("Removing directory tree %s", dirname)
    shutil.rmtree(dirname)
    return True


def _write_data(filename: str, data: Any) -> None:
    if data is None:
        data = b""
    if isinstance(data, (bytes, bytearray)):
        with open(filename, "wb") as f:
            f.write(data)
    elif isinstance(data, str):
        with open(filename, "w") as f:
            f.write(data)
    else:
        with open(filename, "w") as f:
            for chunk in data:
                f.write(str(chunk))


def create_file(filename: PathType, data: Any = None, dir_mode: int = 0o777, ignore_errors: bool = False) -> bool:
    """Create a file, creating the directory it lives in first if needed.

    Args:
        filename: Path to the file.
        data: The data to write: ``str``, ``bytes``, or an iterable whose items are
            written one after the other. ``None`` creates an empty file.
        dir_mode: Mode for the directory, if it does not exist.
        ignore_errors: With ``True``, errors give ``False`` instead of an exception.

    Returns:
        True on success.

    Raises:
        OSError: If the directory or the file cannot be created.
    """
    filename = os.fspath(filename)
    try:
        parent = os.path.dirname(filename)
        if parent:
            os.makedirs(parent, mode=dir_mode, exist_ok=True)
        _write_data(filename, data)
        return True
    except OSError as e:
        if not ignore_errors:
            raise
        logger.warning("Ignoring error: %s", e)
        return False


def create_tmp_file(data: Any = None, directory: Optional[PathType] = None, prefix: str = "tmp") -> str:
    """Create a temporary file with a unique name and return its path.

    The file is created with mode ``0600`` and is not deleted automatically.

    Args:
        data: The data to write, as for :func:`create_file`.
        directory: Where to create the file. Defaults to the configured temporary
            directory (see :mod:`dirtools.config`).
        prefix: Prefix of the generated filename.

    Returns:
        Path of the new file.
    """
    directory = os.fspath(directory) if directory is not None else get_tmp_dir()
    fd, filename = tempfile.mkstemp(prefix=prefix, dir=directory)
    os.close(fd)
    create_file(filename, data)
    return filename
