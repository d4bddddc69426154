"""Filesystem and string utilities.

This package provides helpers for walking, filtering and cleaning directory trees,
small path and permission helpers, general string predicates and a set of assertion
helpers for tests.
"""

from importlib.metadata import PackageNotFoundError, version

from dirtools.exceptions import BadMethodCallError, ConfigurationError, DirectoryNotFoundError, InvalidInputError
from dirtools.filesystem import (
    create_file,
    create_tmp_file,
    dir_tree,
    is_writable_recursive,
    is_writable_resursive,
    rmdir_recursive,
    unlink_recursive,
)
from dirtools.paths import add_slash_term, get_extension, is_slash_term, rtr
from dirtools.permissions import fileperms_as_octal, fileperms_to_string

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtools")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "BadMethodCallError",
    "ConfigurationError",
    "DirectoryNotFoundError",
    "InvalidInputError",
    "add_slash_term",
    "create_file",
    "create_tmp_file",
    "dir_tree",
    "fileperms_as_octal",
    "fileperms_to_string",
    "get_extension",
    "is_slash_term",
    "is_writable_recursive",
    "is_writable_resursive",
    "rmdir_recursive",
    "rtr",
    "unlink_recursive",
]
