"""File system tree representation with configurable exclusion rules.

This module provides classes for building and manipulating tree representations of
directory structures, with support for excluding files and directories based on
specified rules.
"""

from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree, normalize_root, walk

__all__ = ["FileSystemNode", "FileSystemTree", "normalize_root", "walk"]
