"""File system tree representation with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a directory and builds a
tree of the entries that survive the exclusion rules, and the walk() function, which
flattens such a tree into the sorted directory and file lists used by the recursive
filesystem operations.
"""

import logging
import os
from typing import Iterator, List, Optional

from anytree import PreOrderIter

from dirtools.exceptions import DirectoryNotFoundError
from dirtools.exclusion_rules.base_rules import BaseExclusionRules
from dirtools.exclusion_rules.compiler import compile_exclusions
from dirtools.file_system_tree.file_system_node import FileSystemNode
from dirtools.types import ExclusionSpec, PathType, TreeResult

logger = logging.getLogger(__name__)

_TRAILING_SEPARATORS = "/" + os.sep


def normalize_root(path: PathType) -> str:
    """Strip trailing separators from a root path, keeping the filesystem root intact.

    Example:
        >>> normalize_root("/tmp/exampleDir/")
        '/tmp/exampleDir'
        >>> normalize_root("/")
        '/'
    """
    path = os.fspath(path)
    stripped = path.rstrip(_TRAILING_SEPARATORS)
    if not stripped and path:
        return os.sep
    return stripped


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    The tree is built lazily on first access and can be refreshed to reflect filesystem
    changes. Directories are checked against the exclusion rules before they are
    entered, so an excluded directory is pruned together with everything below it.
    Files are checked individually.

    Symbolic Link Behavior:
        Symbolic links are never followed. A link, whatever it points to, is a leaf of
        the tree and is listed among the files.

    Permission Handling:
        Directories that cannot be listed are kept in the tree without children and a
        warning is logged. Only a missing or non-directory root is an error.

    Attributes:
        root_path (str): The root directory, without trailing separator.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        ├── utils/
        │   └── helpers.py
        └── main.py
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
        """
        self.root_path = normalize_root(root_path)
        self.exclusion_rules = exclusion_rules
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it if needed.

        Raises:
            DirectoryNotFoundError: If the root path doesn't exist or isn't a directory.
        """
        if self._tree is None:
            self._tree = self._build_tree()
            self._count_files_and_directories()
            logger.debug(
                "Walked %s: %d directories, %d files", self.root_path, self._directory_count, self._file_count
            )
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        if not os.path.isdir(self.root_path):
            raise DirectoryNotFoundError(self.root_path)

        rules = self.exclusion_rules
        if rules is not None and not rules.has_rules():
            rules = None

        name = os.path.basename(self.root_path) or self.root_path
        root = FileSystemNode(name, fs_path=self.root_path, is_dir=True)
        self._populate(root, "", rules)
        return root

    def _populate(self, node: FileSystemNode, relative_path: str, rules: Optional[BaseExclusionRules]) -> None:
        """Attach the children of a directory node, recursing into kept subdirectories."""
        try:
            with os.scandir(node.fs_path) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", node.fs_path, e)
            return

        for entry in entries:
            child_relative_path = relative_path + entry.name

            try:
                is_symlink = entry.is_symlink()
                is_dir = not is_symlink and entry.is_dir(follow_symlinks=False)
            except OSError:
                is_symlink, is_dir = False, False

            if rules is not None:
                rule_path = child_relative_path + "/" if is_dir else child_relative_path
                if rules.exclude(rule_path):
                    continue

            child = FileSystemNode(
                entry.name,
                parent=node,
                fs_path=os.path.join(node.fs_path, entry.name),
                is_dir=is_dir,
                is_symlink=is_symlink,
            )
            if is_dir:
                self._populate(child, child_relative_path + "/", rules)

    def _count_files_and_directories(self) -> None:
        """Count files and directories in the tree. The root is not counted."""
        self._file_count = 0
        self._directory_count = 0
        for node in PreOrderIter(self._tree):
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1
        self._directory_count -= 1

    def get_file_count(self) -> int:
        """Get the total number of files in the tree (excluding those filtered out)."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def get_directories(self) -> List[str]:
        """Get the root directory followed by every kept descendant directory.

        Descendants are sorted by their full path string, so the result does not
        depend on the order the filesystem lists entries in.

        Returns:
            Directory paths, the root first.
        """
        tree = self.get_tree()
        descendants = sorted(node.fs_path for node in tree.descendants if node.is_dir)
        return [self.root_path] + descendants

    def get_files(self) -> List[str]:
        """Get every kept file, sorted by full path string."""
        return sorted(node.fs_path for node in self.get_tree().descendants if not node.is_dir)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of the filesystem one line at a time.

        Generates output similar to the Unix 'tree' command. Within each directory,
        subdirectories come first, then files, both in alphabetical order.

        Yields:
            Lines of the tree representation, including the connecting lines.

        Raises:
            DirectoryNotFoundError: If the root path doesn't exist or isn't a directory.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            src/
            ├── utils/
            │   └── helpers.py
            └── main.py
        """
        root = self.get_tree()

        def write_node(node: FileSystemNode, prefix: str, is_last: bool) -> Iterator[str]:
            connector = "└── " if is_last else "├── "
            if node.is_symlink:
                suffix = " [symlink]"
            elif node.is_dir:
                suffix = "/"
            else:
                suffix = ""
            yield f"{prefix}{connector}{node.name}{suffix}"

            if node.is_dir:
                child_prefix = prefix + ("    " if is_last else "│   ")
                yield from write_children(node, child_prefix)

        def write_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
            sorted_children = sorted(node.children, key=lambda n: (not n.is_dir, n.name.lower()))
            for i, child in enumerate(sorted_children):
                yield from write_node(child, prefix, i == len(sorted_children) - 1)

        yield root.name if root.name.endswith(os.sep) else f"{root.name}/"
        yield from write_children(root, "")

    def get_tree_representation(self) -> str:
        """Get a complete string representation of the filesystem tree."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Rebuild the tree to reflect the current filesystem state."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self.get_tree()


def walk(root_path: PathType, exclusions: ExclusionSpec = None, ignore_errors: bool = False) -> TreeResult:
    """Walk a directory and return the sorted lists of its directories and files.

    Args:
        root_path: The directory to walk.
        exclusions: Exclusion directive, see
            :func:`dirtools.exclusion_rules.compile_exclusions`.
        ignore_errors: Return empty lists instead of raising when the root is not a
            directory.

    Returns:
        A TreeResult whose ``directories`` start with the (normalized) root.

    Raises:
        DirectoryNotFoundError: If the root is missing or not a directory and
            ``ignore_errors`` is False.
        InvalidInputError: If the exclusion directive has an unsupported type.

    Example:
        >>> dirs, files = walk("/tmp/exampleDir/", True)  # doctest: +SKIP
        >>> dirs[0]  # doctest: +SKIP
        '/tmp/exampleDir'
    """
    tree = FileSystemTree(root_path, compile_exclusions(exclusions))
    try:
        return TreeResult(tree.get_directories(), tree.get_files())
    except DirectoryNotFoundError as e:
        if not ignore_errors:
            raise
        logger.warning("Ignoring error: %s", e)
        return TreeResult([], [])
