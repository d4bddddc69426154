"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node to add the location of the entry on disk and flags
    indicating whether the node represents a directory or a symlink. Inherits tree
    traversal and manipulation capabilities from anytree.Node.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        fs_path (str): Location of the entry, joined onto the root of the walk with
            the platform separator.
        is_dir (bool): True if this node represents a directory, False for files.
        is_symlink (bool): True if this node represents a symbolic link. Links are
            never followed, so a symlink node is never a directory.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", fs_path="/tmp/root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root, fs_path="/tmp/root/file.txt")
        >>> child.parent.name
        'root'
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        fs_path: str = "",
        is_dir: bool = False,
        is_symlink: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            fs_path: Location of the entry on disk.
            is_dir: Whether this node represents a directory. Defaults to False.
            is_symlink: Whether this node represents a symbolic link. Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.fs_path = fs_path
        self.is_dir = is_dir
        self.is_symlink = is_symlink
