"""Exclusion rules that skip files above a size limit."""

from pathlib import Path
from typing import Optional, Union

from dirtools.types import PathType

from .base_rules import BaseExclusionRules


def parse_file_size(size_str: str) -> int:
    """Convert a size such as ``'500KB'``, ``'1GiB'`` or ``'1024'`` to a number of bytes.

    Decimal suffixes are powers of 1000, binary suffixes (``KiB``, ``MiB``) powers of 1024.

    Raises:
        ValueError: If the string is not a size.
        ImportError: If humanfriendly is not installed.

    Example:
        >>> parse_file_size("2KB")
        2000
        >>> parse_file_size("1KiB")
        1024
    """
    try:
        from humanfriendly import parse_size
    except ImportError:
        raise ImportError("Size limits need humanfriendly: pip install humanfriendly")

    try:
        return int(parse_size(size_str))
    except Exception as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")


class SizeExclusionRules(BaseExclusionRules):
    """Skip files larger than ``max_size`` bytes while walking a tree.

    Directories are never skipped. A walk hands its rules paths relative to the walked
    root, so ``base_path`` should be that root; relative paths are otherwise looked up
    from the current directory. A symbolic link is measured by its target, and a path
    that cannot be measured is kept.

    Attributes:
        max_size_bytes (int): Largest size, in bytes, a kept file may have.
        base_path (Optional[Path]): The walked root.

    Example:
        >>> rules = SizeExclusionRules("1MB")
        >>> rules.max_size_bytes
        1000000
        >>> rules.exclude("some/dir/")
        False
    """

    def __init__(self, max_size: Union[str, int], base_path: Optional[PathType] = None):
        """Set the size limit.

        Args:
            max_size: A size string for :func:`parse_file_size`, or a number of bytes.
            base_path: The root of the walk these rules filter.

        Raises:
            ValueError: If ``max_size`` is negative, unparsable or of another type.
        """
        # bool is an int subclass, but never a meaningful size
        if isinstance(max_size, str):
            self.max_size_bytes = parse_file_size(max_size)
        elif isinstance(max_size, int) and not isinstance(max_size, bool):
            if max_size < 0:
                raise ValueError("Size cannot be negative")
            self.max_size_bytes = max_size
        else:
            raise ValueError(f"max_size must be string or int, got {type(max_size)}")

        self.base_path = Path(base_path) if base_path is not None else None

    def exclude(self, path: str) -> bool:
        """Tell whether ``path`` names a regular file bigger than the limit."""
        if path.endswith("/"):
            return False

        candidate = Path(path)
        if self.base_path is not None and not candidate.is_absolute():
            candidate = self.base_path / candidate

        try:
            return candidate.is_file() and candidate.stat().st_size > self.max_size_bytes
        except OSError:
            return False

    def has_rules(self) -> bool:
        """A limit of zero bytes counts as no limit."""
        return self.max_size_bytes > 0
