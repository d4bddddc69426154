"""Exclusion rules matching entry names, with optional hiding of dot-entries."""

import re
from typing import Iterable, List, Optional, Pattern, Tuple

from .base_rules import BaseExclusionRules


def _compile_pattern(pattern: str) -> Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error:
        return re.compile(re.escape(pattern))


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules that look only at the basename of each entry.

    This is the compiled form of the exclusion directive accepted by
    :func:`dirtools.filesystem.dir_tree`. It carries two independent settings:

    - ``hide_dot_entries``: exclude every file or directory whose name starts with a dot.
    - ``name_patterns``: names or regular expression fragments. An entry is excluded
      when its basename equals a pattern. Beyond that, a directory is excluded when a
      pattern matches its whole name (a directory exclusion names a path segment),
      while a file is excluded when a pattern matches anywhere in its name. Patterns
      that are not valid regular expressions are matched literally.

    Instances are immutable: they are built once per walk and discarded afterwards.

    Attributes:
        hide_dot_entries (bool): Whether dot-files and dot-directories are excluded.
        name_patterns (frozenset): The name patterns, without the ``"."`` marker.

    Example:
        >>> rules = NameExclusionRules(hide_dot_entries=True)
        >>> rules.exclude(".hiddenFile")
        True
        >>> rules.exclude("sub/.hidden/")
        True
        >>> rules.exclude("sub/file.txt")
        False
        >>> rules = NameExclusionRules(name_patterns=["subDir2", "file2"])
        >>> rules.exclude("subDir2/")
        True
        >>> rules.exclude("subDir20/")
        False
        >>> rules.exclude("subDir1/file2.txt")
        True
    """

    def __init__(self, hide_dot_entries: bool = False, name_patterns: Optional[Iterable[str]] = None) -> None:
        """Initialize name-based exclusion rules.

        Args:
            hide_dot_entries: Exclude entries whose name starts with a dot.
            name_patterns: Names or regular expression fragments to exclude. Empty
                strings are ignored, since they would match every name.
        """
        self._hide_dot_entries = bool(hide_dot_entries)
        self._name_patterns = frozenset(p for p in (name_patterns or ()) if p)
        self._compiled: List[Tuple[str, Pattern[str]]] = [
            (pattern, _compile_pattern(pattern)) for pattern in sorted(self._name_patterns)
        ]

    @property
    def hide_dot_entries(self) -> bool:
        return self._hide_dot_entries

    @property
    def name_patterns(self) -> frozenset:
        return self._name_patterns

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on its basename.

        Args:
            path: Relative path with ``/`` separators. A trailing ``/`` marks a directory.

        Returns:
            True if the entry is a dot-entry and dot-entries are hidden, or if its
            basename matches one of the name patterns.
        """
        is_dir = path.endswith("/")
        name = path.rstrip("/").rsplit("/", 1)[-1]

        if self._hide_dot_entries and name.startswith("."):
            return True

        for pattern, regex in self._compiled:
            if name == pattern:
                return True
            if is_dir:
                if regex.fullmatch(name):
                    return True
            elif regex.search(name):
                return True
        return False

    def has_rules(self) -> bool:
        """Check if any rule is configured.

        Returns:
            False for the "no exclusions" case, True otherwise.
        """
        return self._hide_dot_entries or bool(self._name_patterns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameExclusionRules):
            return NotImplemented
        return self._hide_dot_entries == other._hide_dot_entries and self._name_patterns == other._name_patterns

    def __hash__(self) -> int:
        return hash((self._hide_dot_entries, self._name_patterns))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(hide_dot_entries={self._hide_dot_entries!r}, "
            f"name_patterns={sorted(self._name_patterns)!r})"
        )
