"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dirtools.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore
    pattern matching. It uses the pathspec library to match paths against patterns the
    same way Git does, so it can be handed to :func:`dirtools.filesystem.dir_tree` or
    :func:`dirtools.filesystem.unlink_recursive` wherever an exclusion directive is
    accepted.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Rules from several files, and rules added one by one with add_rule(), are combined
    in the order they were given; later rules can override earlier ones (particularly
    with negation patterns).

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude("node_modules/")
        True
        >>> rules.add_rule("*.log")
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.exclude("app.py")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        Args:
            path: The relative path to check, with a trailing ``/`` for directories.

        Returns:
            bool: True if the path matches a non-negated pattern that isn't overridden by
                a later negated pattern, False otherwise.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("test.pyc")
            True
            >>> rules.exclude("important.pyc")
            False
        """
        return bool(self.spec.match_file(path))

    def has_rules(self) -> bool:
        # Blank and comment lines compile to patterns that never match
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.

        Example:
            >>> import os, tempfile
            >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
            ...     _ = f.write('*.txt\\n!important.txt\\n')
            >>> rules = GitIgnoreExclusionRules(f.name)
            >>> rules.exclude("notes.txt"), rules.exclude("important.txt")
            (True, False)
            >>> os.unlink(f.name)
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        # Check every file before touching the current rules
        paths = [Path(rules_file) for rules_file in rules_files]
        for path in paths:
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

        for path in paths:
            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern (e.g., "*.pyc", "build/", "!keep.txt").
        """
        self._lines.append(rule)
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
