from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtools.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    This class serves as a contract for the rule types a directory walk can be filtered
    with (e.g., name patterns, .gitignore-style rules, size-based rules). All
    implementations must decide whether a given path is excluded. File loading and
    individual rule addition are optional capabilities that depend on the rule type.

    Paths handed to :meth:`exclude` are relative to the root of the walk and always use
    forward slashes. Directories are passed with a trailing slash (``"build/"``), files
    without one (``"build/output.o"``), the same convention .gitignore files use. A walk
    asks about a directory before descending into it, so excluding a directory prunes
    everything below it.

    Example:
        >>> from dirtools.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(hide_dot_entries=True, name_patterns={"cache"})
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("src/cache/")
        True
        >>> rules.exclude("src/main.py")
        False
        >>>
        >>> from dirtools.exclusion_rules.size_rules import SizeExclusionRules
        >>> size_rules = SizeExclusionRules('1MB')  # Constructor-only configuration
        >>> size_rules.max_size_bytes
        1000000
        >>> # size_rules.load_rules('file.txt')  # Would raise NotImplementedError
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The file or directory path to check, relative to the root of the
                walk, with ``/`` separators and a trailing ``/`` for directories.

        Returns:
            bool: True if the path should be excluded, False if it should be included.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("build/temp.tmp")
            True
            >>> rules.exclude("main.py")
            False
        """
        pass

    def has_rules(self) -> bool:
        """
        Check if this object can exclude anything at all.

        Walks use this to skip rule evaluation entirely when nothing is configured.
        Subclasses that can be empty override it.

        Returns:
            bool: True unless the subclass knows it is empty.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        This method may be overridden by subclasses that support file-based rule loading
        (e.g., .gitignore-style rules). Rule types that don't support file operations
        use the default implementation which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a gitignore pattern like "*.pyc", or a bare name).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
