"""Turn a caller-supplied exclusion directive into an exclusion rules object."""

from collections.abc import Iterable

from dirtools.exceptions import InvalidInputError
from dirtools.types import ExclusionSpec

from .base_rules import BaseExclusionRules
from .name_rules import NameExclusionRules

# Member of a pattern list meaning "also hide dot-entries"
HIDE_DOT_ENTRIES = "."


def compile_exclusions(exclusions: ExclusionSpec) -> BaseExclusionRules:
    """Compile an exclusion directive.

    Accepted forms:

    - ``None`` or ``False``: nothing is excluded.
    - ``True``: dot-files and dot-directories are excluded.
    - a string: a single name pattern (``"."`` hides dot-entries).
    - an iterable of strings: name patterns. A ``"."`` member hides dot-entries and
      is not used as a pattern.
    - a :class:`BaseExclusionRules` instance: used as-is, which lets callers pass
      gitignore-style, size-based or composite rules.

    Args:
        exclusions: The directive to compile.

    Returns:
        An exclusion rules object for a single walk.

    Raises:
        InvalidInputError: If the directive has an unsupported type.

    Example:
        >>> compile_exclusions(True)
        NameExclusionRules(hide_dot_entries=True, name_patterns=[])
        >>> compile_exclusions(["file2", ".", "subDir2"])
        NameExclusionRules(hide_dot_entries=True, name_patterns=['file2', 'subDir2'])
        >>> compile_exclusions(None).has_rules()
        False
    """
    if isinstance(exclusions, BaseExclusionRules):
        return exclusions
    if exclusions is None or exclusions is False:
        return NameExclusionRules()
    if exclusions is True:
        return NameExclusionRules(hide_dot_entries=True)
    if isinstance(exclusions, str):
        exclusions = [exclusions]
    if not isinstance(exclusions, Iterable) or isinstance(exclusions, bytes):
        raise InvalidInputError(f"Unsupported exclusions type: {type(exclusions).__name__}")

    patterns = list(exclusions)
    for pattern in patterns:
        if not isinstance(pattern, str):
            raise InvalidInputError(f"Exclusion patterns must be strings, got {type(pattern).__name__}")

    return NameExclusionRules(
        hide_dot_entries=HIDE_DOT_ENTRIES in patterns,
        name_patterns=[p for p in patterns if p != HIDE_DOT_ENTRIES],
    )
