from os import PathLike
from typing import TYPE_CHECKING, Iterable, List, NamedTuple, Union

if TYPE_CHECKING:
    from dirtools.exclusion_rules.base_rules import BaseExclusionRules

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Anything accepted where an exclusion directive is expected
ExclusionSpec = Union[None, bool, str, Iterable[str], "BaseExclusionRules"]


class TreeResult(NamedTuple):
    """Flat result of a directory walk.

    Unpacks like a pair, so ``dirs, files = dir_tree(path)`` works.

    Attributes:
        directories: The root directory followed by every non-excluded descendant
            directory, sorted by full path.
        files: Every non-excluded file under the non-excluded directories, sorted
            by full path.
    """

    directories: List[str]
    files: List[str]
