"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .compiler import compile_exclusions
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .name_rules import NameExclusionRules
from .size_rules import SizeExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "NameExclusionRules",
    "SizeExclusionRules",
    "compile_exclusions",
]
