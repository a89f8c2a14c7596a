"""Exclusion rules for filtering entries out of a directory walk."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import IGNORE_FILE_NAMES, GitIgnoreExclusionRules
from .hidden_rules import HiddenExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GitIgnoreExclusionRules",
    "HiddenExclusionRules",
    "IGNORE_FILE_NAMES",
]
