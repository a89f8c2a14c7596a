"""Exclusion of hidden entries (names starting with a dot)."""

import posixpath

from .base_rules import BaseExclusionRules


class HiddenExclusionRules(BaseExclusionRules):
    """Exclude every entry whose name starts with a dot.

    Example:
        >>> rules = HiddenExclusionRules()
        >>> rules.exclude(".git/")
        True
        >>> rules.exclude("src/.env")
        True
        >>> rules.exclude("src/main.py")
        False
    """

    def exclude(self, path: str) -> bool:
        return posixpath.basename(path.rstrip("/")).startswith(".")
