"""Composite exclusion rules for combining multiple rule sets."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule sets.

    A path is excluded if ANY of the constituent rules excludes it. The walker
    uses this to stack the hidden-entry filter, user supplied patterns and the
    ignore files of every directory on the way down to an entry.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from any2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from any2tree.exclusion_rules.hidden_rules import HiddenExclusionRules
        >>> patterns = GitIgnoreExclusionRules()
        >>> patterns.add_rule("*.log")
        >>> composite = CompositeExclusionRules([HiddenExclusionRules(), patterns])
        >>> composite.exclude(".env")
        True
        >>> composite.exclude("app.log")
        True
        >>> composite.exclude("main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path is excluded by any constituent rule.

        Evaluation stops at the first rule that excludes the path.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def extended(self, rule: BaseExclusionRules) -> "CompositeExclusionRules":
        """Return a new composite with one more rule set appended.

        The original composite is left untouched, so a parent directory's rules
        can be shared by all of its children.

        Args:
            rule: The exclusion rule object to add.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        return CompositeExclusionRules([*self.rules, rule])
