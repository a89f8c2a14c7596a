from abc import ABC, abstractmethod
from typing import Sequence, Union

from any2tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide which entries a directory walk skips. The walker asks
    the rules about each entry before doing any other work on it, so an excluded
    entry is never stat'ed, decorated or descended into.

    Paths passed to exclude() are relative to the walk root, use forward slashes,
    and carry a trailing slash for directories (``src/``, ``src/main.py``).

    Example:
        >>> from any2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("*.pyc")
        >>> rules.exclude("cache/module.pyc")
        True
        >>> rules.exclude("module.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            path (str): The walk-root-relative path of the entry, with a trailing
                slash for directories.

        Returns:
            bool: True if the entry should be skipped, False if it should be kept.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types without a file format keep this default implementation.

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
            rule (str): The exclusion rule to add, e.g. a gitignore pattern like "*.pyc".

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """
        Check whether these rules can exclude anything at all.

        Returns:
            bool: True unless the rules are known to be empty.
        """
        return True
