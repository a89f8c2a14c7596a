"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from any2tree.types import PathType

from .base_rules import BaseExclusionRules

# Ignore files honored in every traversed directory, in the order they are read.
IGNORE_FILE_NAMES = (".gitignore", ".ignore")

# Repository-local excludes, read from the repository top.
GIT_INFO_EXCLUDE = Path(".git") / "info" / "exclude"


def find_repository_top(path: PathType) -> Optional[Path]:
    """Return the nearest directory at or above a path that holds a ``.git`` entry.

    Args:
        path: A directory, ideally canonical.

    Returns:
        The repository top, or None if the path is not inside a repository.
    """
    path = Path(path)
    for directory in (path, *path.parents):
        if (directory / ".git").exists():
            return directory
    return None


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library exactly the way Git matches
    them: globs, directory-only patterns ending in ``/``, ``!`` negation, ``**``
    and ``#`` comments are all supported. Later patterns override earlier ones.

    Rules can be scoped to a directory below the walk root. A rule set loaded
    from ``docs/.gitignore`` has the base path ``docs/``: it only applies to
    entries below ``docs/``, and its patterns are matched against paths relative
    to ``docs/``, just like Git does for nested ignore files.

    Rules can also come from above the walk root. A rule set loaded from the
    ``.gitignore`` of the walk root's parent is given the path prefix ``sub/``
    (the walk root's name): every queried path is prefixed with it before
    matching, so the patterns see paths relative to the directory that holds
    the ignore file.

    Attributes:
        base_path (str): Walk-root-relative directory the rules apply to, with a
            trailing slash, or "" for the walk root.
        path_prefix (str): Path of the walk root relative to the directory the
            rules were loaded from, with a trailing slash, or "".

    Example:
        >>> rules = GitIgnoreExclusionRules(base_path="docs/")
        >>> rules.add_rule("/build/")
        >>> rules.exclude("docs/build/")
        True
        >>> rules.exclude("build/")
        False

    Note:
        Paths provided to exclude() must use forward slashes, even on Windows.
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base_path: str = "",
        path_prefix: str = "",
    ) -> None:
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.
            base_path: Walk-root-relative directory the rules apply to.
            path_prefix: Walk root relative to the rules' directory, for rules
                loaded above the walk root.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if base_path and not base_path.endswith("/"):
            base_path += "/"
        self.base_path = base_path
        if path_prefix and not path_prefix.endswith("/"):
            path_prefix += "/"
        self.path_prefix = path_prefix
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(GitWildMatchPattern, [])

        if rules_files is not None:
            self.load_rules(rules_files)

    @classmethod
    def from_directory(
        cls,
        directory: PathType,
        base_path: str = "",
        include_git_exclude: bool = False,
        path_prefix: str = "",
    ) -> Optional["GitIgnoreExclusionRules"]:
        """Collect the ignore files present in a directory.

        Args:
            directory: The directory to look in.
            base_path: Walk-root-relative path of that directory.
            include_git_exclude: Also read ``.git/info/exclude``.
            path_prefix: Walk root relative to the directory, when the
                directory is one of the walk root's ancestors.

        Returns:
            Rules scoped to the directory, or None if it holds no ignore file.

        Raises:
            OSError: If an ignore file exists but cannot be read.
        """
        directory = Path(directory)
        candidates = [directory / GIT_INFO_EXCLUDE] if include_git_exclude else []
        candidates.extend(directory / name for name in IGNORE_FILE_NAMES)
        found = [candidate for candidate in candidates if candidate.is_file()]
        if not found:
            return None
        return cls(found, base_path=base_path, path_prefix=path_prefix)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Walk-root-relative path, with a trailing slash for directories.

        Returns:
            bool: True if the path is inside the base path and its last matching
                pattern is not a negation.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.log")
            >>> rules.add_rule("!keep.log")
            >>> rules.exclude("app.log")
            True
            >>> rules.exclude("keep.log")
            False
        """
        if self.base_path:
            if not path.startswith(self.base_path):
                return False
            path = path[len(self.base_path) :]
        return bool(self.spec.match_file(self.path_prefix + path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern.

        Args:
            rule: A single pattern, e.g. "*.pyc", "node_modules/" or "!important.txt".
        """
        self._lines.append(rule)
        self._compile()

    def has_rules(self) -> bool:
        # Blank lines and comments compile to patterns that never match.
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self._lines)
