"""Directory walker with exclusion rules, depth limits and type filters.

This module provides the DirectoryWalker class, which enumerates the entries
below a root directory in a deterministic order and applies every filter
before an entry is handed on for decoration.
"""

import os
import sys
from pathlib import Path
from typing import Callable, FrozenSet, Iterator, List, Optional

from any2tree.exceptions import FileSystemLoopError
from any2tree.exclusion_rules.base_rules import BaseExclusionRules
from any2tree.exclusion_rules.composite_rules import CompositeExclusionRules
from any2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules, find_repository_top
from any2tree.exclusion_rules.hidden_rules import HiddenExclusionRules
from any2tree.file_system_tree.file_entry import FileEntry, WalkCounts
from any2tree.file_system_tree.file_identifier import FileIdentifier
from any2tree.file_system_tree.walk_options import WalkOptions
from any2tree.types import PathType

ErrorHandler = Callable[[OSError], None]


def report_error(error: OSError) -> None:
    """Default error handler: print the error to standard error."""
    print(f"Error: {error}", file=sys.stderr)


class DirectoryWalker:
    """Depth-first walker over the entries below a root directory.

    The walk is pre-order: a directory is emitted before its contents, and the
    children of every directory are visited sorted by name. The root itself is
    never emitted.

    Filters run before anything else is done with an entry, in this order:
    depth limit, hidden entries, ignore rules, directories-only. Hidden and
    ignored directories are not descended into; the directories-only filter
    just suppresses files.

    Ignore files are scoped: a ``.gitignore`` found in ``docs/`` only affects
    entries below ``docs/``. When the root lies inside a repository, the ignore
    files of its ancestors up to the repository top apply as well, together
    with that repository's ``.git/info/exclude``.

    Errors on individual entries (an unreadable directory, an entry that cannot
    be typed, a symlink loop) are passed to the error handler once and the walk
    continues with the next entry.

    Attributes:
        root_path (Path): The directory being walked.
        options (WalkOptions): Walk configuration.
        counts (WalkCounts): Directories and files emitted so far.

    Example:
        >>> walker = DirectoryWalker("src", WalkOptions(max_depth=1))  # doctest: +SKIP
        >>> [entry.relative_path for entry in walker.walk()]  # doctest: +SKIP
        ['any2tree']
        >>> walker.counts.summary()  # doctest: +SKIP
        '1 directories, 0 files'
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[WalkOptions] = None,
        *,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """Initialize a DirectoryWalker.

        Args:
            root_path: The directory to walk.
            options: Walk configuration. Defaults to WalkOptions().
            error_handler: Called once for every entry that had to be skipped
                because of an error. Defaults to printing to standard error.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        self.root_path = Path(root_path)
        if not self.root_path.exists():
            raise FileNotFoundError(f"'{self.root_path}' does not exist.")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"'{self.root_path}' is not a directory.")

        self.options = options if options is not None else WalkOptions()
        self.error_handler = error_handler if error_handler is not None else report_error
        self.counts = WalkCounts()

    def walk(self) -> Iterator[FileEntry]:
        """Walk the tree and yield every entry that passes the filters.

        The counts are reset when the walk starts and updated as entries are
        yielded, so they are final once the iterator is exhausted.

        Yields:
            FileEntry objects in pre-order.
        """
        self.counts.reset()
        root = self.root_path.absolute()
        rules = self._root_rules(root)

        ancestors: FrozenSet[FileIdentifier] = frozenset()
        if self.options.follow_symlinks:
            root_id = FileIdentifier.from_path(root)
            if root_id is not None:
                ancestors = frozenset([root_id])

        yield from self._walk_directory(root, "", 1, rules, ancestors)

    def _root_rules(self, root: Path) -> Optional[CompositeExclusionRules]:
        rules: List[BaseExclusionRules] = []
        if not self.options.show_hidden:
            rules.append(HiddenExclusionRules())
        if self.options.exclusion_rules is not None:
            rules.append(self.options.exclusion_rules)
        if self.options.respect_ignore_files:
            rules.extend(self._parent_ignore_rules(root))
        return CompositeExclusionRules(rules) if rules else None

    def _parent_ignore_rules(self, root: Path) -> List[BaseExclusionRules]:
        """Load the ignore files between the repository top and the root's parent."""
        canonical = root.resolve()
        top = find_repository_top(canonical)
        if top is None or top == canonical:
            return []

        found: List[BaseExclusionRules] = []
        for directory in reversed(canonical.parents):
            if directory != top and top not in directory.parents:
                continue
            prefix = canonical.relative_to(directory).as_posix()
            try:
                rules = GitIgnoreExclusionRules.from_directory(
                    directory, include_git_exclude=directory == top, path_prefix=prefix
                )
            except OSError as e:
                self.error_handler(e)
                continue
            if rules is not None:
                found.append(rules)
        return found

    def _load_ignore_files(
        self, directory: Path, relative_dir: str, depth: int, rules: Optional[CompositeExclusionRules]
    ) -> Optional[CompositeExclusionRules]:
        try:
            found = GitIgnoreExclusionRules.from_directory(directory, relative_dir, include_git_exclude=depth == 1)
        except OSError as e:
            self.error_handler(e)
            return rules
        if found is None:
            return rules
        if rules is None:
            return CompositeExclusionRules([found])
        return rules.extended(found)

    def _walk_directory(
        self,
        directory: Path,
        relative_dir: str,
        depth: int,
        rules: Optional[CompositeExclusionRules],
        ancestors: FrozenSet[FileIdentifier],
    ) -> Iterator[FileEntry]:
        """Yield the filtered entries of one directory and, recursively, their contents."""
        if self.options.max_depth is not None and depth > self.options.max_depth:
            return

        if self.options.respect_ignore_files:
            rules = self._load_ignore_files(directory, relative_dir, depth, rules)

        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda child: child.name)
        except OSError as e:
            self.error_handler(e)
            return

        for child in children:
            relative_path = relative_dir + child.name
            try:
                is_symlink = child.is_symlink()
                is_dir = child.is_dir(follow_symlinks=self.options.follow_symlinks)
            except OSError as e:
                self.error_handler(e)
                continue

            # Directory patterns such as "build/" only match with the trailing slash
            if rules is not None and rules.exclude(relative_path + "/" if is_dir else relative_path):
                continue

            child_id: Optional[FileIdentifier] = None
            if is_dir and self.options.follow_symlinks:
                child_id = FileIdentifier.from_path(child.path)
                if child_id is not None and child_id in ancestors:
                    self.error_handler(FileSystemLoopError(child.path))
                    continue

            entry = FileEntry(
                Path(child.path),
                relative_path,
                depth,
                is_dir,
                is_symlink=is_symlink,
                follow_symlinks=self.options.follow_symlinks,
            )
            if is_dir or not self.options.dirs_only:
                self.counts.add(is_dir)
                yield entry

            if is_dir:
                child_ancestors = ancestors | {child_id} if child_id is not None else ancestors
                yield from self._walk_directory(entry.path, relative_path + "/", depth + 1, rules, child_ancestors)
