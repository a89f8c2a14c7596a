"""Walk results: single filesystem entries and running totals."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class FileEntry:
    """One entry found during a directory walk.

    Cheap facts (path, depth, type) are known when the entry is created.
    Metadata is only read from the filesystem the first time it is asked for,
    so entries that are never decorated with a size or permissions never cost a
    stat call.

    Attributes:
        path (Path): Absolute path of the entry.
        relative_path (str): Path relative to the walk root, with forward slashes.
        depth (int): Distance from the walk root; children of the root are at depth 1.
        is_dir (bool): Whether the entry is a directory (or a followed symlink to one).
        is_symlink (bool): Whether the entry itself is a symbolic link.
    """

    def __init__(
        self,
        path: Path,
        relative_path: str,
        depth: int,
        is_dir: bool,
        is_symlink: bool = False,
        follow_symlinks: bool = False,
    ) -> None:
        self.path = path
        self.relative_path = relative_path
        self.depth = depth
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        self._follow_symlinks = follow_symlinks
        self._metadata: Optional[os.stat_result] = None
        self._metadata_loaded = False

    def __repr__(self) -> str:
        return f"FileEntry({self.relative_path!r}, depth={self.depth}, is_dir={self.is_dir})"

    @property
    def name(self) -> str:
        return self.path.name

    def metadata(self) -> Optional[os.stat_result]:
        """Stat the entry on first use.

        Symlinks are not followed unless the walk follows them.

        Returns:
            The stat result, or None if the entry cannot be stat'ed.
        """
        if not self._metadata_loaded:
            self._metadata_loaded = True
            try:
                self._metadata = os.stat(self.path, follow_symlinks=self._follow_symlinks)
            except OSError:
                self._metadata = None
        return self._metadata

    @property
    def size(self) -> Optional[int]:
        """Byte length of a file; None for directories or when unavailable."""
        if self.is_dir:
            return None
        metadata = self.metadata()
        return metadata.st_size if metadata is not None else None

    @property
    def mode(self) -> Optional[int]:
        """Raw permission bits; None when unavailable or on non-POSIX platforms."""
        if os.name != "posix":
            return None
        metadata = self.metadata()
        return metadata.st_mode if metadata is not None else None


@dataclass
class WalkCounts:
    """Running totals of the entries emitted by a walk.

    Example:
        >>> counts = WalkCounts()
        >>> counts.add(is_dir=True)
        >>> counts.add(is_dir=False)
        >>> counts.summary()
        '1 directories, 1 files'
    """

    directories: int = 0
    files: int = 0

    def add(self, is_dir: bool) -> None:
        if is_dir:
            self.directories += 1
        else:
            self.files += 1

    def reset(self) -> None:
        self.directories = 0
        self.files = 0

    def summary(self) -> str:
        return f"{self.directories} directories, {self.files} files"
