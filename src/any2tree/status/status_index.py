"""Status index mapping walked paths to version-control status."""

from pathlib import Path, PurePosixPath
from typing import Callable, Dict, Mapping, Optional, Tuple

from any2tree.status.file_status import FileStatus
from any2tree.status.git_source import load_git_status
from any2tree.types import PathType

# A status source takes a path inside a repository and returns the repository
# root together with statuses keyed by repository-relative POSIX path, or None
# when the path is not inside a repository.
StatusSource = Callable[[Path], Optional[Tuple[Path, Mapping[str, FileStatus]]]]


class StatusIndex:
    """Read-only lookup of version-control status by absolute path.

    The index translates between the walker's path space (absolute paths below
    the walk root) and the status source's path space (paths relative to the
    repository root). Lookups never raise: any path that cannot be resolved or
    lies outside the repository simply has no status.

    Attributes:
        repo_root (Path): Canonical path of the repository root.

    Example:
        >>> index = StatusIndex(Path("/repo"), {"src/main.py": FileStatus.MODIFIED})
        >>> index.get_relative("src/main.py")
        <FileStatus.MODIFIED: 'modified'>
        >>> index.get_relative("README.md") is None
        True
    """

    def __init__(self, repo_root: PathType, statuses: Mapping[str, FileStatus]) -> None:
        self.repo_root = Path(repo_root)
        self._statuses: Dict[PurePosixPath, FileStatus] = {
            PurePosixPath(relative): status for relative, status in statuses.items()
        }

    @classmethod
    def build(cls, path: PathType, source: StatusSource = load_git_status) -> Optional["StatusIndex"]:
        """Build the index for the repository containing a path.

        All status computation is delegated to the source; the index only stores
        the result.

        Args:
            path: A path inside the repository, typically the walk root.
            source: The status source. Defaults to the git command line source.

        Returns:
            The index, or None if the path is not inside a repository.
        """
        result = source(Path(path))
        if result is None:
            return None
        repo_root, statuses = result
        return cls(repo_root, statuses)

    def get_relative(self, relative_path: str) -> Optional[FileStatus]:
        """Look up a repository-relative POSIX path."""
        return self._statuses.get(PurePosixPath(relative_path))

    def lookup(self, absolute_path: PathType) -> Optional[FileStatus]:
        """Look up the status of an entry found during a walk.

        The path is canonicalized (symlinks and ``..`` resolved) and the
        repository root is stripped before the query.

        Args:
            absolute_path: The entry's path.

        Returns:
            The entry's status, or None if it has no notable status, cannot be
            canonicalized or lies outside the repository.
        """
        try:
            canonical = Path(absolute_path).resolve(strict=True)
            relative = canonical.relative_to(self.repo_root)
        except (OSError, RuntimeError, ValueError):
            return None
        return self._statuses.get(PurePosixPath(relative.as_posix()))
