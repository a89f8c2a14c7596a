"""Version-control status lookups for directory walks."""

from .file_status import FileStatus
from .git_source import load_git_status
from .status_index import StatusIndex, StatusSource

__all__ = ["FileStatus", "StatusIndex", "StatusSource", "load_git_status"]
