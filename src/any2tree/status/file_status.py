"""File status enum for version-control decorations."""

from enum import Enum

from any2tree.styling.ansi import Color


class FileStatus(str, Enum):
    """Version-control status of a single path.

    Each status renders as a one-character glyph in a status-specific color.

    Values:
        NEW: Added to the index.
        MODIFIED: Changed in the index or the working tree.
        DELETED: Removed from the index or the working tree.
        RENAMED: Renamed in the index.
        TYPECHANGE: Changed type, e.g. a file replaced by a symlink.
        CONFLICTED: Unmerged, with conflicts to resolve.
        UNTRACKED: Not known to version control.
    """

    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    TYPECHANGE = "typechange"
    CONFLICTED = "conflicted"
    UNTRACKED = "untracked"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @property
    def color(self) -> Color:
        return _COLORS[self]


_GLYPHS = {
    FileStatus.NEW: "A",
    FileStatus.MODIFIED: "M",
    FileStatus.DELETED: "D",
    FileStatus.RENAMED: "R",
    FileStatus.TYPECHANGE: "T",
    FileStatus.CONFLICTED: "C",
    FileStatus.UNTRACKED: "?",
}

_COLORS = {
    FileStatus.NEW: Color.GREEN,
    FileStatus.RENAMED: Color.GREEN,
    FileStatus.MODIFIED: Color.YELLOW,
    FileStatus.TYPECHANGE: Color.YELLOW,
    FileStatus.DELETED: Color.RED,
    FileStatus.CONFLICTED: Color.LIGHT_RED,
    FileStatus.UNTRACKED: Color.MAGENTA,
}
