"""Directory walking and per-entry decoration.

This package enumerates the entries below a root directory, filters them with
exclusion rules, depth limits and type filters, and turns each surviving entry
into a decorated display line.
"""

from .decorated_line import DecoratedLine
from .directory_walker import DirectoryWalker, report_error
from .file_entry import FileEntry, WalkCounts
from .line_decorator import LineDecorator, format_permissions
from .walk_options import WalkOptions

__all__ = [
    "DecoratedLine",
    "DirectoryWalker",
    "FileEntry",
    "LineDecorator",
    "WalkCounts",
    "WalkOptions",
    "format_permissions",
    "report_error",
]
