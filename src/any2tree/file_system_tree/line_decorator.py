"""Decoration of walked entries with status, permissions, icons, colors and sizes."""

import stat
from typing import Optional

from humanfriendly import format_size

from any2tree.file_system_tree.decorated_line import DecoratedLine
from any2tree.file_system_tree.file_entry import FileEntry
from any2tree.file_system_tree.walk_options import WalkOptions
from any2tree.status.status_index import StatusIndex
from any2tree.styling.ansi import Style, color_from_hex
from any2tree.styling.icons import icon_for_file
from any2tree.styling.ls_colors import LsColors

NO_PERMISSIONS = "----------"
NO_STATUS = "  "

_DIMMED = Style(dimmed=True)
_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def format_permissions(mode: Optional[int], is_dir: bool) -> str:
    """Format permission bits as a ten character ``ls``-style string.

    The first character is ``d`` for directories and ``-`` for everything else.

    Args:
        mode: Raw ``st_mode`` bits, or None when unavailable.
        is_dir: Whether the entry is a directory.

    Returns:
        The permission string; all dashes when the mode is unavailable.

    Example:
        >>> format_permissions(0o100644, is_dir=False)
        '-rw-r--r--'
        >>> format_permissions(0o040755, is_dir=True)
        'drwxr-xr-x'
        >>> format_permissions(None, is_dir=True)
        '----------'
    """
    if mode is None:
        return NO_PERMISSIONS
    return ("d" if is_dir else "-") + stat.filemode(mode)[1:]


class LineDecorator:
    """Turns walked entries into decorated display lines.

    Each decoration is only computed when its option is on: metadata is read
    only for sizes or permissions, the status index is consulted only for
    status, and the icon table only for icons. Lookup misses never fail; they
    produce a neutral decoration instead.

    Attributes:
        options (WalkOptions): Which decorations to produce.
        status_index (Optional[StatusIndex]): Status lookup, None outside a repository.
        ls_colors (LsColors): Filename styles.
        color_enabled (bool): Whether styles are emitted at all.
    """

    def __init__(
        self,
        options: WalkOptions,
        *,
        status_index: Optional[StatusIndex] = None,
        ls_colors: Optional[LsColors] = None,
        color_enabled: bool = True,
    ) -> None:
        self.options = options
        self.status_index = status_index
        self.ls_colors = ls_colors if ls_colors is not None else LsColors()
        self.color_enabled = color_enabled

    def decorate(self, entry: FileEntry) -> DecoratedLine:
        """Compute the display line for an entry.

        Args:
            entry: The walked entry.

        Returns:
            The decorated line, ready to be rendered.
        """
        status = self._status(entry) if self.options.show_status else None
        permissions = self._permissions(entry) if self.options.show_permissions else None
        icon = self._icon(entry) if self.options.show_icons else None
        size = self._size(entry) if self.options.show_size else None
        # The executable style only applies when sizes or permissions already need metadata.
        name = self._name(entry)
        return DecoratedLine(
            depth=entry.depth,
            is_dir=entry.is_dir,
            name=name,
            status=status,
            permissions=permissions,
            icon=icon,
            size=size,
        )

    def _paint(self, style: Style, text: str) -> str:
        return style.paint(text, enabled=self.color_enabled)

    def _status(self, entry: FileEntry) -> str:
        if self.status_index is None:
            return NO_STATUS
        status = self.status_index.lookup(entry.path)
        if status is None:
            return NO_STATUS
        return self._paint(Style(foreground=status.color), f"{status.glyph} ")

    def _permissions(self, entry: FileEntry) -> str:
        return self._paint(_DIMMED, f"{format_permissions(entry.mode, entry.is_dir)} ")

    def _icon(self, entry: FileEntry) -> str:
        icon = icon_for_file(entry.name, entry.is_dir)
        return self._paint(Style(foreground=color_from_hex(icon.color)), f"{icon.symbol} ")

    def _size(self, entry: FileEntry) -> Optional[str]:
        size = entry.size
        if size is None:
            return None
        return self._paint(_DIMMED, f" ({format_size(size, binary=True)})")

    def _name(self, entry: FileEntry) -> str:
        metadata = entry.metadata() if self.options.needs_metadata else None
        is_executable = not entry.is_dir and metadata is not None and bool(metadata.st_mode & _EXECUTABLE_BITS)
        style = self.ls_colors.style_for_path(
            entry.name, is_dir=entry.is_dir, is_symlink=entry.is_symlink, is_executable=is_executable
        )
        if style is None:
            return entry.name
        return self._paint(style, entry.name)
