"""File-type icon lookup.

Icons are Nerd Font glyphs, so they only display correctly in a terminal that
uses a patched font.
"""

from typing import Dict, NamedTuple


class FileIcon(NamedTuple):
    """An icon glyph and the hex color it is drawn in."""

    symbol: str
    color: str


DEFAULT_FILE_ICON = FileIcon("", "#7e8e91")
DEFAULT_DIRECTORY_ICON = FileIcon("", "#7e8e91")

_DIRECTORY_ICONS: Dict[str, FileIcon] = {
    ".git": FileIcon("", "#f54d27"),
    ".github": FileIcon("", "#7e8e91"),
    "node_modules": FileIcon("", "#e8274b"),
}

_NAME_ICONS: Dict[str, FileIcon] = {
    ".gitignore": FileIcon("", "#f54d27"),
    ".gitattributes": FileIcon("", "#f54d27"),
    ".gitmodules": FileIcon("", "#f54d27"),
    "cargo.lock": FileIcon("", "#dea584"),
    "cargo.toml": FileIcon("", "#dea584"),
    "dockerfile": FileIcon("", "#458ee6"),
    "license": FileIcon("", "#d0bf41"),
    "makefile": FileIcon("", "#6d8086"),
    "pyproject.toml": FileIcon("", "#ffbc03"),
}

_EXTENSION_ICONS: Dict[str, FileIcon] = {
    "c": FileIcon("", "#599eff"),
    "cpp": FileIcon("", "#519aba"),
    "css": FileIcon("", "#42a5f5"),
    "gif": FileIcon("", "#a074c4"),
    "go": FileIcon("", "#519aba"),
    "gz": FileIcon("", "#eca517"),
    "h": FileIcon("", "#a074c4"),
    "html": FileIcon("", "#e44d26"),
    "java": FileIcon("", "#cc3e44"),
    "jpeg": FileIcon("", "#a074c4"),
    "jpg": FileIcon("", "#a074c4"),
    "js": FileIcon("", "#cbcb41"),
    "json": FileIcon("", "#cbcb41"),
    "lock": FileIcon("", "#bbbbbb"),
    "md": FileIcon("", "#dddddd"),
    "nu": FileIcon("❯", "#3aa675"),
    "png": FileIcon("", "#a074c4"),
    "py": FileIcon("", "#ffbc03"),
    "rb": FileIcon("", "#701516"),
    "rs": FileIcon("", "#dea584"),
    "sh": FileIcon("", "#4d5a5e"),
    "svg": FileIcon("", "#ffb13b"),
    "tar": FileIcon("", "#eca517"),
    "toml": FileIcon("", "#9c4221"),
    "ts": FileIcon("", "#519aba"),
    "txt": FileIcon("", "#89e051"),
    "yaml": FileIcon("", "#6d8086"),
    "yml": FileIcon("", "#6d8086"),
    "zip": FileIcon("", "#eca517"),
}


def icon_for_file(name: str, is_dir: bool = False) -> FileIcon:
    """Look up the icon for a file or directory name.

    Exact (case-insensitive) names win over extensions. Unknown names get the
    default file or directory icon, so the lookup never fails.

    Args:
        name: The entry's file name.
        is_dir: Whether the entry is a directory.

    Returns:
        The icon glyph and its hex color.

    Example:
        >>> icon_for_file("main.py").color
        '#ffbc03'
        >>> icon_for_file("unknown.xyz") == DEFAULT_FILE_ICON
        True
    """
    if is_dir:
        return _DIRECTORY_ICONS.get(name, DEFAULT_DIRECTORY_ICON)

    lowered = name.lower()
    if lowered in _NAME_ICONS:
        return _NAME_ICONS[lowered]

    _, dot, extension = lowered.rpartition(".")
    if dot and extension in _EXTENSION_ICONS:
        return _EXTENSION_ICONS[extension]
    return DEFAULT_FILE_ICON
