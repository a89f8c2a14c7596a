"""Terminal styling lookups: ANSI styles, LS_COLORS and file-type icons."""

from .ansi import Color, Style, color_from_hex
from .color_choice import ColorChoice
from .icons import FileIcon, icon_for_file
from .ls_colors import LsColors

__all__ = [
    "Color",
    "ColorChoice",
    "FileIcon",
    "LsColors",
    "Style",
    "color_from_hex",
    "icon_for_file",
]
