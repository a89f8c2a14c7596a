"""Render-ready representation of a single walked entry."""

from dataclasses import dataclass
from typing import Optional

CONNECTOR = "└── "


@dataclass(frozen=True)
class DecoratedLine:
    """A fully resolved display line for one filesystem entry.

    Every piece is already styled; rendering only concatenates them. Pieces that
    are not displayed are None.

    Attributes:
        depth: Depth of the entry below the walk root (at least 1).
        is_dir: Whether the entry is a directory.
        name: The styled entry name.
        status: Status glyph followed by a space, or two spaces when the entry
            has no notable status.
        permissions: Permission string followed by a space.
        icon: Icon glyph followed by a space.
        size: Size suffix, e.g. `` (4 KiB)``.

    Example:
        >>> DecoratedLine(depth=2, is_dir=False, name="main.py", size=" (12 bytes)").render()
        '    └── main.py (12 bytes)'
    """

    depth: int
    is_dir: bool
    name: str
    status: Optional[str] = None
    permissions: Optional[str] = None
    icon: Optional[str] = None
    size: Optional[str] = None

    def render(self, indent_width: int = 4) -> str:
        """Join the pieces into the final line text (without a newline)."""
        indent = " " * indent_width * max(self.depth - 1, 0)
        return (
            f"{self.status or ''}{self.permissions or ''}{indent}{CONNECTOR}"
            f"{self.icon or ''}{self.name}{self.size or ''}"
        )
