"""Style configuration for drawing display trees."""

from dataclasses import dataclass, field

from any2tree.exceptions import InvalidRenderStyleError
from any2tree.styling.ansi import Color, Style


@dataclass(frozen=True)
class RenderStyle:
    """How a display tree is drawn.

    Attributes:
        indent: Width of one nesting level, connector included. At least 2.
        branch: Style of the connector characters.
        leaf: Style of the node labels.
        color: Whether styles are emitted at all.

    Example:
        >>> RenderStyle().indent
        4
        >>> RenderStyle(indent=1)
        Traceback (most recent call last):
        ...
        any2tree.exceptions.InvalidRenderStyleError: Indent must be at least 2, got 1
    """

    indent: int = 4
    branch: Style = field(default_factory=lambda: Style(foreground=Color.GREEN, dimmed=True))
    leaf: Style = field(default_factory=lambda: Style(bold=True))
    color: bool = True

    def __post_init__(self) -> None:
        if self.indent < 2:
            raise InvalidRenderStyleError(f"Indent must be at least 2, got {self.indent}")

    @property
    def last_connector(self) -> str:
        return "└" + "─" * (self.indent - 2) + " "

    @property
    def middle_connector(self) -> str:
        return "├" + "─" * (self.indent - 2) + " "

    @property
    def continuation(self) -> str:
        return "│" + " " * (self.indent - 1)

    @property
    def blank(self) -> str:
        return " " * self.indent
