"""ANSI escape sequence styling for terminal output."""

from dataclasses import dataclass, replace
from typing import ClassVar, List, Optional, Tuple

RESET = "\x1b[0m"


@dataclass(frozen=True)
class Color:
    """A foreground color expressed as SGR parameters.

    Attributes:
        codes: The SGR parameters selecting this color, e.g. ``("32",)`` for green
            or ``("38", "2", "255", "0", "0")`` for RGB red.

    Example:
        >>> Color.rgb(255, 128, 0).codes
        ('38', '2', '255', '128', '0')
        >>> Color.GREEN.codes
        ('32',)
    """

    codes: Tuple[str, ...]

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    DARK_GRAY: ClassVar["Color"]
    LIGHT_RED: ClassVar["Color"]
    LIGHT_GREEN: ClassVar["Color"]
    LIGHT_YELLOW: ClassVar["Color"]
    LIGHT_BLUE: ClassVar["Color"]
    LIGHT_MAGENTA: ClassVar["Color"]
    LIGHT_CYAN: ClassVar["Color"]
    LIGHT_GRAY: ClassVar["Color"]

    @classmethod
    def fixed(cls, index: int) -> "Color":
        """Return one of the 256 indexed terminal colors."""
        return cls(("38", "5", str(index)))

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Return a 24-bit color."""
        return cls(("38", "2", str(red), str(green), str(blue)))


# Named colors are Color instances, so they can only be assigned after the class body.
Color.BLACK = Color(("30",))
Color.RED = Color(("31",))
Color.GREEN = Color(("32",))
Color.YELLOW = Color(("33",))
Color.BLUE = Color(("34",))
Color.MAGENTA = Color(("35",))
Color.CYAN = Color(("36",))
Color.WHITE = Color(("37",))
Color.DARK_GRAY = Color(("90",))
Color.LIGHT_RED = Color(("91",))
Color.LIGHT_GREEN = Color(("92",))
Color.LIGHT_YELLOW = Color(("93",))
Color.LIGHT_BLUE = Color(("94",))
Color.LIGHT_MAGENTA = Color(("95",))
Color.LIGHT_CYAN = Color(("96",))
Color.LIGHT_GRAY = Color(("97",))


@dataclass(frozen=True)
class Style:
    """A combination of foreground color and font attributes.

    A style with no color and no attributes is plain: painting with it returns the
    text unchanged.

    Example:
        >>> Style(bold=True).paint("name")
        '\\x1b[1mname\\x1b[0m'
        >>> Style().paint("name")
        'name'
        >>> Style(bold=True).paint("name", enabled=False)
        'name'
    """

    foreground: Optional[Color] = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False

    def fg(self, color: Optional[Color]) -> "Style":
        """Return a copy of this style with a different foreground color."""
        return replace(self, foreground=color)

    @property
    def is_plain(self) -> bool:
        return self.foreground is None and not (self.bold or self.dimmed or self.italic or self.underline)

    def prefix(self) -> str:
        """Return the escape sequence that switches this style on."""
        if self.is_plain:
            return ""
        codes: List[str] = []
        if self.bold:
            codes.append("1")
        if self.dimmed:
            codes.append("2")
        if self.italic:
            codes.append("3")
        if self.underline:
            codes.append("4")
        if self.foreground is not None:
            codes.extend(self.foreground.codes)
        return f"\x1b[{';'.join(codes)}m"

    def paint(self, text: str, enabled: bool = True) -> str:
        """Wrap text in this style's escape sequences.

        Args:
            text: The text to style.
            enabled: When False, the text is returned unchanged.

        Returns:
            The styled text.
        """
        if not enabled or self.is_plain or not text:
            return text
        return f"{self.prefix()}{text}{RESET}"


def color_from_hex(hex_color: str) -> Optional[Color]:
    """Convert a ``#rrggbb`` color into an RGB color.

    Only six-digit hex colors are accepted. Anything else, including malformed hex
    digits, yields None (the terminal's default color).

    Args:
        hex_color: The color, with or without the leading ``#``.

    Returns:
        The RGB color, or None.

    Example:
        >>> color_from_hex("#ff8000").codes
        ('38', '2', '255', '128', '0')
        >>> color_from_hex("#fff") is None
        True
    """
    trimmed = hex_color.strip("#")
    if len(trimmed) != 6:
        return None
    try:
        return Color.rgb(int(trimmed[0:2], 16), int(trimmed[2:4], 16), int(trimmed[4:6], 16))
    except ValueError:
        return None
