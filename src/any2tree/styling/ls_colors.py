"""LS_COLORS parsing and filename styling."""

import os
from dataclasses import replace
from typing import Dict, List, Mapping, Optional

from .ansi import Color, Style

_NAMED_COLORS = [
    Color.BLACK,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
]
_LIGHT_COLORS = [
    Color.DARK_GRAY,
    Color.LIGHT_RED,
    Color.LIGHT_GREEN,
    Color.LIGHT_YELLOW,
    Color.LIGHT_BLUE,
    Color.LIGHT_MAGENTA,
    Color.LIGHT_CYAN,
    Color.LIGHT_GRAY,
]


def parse_sgr(value: str) -> Style:
    """Parse an SGR parameter string such as ``01;34`` into a style.

    Only the foreground color and the bold, italic and underline attributes are
    kept. Background colors and unknown parameters are skipped.

    Args:
        value: Semicolon separated SGR parameters.

    Returns:
        The parsed style. Unparseable input yields a plain style.

    Example:
        >>> parse_sgr("01;34") == Style(foreground=Color.BLUE, bold=True)
        True
        >>> parse_sgr("38;5;208").foreground == Color.fixed(208)
        True
    """
    try:
        codes: List[int] = [int(code) if code else 0 for code in value.split(";")]
    except ValueError:
        return Style()

    style = Style()
    i = 0
    while i < len(codes):
        code = codes[i]
        i += 1
        if code == 1:
            style = replace(style, bold=True)
        elif code == 3:
            style = replace(style, italic=True)
        elif code == 4:
            style = replace(style, underline=True)
        elif 30 <= code <= 37:
            style = style.fg(_NAMED_COLORS[code - 30])
        elif 90 <= code <= 97:
            style = style.fg(_LIGHT_COLORS[code - 90])
        elif code == 39:
            style = style.fg(None)
        elif code in (38, 48):
            # Extended colors consume their arguments; only foreground is kept.
            if i < len(codes) and codes[i] == 5 and i + 1 < len(codes):
                if code == 38:
                    style = style.fg(Color.fixed(codes[i + 1]))
                i += 2
            elif i < len(codes) and codes[i] == 2 and i + 3 < len(codes):
                if code == 38:
                    style = style.fg(Color.rgb(codes[i + 1], codes[i + 2], codes[i + 3]))
                i += 4
    return style


class LsColors:
    """Filename styles configured through the LS_COLORS convention.

    The configuration is a colon separated list of ``key=SGR`` pairs. Keys are
    either two-letter type indicators (``di`` for directories, ``ln`` for
    symlinks, ``ex`` for executables, ``fi`` for regular files) or ``*suffix``
    patterns matched against the end of the file name.

    Attributes:
        indicators (Dict[str, Style]): Styles keyed by type indicator.
        suffixes (Dict[str, Style]): Styles keyed by lower-cased name suffix.

    Example:
        >>> colors = LsColors.from_string("di=01;34:*.py=00;33")
        >>> colors.style_for_path("src", is_dir=True).bold
        True
        >>> colors.style_for_path("main.py").foreground == Color.YELLOW
        True
        >>> colors.style_for_path("README") is None
        True
    """

    def __init__(self, indicators: Optional[Dict[str, Style]] = None, suffixes: Optional[Dict[str, Style]] = None):
        self.indicators: Dict[str, Style] = dict(indicators or {})
        self.suffixes: Dict[str, Style] = dict(suffixes or {})

    @classmethod
    def from_string(cls, value: Optional[str]) -> "LsColors":
        """Parse an LS_COLORS value.

        Malformed entries are skipped; a missing or empty value yields an instance
        that styles nothing.
        """
        colors = cls()
        if not value:
            return colors
        for item in value.split(":"):
            key, sep, sgr = item.partition("=")
            if not sep or not key:
                continue
            if key.startswith("*"):
                colors.suffixes[key[1:].lower()] = parse_sgr(sgr)
            else:
                colors.indicators[key] = parse_sgr(sgr)
        return colors

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LsColors":
        """Read the LS_COLORS environment variable."""
        env = os.environ if environ is None else environ
        return cls.from_string(env.get("LS_COLORS"))

    def style_for_path(
        self, name: str, is_dir: bool = False, is_symlink: bool = False, is_executable: bool = False
    ) -> Optional[Style]:
        """Find the style for an entry.

        Type indicators take precedence over name suffixes; among suffixes the
        longest match wins.

        Args:
            name: The entry's file name.
            is_dir: Whether the entry is a directory.
            is_symlink: Whether the entry is a symbolic link.
            is_executable: Whether the entry is an executable file.

        Returns:
            The configured style, or None if nothing applies.
        """
        if is_symlink and "ln" in self.indicators:
            return self.indicators["ln"]
        if is_dir:
            return self.indicators.get("di")
        if is_executable and "ex" in self.indicators:
            return self.indicators["ex"]

        lowered = name.lower()
        best: Optional[str] = None
        for suffix in self.suffixes:
            if lowered.endswith(suffix) and (best is None or len(suffix) > len(best)):
                best = suffix
        if best is not None:
            return self.suffixes[best]
        return self.indicators.get("fi")
