"""Options controlling a directory walk and its decoration."""

from dataclasses import dataclass
from typing import Optional

from any2tree.exclusion_rules.base_rules import BaseExclusionRules
from any2tree.styling.color_choice import ColorChoice


@dataclass(frozen=True)
class WalkOptions:
    """Independently toggleable walk and display options.

    The options object is immutable and passed explicitly to the walker and the
    line decorator, so every part of a walk sees the same configuration.

    Attributes:
        max_depth: Deepest level emitted (children of the root are level 1).
            None means unbounded.
        show_hidden: Include entries whose name starts with a dot.
        respect_ignore_files: Honor .gitignore/.ignore files and .git/info/exclude.
        dirs_only: Emit directories only.
        show_size: Append the size of files.
        show_permissions: Prefix entries with their permission string.
        show_status: Prefix entries with their version-control status.
        show_icons: Prefix names with a file-type icon.
        color: When to emit ANSI styling.
        follow_symlinks: Descend into symlinked directories.
        exclusion_rules: Additional user supplied rules, applied like ignore files.

    Example:
        >>> WalkOptions().show_size
        False
        >>> WalkOptions.reference().show_size
        True
    """

    max_depth: Optional[int] = None
    show_hidden: bool = False
    respect_ignore_files: bool = False
    dirs_only: bool = False
    show_size: bool = False
    show_permissions: bool = False
    show_status: bool = False
    show_icons: bool = False
    color: ColorChoice = ColorChoice.AUTO
    follow_symlinks: bool = False
    exclusion_rules: Optional[BaseExclusionRules] = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got {self.max_depth}")

    @classmethod
    def reference(cls) -> "WalkOptions":
        """Return the option bundle used when a host asks for a path tree.

        Color, status, size, icons, hidden entries and permissions are all on.
        """
        return cls(
            show_hidden=True,
            show_size=True,
            show_permissions=True,
            show_status=True,
            show_icons=True,
            color=ColorChoice.ALWAYS,
        )

    @property
    def needs_metadata(self) -> bool:
        """Whether decorating an entry requires stat information."""
        return self.show_size or self.show_permissions
