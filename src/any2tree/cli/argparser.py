"""Command-line argument parsing for any2tree.

This module defines the command-line interface for any2tree,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from any2tree import __version__
from any2tree.exclusion_rules.base_rules import BaseExclusionRules
from any2tree.file_system_tree.walk_options import WalkOptions
from any2tree.styling.color_choice import ColorChoice


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    This factory function creates an action class that will update the provided
    exclusion rules object as arguments are processed. This preserves the exact
    order of exclusion specifications as they appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            collected = getattr(namespace, self.dest, None) or []
            setattr(namespace, self.dest, [*collected, values])

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with any2tree's options.
    """
    description = """
    any2tree: View structured data or a directory as a tree.

    In data mode (the default) the input is a JSON document, read from a file or
    from standard input, and every mapping key and value is drawn as a node of
    the tree. Lists do not add a level of their own: their elements are drawn as
    siblings.

    In path mode (-p/--path) the input is a directory. Every entry is drawn on
    its own line, optionally decorated with its git status, permissions, a file
    type icon (requires a Nerd Font) and its size, followed by a summary of the
    number of directories and files.

    Filename colors follow the LS_COLORS environment variable when it is set.
    """

    epilog = """
    Examples:
      # Draw a JSON document as a tree
      any2tree data.json
      curl -s https://api.github.com/repos/python/cpython | any2tree

      # Draw a stream of JSON values (one per line)
      any2tree --json-lines events.jsonl

      # Draw a directory with all decorations
      any2tree -p /path/to/project

      # Only two levels, directories only, honoring .gitignore files
      any2tree -p -L 2 -d -g /path/to/project

      # Turn individual decorations off
      any2tree -p --no-icons --no-permissions --no-all .

      # Exclude entries with gitignore-style patterns
      any2tree -p -i "*.pyc" -i "node_modules/" -e .dockerignore .
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"any2tree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "input",
        nargs="?",
        help=(
            "In data mode, the JSON file to read ('-' or omitted for standard input). "
            "In path mode, the directory to draw (default: current directory)."
        ),
    )
    parser.add_argument(
        "-p",
        "--path",
        action="store_true",
        help="Treat the input as a directory path and draw the directory tree.",
    )
    parser.add_argument(
        "--color",
        choices=[choice.value for choice in ColorChoice],
        help="When to use colored output (default: always in path mode, auto in data mode).",
    )

    data_group = parser.add_argument_group("data mode")
    data_group.add_argument(
        "--json-lines",
        action="store_true",
        help="Read a stream of JSON values, one per line, and draw them as one tree.",
    )
    data_group.add_argument(
        "--indent",
        type=int,
        default=4,
        metavar="N",
        help="Width of one tree level, connector included (default: 4, minimum: 2).",
    )

    path_group = parser.add_argument_group("path mode")
    path_group.add_argument(
        "-L",
        "--level",
        type=int,
        metavar="N",
        help="Maximum depth to descend in the directory tree.",
    )
    path_group.add_argument(
        "-d",
        "--dirs-only",
        action="store_true",
        help="Display directories only.",
    )
    path_group.add_argument(
        "-g",
        "--gitignore",
        action="store_true",
        help="Respect .gitignore, .ignore and .git/info/exclude files.",
    )
    path_group.add_argument(
        "-a",
        "--all",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show hidden entries (default: on).",
    )
    path_group.add_argument(
        "--status",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show the git status of entries (default: on).",
    )
    path_group.add_argument(
        "--size",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show the size of files (default: on).",
    )
    path_group.add_argument(
        "--permissions",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show permissions (default: on).",
    )
    path_group.add_argument(
        "--icons",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show file type icons; requires a Nerd Font (default: on).",
    )
    path_group.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories. Symlink loops are reported and skipped.",
    )
    path_group.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style exclusion file (can be specified multiple times).",
    )
    path_group.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude entries. Can be specified multiple times; "
            "patterns are processed in the order they appear, mixed with -e/--exclude options."
        ),
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.indent < 2:
        raise ValueError(f"--indent must be at least 2, got {args.indent}")
    if args.level is not None and args.level < 0:
        raise ValueError(f"--level cannot be negative, got {args.level}")
    if args.path and args.json_lines:
        raise ValueError("--json-lines cannot be combined with -p/--path")


def build_walk_options(args: argparse.Namespace, exclusion_rules: BaseExclusionRules) -> WalkOptions:
    """Translate parsed path mode arguments into walk options.

    Args:
        args: Parsed command-line arguments.
        exclusion_rules: Rules collected from -e/--exclude and -i/--ignore.

    Returns:
        The walk options.
    """
    return WalkOptions(
        max_depth=args.level,
        show_hidden=args.all,
        respect_ignore_files=args.gitignore,
        dirs_only=args.dirs_only,
        show_size=args.size,
        show_permissions=args.permissions,
        show_status=args.status,
        show_icons=args.icons,
        color=ColorChoice(args.color or ColorChoice.ALWAYS.value),
        follow_symlinks=args.follow_symlinks,
        exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
    )
