"""Command-line interface for any2tree.

This module provides the command-line interface for any2tree, which draws JSON
data or a directory as a tree. It handles command-line argument parsing, input
loading, output writing, and signal management for graceful interruption
handling.

Signal Handling Notes:
    - SIGPIPE: Handled when output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Draw a JSON document
    $ any2tree data.json

    # Draw a directory with every decoration
    $ any2tree -p /path/to/dir
"""

import contextlib
import json
import sys
from typing import Any, ContextManager, Iterator, TextIO

from any2tree.cli.argparser import build_walk_options, create_parser, validate_args
from any2tree.cli.safe_writer import SafeWriter
from any2tree.cli.signal_handler import setup_signal_handling, signal_handler
from any2tree.exceptions import TreeCommandError
from any2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from any2tree.rendering.render_style import RenderStyle
from any2tree.styling.color_choice import ColorChoice
from any2tree.tree_command import TreeCommand

STDIN_NAME = "-"


def open_input(name: Any) -> ContextManager[TextIO]:
    """Open the data mode input: a file, or standard input for '-' or None."""
    if name is None or name == STDIN_NAME:
        return contextlib.nullcontext(sys.stdin)
    return open(name, "r", encoding="utf-8")


def iter_json_lines(stream: TextIO) -> Iterator[Any]:
    """Yield one JSON value per non-blank line.

    Raises:
        ValueError: If a line is not valid JSON.
    """
    for number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {number}: {e.msg}")


def main() -> None:
    """Main entry point for the any2tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated in command-line order while the arguments are parsed
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            try:
                if args.path:
                    options = build_walk_options(args, exclusion_rules)
                    command = TreeCommand(safe_writer)
                    command.run(args.input if args.input is not None else ".", path_mode=True, options=options)
                else:
                    color = ColorChoice(args.color or ColorChoice.AUTO.value).resolve(safe_writer)
                    command = TreeCommand(safe_writer, render_style=RenderStyle(indent=args.indent, color=color))
                    with open_input(args.input) as stream:
                        value = iter_json_lines(stream) if args.json_lines else json.load(stream)
                        command.run(value)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except TreeCommandError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
