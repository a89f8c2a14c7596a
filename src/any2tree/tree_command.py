"""Tree command: render a pipeline value or a directory as a tree.

This module is the boundary between a host (a shell pipeline, the command-line
interface, a program embedding the library) and the two rendering pipelines.
The host supplies a mode flag and one input value; the command writes the
rendered tree to its writer and returns nothing.
"""

import os
from typing import Any, Optional

from any2tree.exceptions import TreeCommandError
from any2tree.file_system_tree.directory_walker import DirectoryWalker, ErrorHandler
from any2tree.file_system_tree.line_decorator import LineDecorator
from any2tree.file_system_tree.walk_options import WalkOptions
from any2tree.rendering.render_style import RenderStyle
from any2tree.rendering.tree_renderer import render_lines, render_tree
from any2tree.status.git_source import load_git_status
from any2tree.status.status_index import StatusIndex, StatusSource
from any2tree.styling.ls_colors import LsColors
from any2tree.types import TextSink
from any2tree.value_tree.builder import build, build_stream, is_stream

PATH_EXPECTED_MESSAGE = "Expected a folder path to be provided when using --path flag"


class TreeCommand:
    """Renders one input value, either as a data tree or as a directory tree.

    In data mode the input is any structured value, or an iterator of values
    which is fully materialized before conversion. In path mode the input must
    be a path to a directory.

    Attributes:
        writer (TextSink): Destination of the rendered output.
        render_style (RenderStyle): Style of data trees.
        ls_colors (LsColors): Filename styles for directory trees.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> TreeCommand(out, render_style=RenderStyle(color=False)).run({"name": "any2tree"})
        >>> print(out.getvalue(), end="")
        └── name
            └── any2tree
    """

    def __init__(
        self,
        writer: TextSink,
        *,
        render_style: Optional[RenderStyle] = None,
        ls_colors: Optional[LsColors] = None,
        status_source: StatusSource = load_git_status,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """Initialize the command.

        Args:
            writer: Destination of the rendered output.
            render_style: Style of data trees. Defaults to RenderStyle().
            ls_colors: Filename styles. Defaults to the LS_COLORS environment variable.
            status_source: Source of version-control status for path mode.
            error_handler: Receives per-entry traversal errors in path mode.
                Defaults to printing them to standard error.
        """
        self.writer = writer
        self.render_style = render_style if render_style is not None else RenderStyle()
        self.ls_colors = ls_colors if ls_colors is not None else LsColors.from_env()
        self.status_source = status_source
        self.error_handler = error_handler

    def run(self, input_value: Any, *, path_mode: bool = False, options: Optional[WalkOptions] = None) -> None:
        """Render the input.

        Args:
            input_value: The pipeline value (data mode) or the directory path
                (path mode).
            path_mode: Treat the input as a directory path.
            options: Walk options for path mode. Defaults to WalkOptions.reference().

        Raises:
            TreeCommandError: If path mode gets something other than a path, or
                the path is not a directory.
        """
        if path_mode:
            if not isinstance(input_value, (str, os.PathLike)):
                raise TreeCommandError(PATH_EXPECTED_MESSAGE)
            self.run_path(input_value, options if options is not None else WalkOptions.reference())
        else:
            self.run_data(input_value)

    def run_data(self, value: Any) -> None:
        """Render a structured value, or a stream of values, as a tree."""
        tree = build_stream(value) if is_stream(value) else build(value)
        render_tree(tree, self.writer, self.render_style)

    def run_path(self, path: Any, options: WalkOptions) -> None:
        """Render a directory as a decorated tree.

        Raises:
            TreeCommandError: If the path is missing or is not a directory.
        """
        try:
            walker = DirectoryWalker(path, options, error_handler=self.error_handler)
        except OSError:
            raise TreeCommandError(f"Error trying to create a tree view: '{os.fspath(path)}' is not a directory.")

        status_index = None
        if options.show_status:
            status_index = StatusIndex.build(walker.root_path.resolve(), self.status_source)
        decorator = LineDecorator(
            options,
            status_index=status_index,
            ls_colors=self.ls_colors,
            color_enabled=options.color.resolve(self.writer),
        )
        lines = (decorator.decorate(entry) for entry in walker.walk())
        render_lines(
            lines,
            self.writer,
            walker.counts,
            header=os.fspath(path),
            color=decorator.color_enabled,
        )
