"""Tree renderer for display trees and decorated directory lines.

Two entry points share the same output conventions:

* render_tree() draws a DisplayNode tree with box-drawing connectors;
* render_lines() writes precomputed DecoratedLine objects followed by a
  directory/file summary.

Both stop quietly when the consumer closes the output early (for example
when piping into ``head``).
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from any2tree.file_system_tree.decorated_line import DecoratedLine
from any2tree.file_system_tree.file_entry import WalkCounts
from any2tree.rendering.render_style import RenderStyle
from any2tree.styling.ansi import Style
from any2tree.types import TextSink
from any2tree.value_tree.display_node import DisplayNode

_HEADER = Style(bold=True)


def stream_tree_lines(node: DisplayNode, style: Optional[RenderStyle] = None) -> Iterator[str]:
    """Generate the lines of a drawn display tree, without newlines.

    The root's own label is printed on the first line unless the root is the
    synthetic root of a conversion. Children follow depth-first in their
    stored order. Labels spanning several lines keep the tree's indentation on
    every line.

    Args:
        node: The root of the tree to draw.
        style: Indentation and styling. Defaults to RenderStyle().

    Yields:
        One string per output line.

    Example:
        >>> from any2tree.value_tree.builder import build
        >>> plain = RenderStyle(color=False)
        >>> for line in stream_tree_lines(build({"a": [1, 2], "b": {}}), plain):
        ...     print(line)
        ├── a
        │   ├── 1
        │   └── 2
        └── b
    """
    style = style if style is not None else RenderStyle()

    def branch(text: str) -> str:
        return style.branch.paint(text, enabled=style.color)

    def leaf(text: str) -> str:
        return style.leaf.paint(text, enabled=style.color)

    if not node.is_synthetic_root:
        yield from (leaf(part) for part in node.label.split("\n"))

    # Pending (node, prefix, is_last) triples, pushed in reverse so they pop in order.
    stack: List[Tuple[DisplayNode, str, bool]] = []
    children = node.children
    stack.extend((child, "", i == len(children) - 1) for i, child in reversed(list(enumerate(children))))

    while stack:
        current, prefix, is_last = stack.pop()
        child_prefix = prefix + (style.blank if is_last else style.continuation)
        connector = style.last_connector if is_last else style.middle_connector

        first, *rest = current.label.split("\n")
        yield branch(prefix + connector) + leaf(first)
        for part in rest:
            yield branch(child_prefix) + leaf(part)

        children = current.children
        stack.extend((child, child_prefix, i == len(children) - 1) for i, child in reversed(list(enumerate(children))))


def render_tree(node: DisplayNode, writer: TextSink, style: Optional[RenderStyle] = None) -> bool:
    """Write a drawn display tree.

    Args:
        node: The root of the tree to draw.
        writer: Where to write the lines.
        style: Indentation and styling. Defaults to RenderStyle().

    Returns:
        True if the whole tree was written, False if the writer was closed by
        the consumer before the end.
    """
    try:
        for line in stream_tree_lines(node, style):
            writer.write(line + "\n")
    except BrokenPipeError:
        return False
    return True


def render_lines(
    lines: Iterable[DecoratedLine],
    writer: TextSink,
    counts: WalkCounts,
    *,
    header: Optional[str] = None,
    indent_width: int = 4,
    color: bool = True,
) -> bool:
    """Write decorated directory lines followed by the summary line.

    The lines are written verbatim in the order they are produced. The summary
    is read from counts once the lines are exhausted, so counts may be updated
    by the same walk that produces the lines.

    Args:
        lines: The decorated lines, typically produced lazily by a walk.
        writer: Where to write the output.
        counts: Directory and file totals of the walk.
        header: Optional first line, usually the walked path as given.
        indent_width: Width of one nesting level.
        color: Whether the header is styled.

    Returns:
        True if everything was written, False if the writer was closed by the
        consumer before the end.
    """
    try:
        if header is not None:
            writer.write(_HEADER.paint(header, enabled=color) + "\n")
        for line in lines:
            writer.write(line.render(indent_width) + "\n")
        writer.write(f"\n{counts.summary()}\n")
    except BrokenPipeError:
        return False
    return True
