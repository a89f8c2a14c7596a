"""Builder that converts structured values into DisplayNode trees.

Conversion rules:

* scalars become leaf nodes labeled with their textual form;
* every mapping entry becomes a node labeled with the key, and the value is
  converted underneath it;
* sequence elements become siblings at the level of the sequence itself, so a
  sequence never adds a nesting level;
* the result is wrapped in an unlabeled synthetic root node.

The conversion uses an explicit work stack so deeply nested values are not
limited by the interpreter recursion limit.
"""

import datetime
import decimal
from collections.abc import Iterator as IteratorABC
from collections.abc import Mapping, Sequence
from pathlib import PurePath
from typing import Any, Iterable, List, Tuple

from any2tree.types import StructuredValue
from any2tree.value_tree.display_node import DisplayNode

BINARY_LABEL = "binary"
CUSTOM_LABEL = "custom"
NULL_LABEL = "null"

_TEXT_TYPES = (str, bytes, bytearray, memoryview)
_TEMPORAL_TYPES = (datetime.date, datetime.time, datetime.timedelta)


def is_stream(value: Any) -> bool:
    """Check whether a value is a not-yet-materialized stream of values.

    Iterators and generators are streams. Sequences, mappings, text and bytes are
    complete values even though they are iterable.

    Args:
        value: The value to check.

    Returns:
        True if the value must be materialized before conversion.

    Example:
        >>> is_stream(iter([1, 2]))
        True
        >>> is_stream([1, 2])
        False
    """
    return isinstance(value, IteratorABC) and not isinstance(value, (Mapping, Sequence) + _TEXT_TYPES)


def scalar_label(value: Any) -> str:
    """Return the label used for a scalar value.

    Args:
        value: Any value that is neither a mapping nor a sequence.

    Returns:
        The textual form of the value, or a fixed placeholder label for byte blobs
        and values without a defined textual form.

    Example:
        >>> scalar_label(None)
        'null'
        >>> scalar_label(True)
        'true'
        >>> scalar_label(b"\\x00")
        'binary'
        >>> scalar_label(range(1, 5))
        '1..5'
    """
    if value is None:
        return NULL_LABEL
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, decimal.Decimal, str)):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BINARY_LABEL
    if isinstance(value, _TEMPORAL_TYPES):
        return str(value)
    if isinstance(value, range):
        if value.step == 1:
            return f"{value.start}..{value.stop}"
        return f"{value.start}..{value.stop}:{value.step}"
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, BaseException):
        return str(value)
    return CUSTOM_LABEL


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES + (range,))


def build(value: StructuredValue) -> DisplayNode:
    """Convert a structured value into a display tree.

    Args:
        value: The value to convert. Mappings and sequences may nest to any depth.

    Returns:
        The unlabeled synthetic root node. Its children are the conversion of the
        value: one leaf for a scalar, one node per key for a mapping, and the
        converted elements for a sequence.

    Example:
        >>> root = build({"name": "tree", "tags": ["a", "b"]})
        >>> [(node.label, [c.label for c in node.children]) for node in root.children]
        [('name', ['tree']), ('tags', ['a', 'b'])]
    """
    root = DisplayNode("")

    # Pending (value, parent) pairs. Items are pushed in reverse so they are
    # popped, and therefore attached, in source order.
    stack: List[Tuple[Any, DisplayNode]] = [(value, root)]
    while stack:
        current, parent = stack.pop()

        if isinstance(current, Mapping):
            # A mapping adds one level per key.
            pending: List[Tuple[Any, DisplayNode]] = []
            for key, item in current.items():
                key_node = DisplayNode(scalar_label(key), parent=parent)
                pending.append((item, key_node))
            stack.extend(reversed(pending))
        elif _is_sequence(current):
            # A sequence adds no level: its elements attach to the same parent.
            stack.extend((item, parent) for item in reversed(current))
        else:
            DisplayNode(scalar_label(current), parent=parent)

    return root


def build_stream(values: Iterable[StructuredValue]) -> DisplayNode:
    """Materialize a stream of values and convert it into a display tree.

    The stream is fully consumed into a single list before conversion begins.

    Args:
        values: Any iterable of structured values.

    Returns:
        The unlabeled synthetic root node, as returned by build().

    Example:
        >>> root = build_stream(iter([1, {"a": 2}]))
        >>> [node.label for node in root.children]
        ['1', 'a']
    """
    return build(list(values))
