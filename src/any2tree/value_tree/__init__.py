"""Conversion of structured values into labeled display trees.

This package turns nested mappings, sequences and scalars into a tree of
DisplayNode objects that the tree renderer can draw.
"""

from .builder import build, build_stream, is_stream
from .display_node import DisplayNode

__all__ = ["DisplayNode", "build", "build_stream", "is_stream"]
