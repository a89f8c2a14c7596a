"""Rendering of display trees and decorated directory lines."""

from .render_style import RenderStyle
from .tree_renderer import render_lines, render_tree, stream_tree_lines

__all__ = ["RenderStyle", "render_lines", "render_tree", "stream_tree_lines"]
