"""Node representation for labeled elements of a display tree."""

from typing import Any, Optional

from anytree import Node


class DisplayNode(Node):  # type: ignore
    """Node class representing one labeled element of a display tree.

    Extends anytree.Node with a text label. Children keep the order in which
    they were attached, which is the iteration order of the source value.

    Attributes:
        label (str): The text shown for this node. The synthetic root of a
            conversion has an empty label.
        parent (Optional[DisplayNode]): The parent node in the tree.
        children (tuple[DisplayNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = DisplayNode("")
        >>> child = DisplayNode("name", parent=root)
        >>> leaf = DisplayNode("README.md", parent=child)
        >>> [node.label for node in root.children]
        ['name']
        >>> child.is_leaf
        False
    """

    def __init__(self, label: str, parent: Optional["DisplayNode"] = None, **kwargs: Any) -> None:
        """Initialize a DisplayNode.

        Args:
            label: The text shown for this node.
            parent: The parent node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(label, parent, **kwargs)

    @property
    def label(self) -> str:
        """The text shown for this node."""
        return str(self.name)

    @property
    def is_synthetic_root(self) -> bool:
        """True for a parentless node without a label."""
        return self.parent is None and self.label == ""
