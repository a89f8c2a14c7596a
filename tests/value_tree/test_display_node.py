"""Unit tests for the DisplayNode class."""

from anytree import PreOrderIter

from any2tree.value_tree.display_node import DisplayNode


def test_display_node_label():
    node = DisplayNode("README.md")
    assert node.label == "README.md"
    assert node.name == "README.md"


def test_display_node_children_keep_insertion_order():
    root = DisplayNode("")
    for label in ["b", "a", "c"]:
        DisplayNode(label, parent=root)
    assert [child.label for child in root.children] == ["b", "a", "c"]


def test_synthetic_root():
    root = DisplayNode("")
    child = DisplayNode("", parent=root)
    labeled_root = DisplayNode("data")

    assert root.is_synthetic_root
    assert not child.is_synthetic_root
    assert not labeled_root.is_synthetic_root


def test_display_node_is_an_anytree_node():
    root = DisplayNode("root")
    child = DisplayNode("child", parent=root)
    DisplayNode("grandchild", parent=child)

    assert [node.label for node in PreOrderIter(root)] == ["root", "child", "grandchild"]
    assert child.parent is root
    assert not child.is_leaf
