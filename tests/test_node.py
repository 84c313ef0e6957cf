"""Tests for tree node."""

from bstree.node import Node


class TestNode:
    """Test cases for Node class."""

    def test_create_node(self):
        """Test creating a node without children."""
        node = Node(5)
        assert node.key == 5
        assert node.left is None
        assert node.right is None
        assert node.is_leaf()

    def test_create_node_with_children(self):
        """Test creating a node with both children."""
        node = Node(5, Node(3), Node(8))
        assert node.left.key == 3
        assert node.right.key == 8
        assert not node.is_leaf()

    def test_single_child_is_not_leaf(self):
        """Test that one child is enough to stop being a leaf."""
        node = Node(5)
        node.right = Node(6)
        assert not node.is_leaf()

    def test_repr(self):
        """Test debug representation."""
        assert repr(Node(42)) == "Node(42)"
