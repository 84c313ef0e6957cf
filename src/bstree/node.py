"""
Tree cell used by the binary search tree.
"""

from __future__ import annotations

from typing import Optional


class Node:
    """
    A single tree cell holding a key and two child slots.

    Children are owned exclusively by their parent; there are no back
    references to the parent or to the tree.
    """

    def __init__(
        self,
        key: int,
        left: Optional[Node] = None,
        right: Optional[Node] = None,
    ):
        self.key = key
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if node has no children."""
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.key})"
