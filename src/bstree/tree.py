"""
Binary search tree over unique integer keys.

The tree is built balanced from an arbitrary collection of integers, then
mutated in place by insertion and deletion. Neither mutation rebalances; the
tree is only restored to minimum height by an explicit call to rebalance().
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Iterator, Optional, Union
import warnings

from .keys import as_key, unique_sorted_keys
from .node import Node

Visitor = Callable[[Node], None]

_ROOT = object()


class NodeNotFoundError(LookupError):
    """Raised when a key expected in the tree is not present."""

    def __init__(self, key: int):
        super().__init__(f"key {key!r} is not in the tree")
        self.key = key


class DeepTreeWarning(UserWarning):
    """Warning about tree paths deep enough to strain the recursion limit."""
    pass


class Tree:
    """
    Binary search tree with unique integer keys.

    Keys in the left subtree of every node are strictly smaller than the
    node's key, keys in the right subtree strictly greater. Size and height
    are not stored and are recomputed on every query.
    """

    # Insertions landing deeper than this many edges below the root warn.
    DEEP_TREE_WARNING_DEPTH = 500

    def __init__(self, values: Iterable[int] = ()):
        """
        Build a balanced tree.

        Args:
            values: Integers in any order; duplicates are discarded
        """
        keys = unique_sorted_keys(values)
        self.root: Optional[Node] = self.build_tree(keys, 0, len(keys) - 1)

    @staticmethod
    def build_tree(keys: list[int], start: int, end: int) -> Optional[Node]:
        """
        Build a minimum-height subtree from keys[start..end].

        Args:
            keys: Sorted list of distinct keys
            start: First index of the range (inclusive)
            end: Last index of the range (inclusive)

        Returns:
            Root of the subtree, or None for an empty range
        """
        if start > end:
            return None

        middle = (start + end) // 2
        root = Node(keys[middle])
        root.left = Tree.build_tree(keys, start, middle - 1)
        root.right = Tree.build_tree(keys, middle + 1, end)
        return root

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, key: int) -> None:
        """
        Insert key; a key already present is left as is.

        Raises:
            TypeError: If key is not an integer
        """
        self.root = self._insert(self.root, as_key(key), 0)

    def _insert(self, root: Optional[Node], key: int, depth: int) -> Node:
        if root is None:
            if depth > self.DEEP_TREE_WARNING_DEPTH:
                warnings.warn(
                    f"Inserted key {key} at depth {depth}. "
                    "Call rebalance() before recursive operations exhaust "
                    "the interpreter stack.",
                    DeepTreeWarning,
                    stacklevel=depth + 3,
                )
            return Node(key)

        if key < root.key:
            root.left = self._insert(root.left, key, depth + 1)
        elif key > root.key:
            root.right = self._insert(root.right, key, depth + 1)
        return root

    def delete_item(self, key: int) -> None:
        """Delete key from the tree; an absent key is ignored."""
        self.root = self._delete(self.root, key)

    def _delete(self, root: Optional[Node], key: int) -> Optional[Node]:
        if root is None:
            return None

        if key > root.key:
            root.right = self._delete(root.right, key)
        elif key < root.key:
            root.left = self._delete(root.left, key)
        else:
            if root.left is None:
                return root.right
            if root.right is None:
                return root.left

            # Graft the left subtree under the in-order successor, which stays
            # where it is inside the promoted right subtree.
            successor = root.right
            while successor.left is not None:
                successor = successor.left
            successor.left = root.left
            return root.right
        return root

    def rebalance(self) -> None:
        """Rebuild the tree at minimum height over its current keys."""
        keys = self.in_order()
        self.root = self.build_tree(keys, 0, len(keys) - 1)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, key: int) -> Optional[Node]:
        """
        Find the node holding key.

        Args:
            key: Key to look up

        Returns:
            Matching node, or None if key is not in the tree
        """
        node = self.root
        while node is not None:
            if key > node.key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return node
        return None

    def height(self, node: Optional[Node] = _ROOT) -> int:  # type: ignore[assignment]
        """
        Number of edges on the longest path from node down to a leaf.

        Args:
            node: Subtree root; defaults to the tree root. None and leaves
                  both have height 0.

        Returns:
            Height of the subtree
        """
        if node is _ROOT:
            node = self.root
        if node is None or node.is_leaf():
            return 0
        return 1 + max(self.height(node.left), self.height(node.right))

    def depth(self, node: Union[Node, int]) -> int:
        """
        Number of edges from the root down to node.

        Nodes are matched by key, not identity.

        Args:
            node: Node (or bare key) to locate

        Returns:
            Depth of the node, 0 for the root

        Raises:
            NodeNotFoundError: If the key is not in the tree
        """
        key = node.key if isinstance(node, Node) else node
        return self._depth(self.root, key)

    def _depth(self, root: Optional[Node], key: int) -> int:
        if root is None:
            raise NodeNotFoundError(key)
        if key < root.key:
            return self._depth(root.left, key) + 1
        if key > root.key:
            return self._depth(root.right, key) + 1
        return 0

    def is_balanced(self) -> bool:
        """
        Check whether every node's subtree heights differ by at most one.

        Returns:
            True if balanced; an empty tree is balanced
        """
        return self._check_balance(self.root)[0]

    def _check_balance(self, root: Optional[Node]) -> tuple[bool, int]:
        if root is None:
            return True, 0
        left_balanced, left_height = self._check_balance(root.left)
        right_balanced, right_height = self._check_balance(root.right)
        balanced = (
            left_balanced
            and right_balanced
            and abs(left_height - right_height) <= 1
        )
        return balanced, 1 + max(left_height, right_height)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def level_order(self, callback: Optional[Visitor] = None) -> Optional[list[int]]:
        """
        Breadth-first traversal, left to right within each level.

        Args:
            callback: Optional function called with each node in order

        Returns:
            List of keys if no callback is given, otherwise None
        """
        return self._visit(self._level_order_nodes(), callback)

    def in_order(self, callback: Optional[Visitor] = None) -> Optional[list[int]]:
        """Left subtree, node, right subtree. Keys come out ascending."""
        return self._visit(self._in_order_nodes(self.root), callback)

    def pre_order(self, callback: Optional[Visitor] = None) -> Optional[list[int]]:
        """Node, left subtree, right subtree."""
        return self._visit(self._pre_order_nodes(self.root), callback)

    def post_order(self, callback: Optional[Visitor] = None) -> Optional[list[int]]:
        """Left subtree, right subtree, node."""
        return self._visit(self._post_order_nodes(self.root), callback)

    @staticmethod
    def _visit(
        nodes: Iterator[Node], callback: Optional[Visitor]
    ) -> Optional[list[int]]:
        if callback is None:
            return [node.key for node in nodes]
        for node in nodes:
            callback(node)
        return None

    def _level_order_nodes(self) -> Iterator[Node]:
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def _in_order_nodes(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self._in_order_nodes(root.left)
        yield root
        yield from self._in_order_nodes(root.right)

    def _pre_order_nodes(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield root
        yield from self._pre_order_nodes(root.left)
        yield from self._pre_order_nodes(root.right)

    def _post_order_nodes(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self._post_order_nodes(root.left)
        yield from self._post_order_nodes(root.right)
        yield root

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Get number of keys in tree."""
        return sum(1 for _ in self._in_order_nodes(self.root))

    def is_empty(self) -> bool:
        """Check if tree is empty."""
        return self.root is None

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self._in_order_nodes(self.root))

    def __contains__(self, key: int) -> bool:
        return self.find(key) is not None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Render the tree shape as text, right subtrees above left ones.

        Returns:
            Multi-line diagram, empty string for an empty tree
        """
        lines: list[str] = []
        self._render(self.root, "", True, lines)
        return "\n".join(lines)

    def _render(
        self, node: Optional[Node], prefix: str, is_left: bool, lines: list[str]
    ) -> None:
        if node is None:
            return
        self._render(node.right, prefix + ("│   " if is_left else "    "), False, lines)
        lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.key}")
        self._render(node.left, prefix + ("    " if is_left else "│   "), True, lines)

    def pretty_print(self) -> None:
        """Print the tree diagram to stdout."""
        print(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Tree({self.in_order()!r})"
