"""
bstree: Balanced binary search tree over unique integer keys.

Built balanced from any collection of integers, mutated in place by insertion
and deletion, and rebalanced only on request.
"""

__version__ = "0.1.0"

from .node import Node
from .keys import as_key, unique_sorted_keys
from .tree import Tree, NodeNotFoundError, DeepTreeWarning

__all__ = [
    "Node",
    "Tree",
    "NodeNotFoundError",
    "DeepTreeWarning",
    "as_key",
    "unique_sorted_keys",
]
