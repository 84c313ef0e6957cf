"""
Key normalization for tree construction and insertion.

Backed by sortedcontainers.SortedSet, which deduplicates and orders keys in a
single pass over the input.
"""

from __future__ import annotations

from typing import Iterable
import operator
from sortedcontainers import SortedSet


def as_key(value: int) -> int:
    """
    Convert an integer-like value to a plain Python int key.

    Numpy integer scalars are accepted; floats, strings and other
    non-integers raise TypeError rather than being truncated or parsed.
    """
    return operator.index(value)


def unique_sorted_keys(values: Iterable[int]) -> list[int]:
    """
    Discard duplicate keys and sort the rest ascending.

    Args:
        values: Any finite iterable of integers (numpy integer arrays included)

    Returns:
        Sorted list of distinct keys as plain Python ints

    Raises:
        TypeError: If any value is not an integer
    """
    return list(SortedSet(as_key(v) for v in values))
