"""Tests for key normalization."""

import numpy as np
import pytest
from bstree.keys import as_key, unique_sorted_keys


class TestUniqueSortedKeys:
    """Test unique_sorted_keys function."""

    def test_empty(self):
        """Test empty input."""
        assert unique_sorted_keys([]) == []

    def test_removes_duplicates_and_sorts(self):
        """Test deduplication and ascending order."""
        values = [1, 7, 4, 23, 8, 9, 4, 3, 5, 7, 9, 67, 6345, 324]
        assert unique_sorted_keys(values) == [1, 3, 4, 5, 7, 8, 9, 23, 67, 324, 6345]

    def test_negative_keys(self):
        """Test negative keys sort numerically."""
        assert unique_sorted_keys([0, -10, 5, -2, -10]) == [-10, -2, 0, 5]

    def test_accepts_generator(self):
        """Test any iterable is accepted."""
        assert unique_sorted_keys(x % 3 for x in range(10)) == [0, 1, 2]

    def test_numpy_array(self):
        """Test numpy integer arrays become plain ints."""
        keys = unique_sorted_keys(np.array([3, 1, 3, 2], dtype=np.int64))
        assert keys == [1, 2, 3]
        assert all(type(k) is int for k in keys)

    def test_rejects_strings(self):
        """Test strings are not parsed into keys."""
        with pytest.raises(TypeError):
            unique_sorted_keys(["one"])
        with pytest.raises(TypeError):
            unique_sorted_keys(["5", "10", "2"])

    def test_rejects_floats(self):
        """Test floats are not truncated into keys."""
        with pytest.raises(TypeError):
            unique_sorted_keys([3.7, 3.2, 1])


class TestAsKey:
    """Test as_key function."""

    def test_plain_int(self):
        """Test ints pass through unchanged."""
        assert as_key(-4) == -4

    def test_numpy_scalar(self):
        """Test numpy integer scalars become plain ints."""
        key = as_key(np.int32(7))
        assert key == 7
        assert type(key) is int

    @pytest.mark.parametrize("value", [3.0, 3.7, "3", None])
    def test_rejects_non_integers(self, value):
        """Test non-integer values raise TypeError."""
        with pytest.raises(TypeError):
            as_key(value)
