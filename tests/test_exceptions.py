"""Tests for custom exceptions."""

import pytest

from flatforest.exceptions import MalformedHierarchyError, OutOfRangeError


class TestOutOfRangeError:
    """Test OutOfRangeError exception."""

    def test_out_of_range_error_creation(self):
        """Test creating OutOfRangeError with index and size."""
        error = OutOfRangeError(5, 3)

        assert error.index == 5
        assert error.size == 3
        assert str(error) == "Index 5 out of range for hierarchy of size 3"

    def test_out_of_range_error_is_index_error(self):
        """Callers catching IndexError also catch OutOfRangeError."""
        with pytest.raises(IndexError):
            raise OutOfRangeError(-1, 0)


class TestMalformedHierarchyError:
    """Test MalformedHierarchyError exception."""

    def test_with_position(self):
        error = MalformedHierarchyError("depth rises from 0 to 2", position=1)

        assert error.position == 1
        assert error.reason == "depth rises from 0 to 2"
        assert str(error) == "Malformed hierarchy at position 1: depth rises from 0 to 2"

    def test_without_position(self):
        error = MalformedHierarchyError("3 node ids but 2 depths")

        assert error.position is None
        assert str(error) == "Malformed hierarchy: 3 node ids but 2 depths"

    def test_is_value_error(self):
        assert isinstance(MalformedHierarchyError("bad"), ValueError)
