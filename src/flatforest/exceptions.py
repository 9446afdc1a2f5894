from typing import Optional


class OutOfRangeError(IndexError):
    """
    Exception raised when a hierarchy accessor is called with an invalid position.

    Valid positions are ``0 <= index < size()``. Negative indices never wrap around
    the way they do for Python sequences.

    Attributes:
        index (int): The position that was requested.
        size (int): The size of the hierarchy at the time of the call.

    Example:
        >>> error = OutOfRangeError(3, 3)
        >>> str(error)
        'Index 3 out of range for hierarchy of size 3'
    """

    def __init__(self, index: int, size: int) -> None:
        """
        Initialize the exception with the offending index and the hierarchy size.

        Args:
            index (int): The position that was requested.
            size (int): Number of nodes in the hierarchy.
        """
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for hierarchy of size {size}")


class MalformedHierarchyError(ValueError):
    """
    Exception raised when a depth sequence does not encode a valid forest.

    Raised only by explicit validation (``validate_hierarchy`` or
    ``ValidationAction.RAISE``) and by conversions that must rebuild parent links,
    such as ``Hierarchy.to_forest``. Plain construction trusts its input.

    Attributes:
        reason (str): Human-readable description of the violation.
        position (Optional[int]): Position at which the violation was detected, or
            None when the problem is not tied to one position (e.g. length mismatch).

    Example:
        >>> error = MalformedHierarchyError("depth rises from 0 to 2", position=1)
        >>> str(error)
        'Malformed hierarchy at position 1: depth rises from 0 to 2'
        >>> str(MalformedHierarchyError("3 node ids but 2 depths"))
        'Malformed hierarchy: 3 node ids but 2 depths'
    """

    def __init__(self, reason: str, position: Optional[int] = None) -> None:
        self.reason = reason
        self.position = position
        if position is None:
            message = f"Malformed hierarchy: {reason}"
        else:
            message = f"Malformed hierarchy at position {position}: {reason}"
        super().__init__(message)
