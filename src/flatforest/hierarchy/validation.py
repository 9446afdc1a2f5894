"""Checks for the depth invariant of a depth-encoded forest.

Construction trusts its input by default. These helpers are the opt-in,
fail-fast path: each raises MalformedHierarchyError at the first violation.
"""

from enum import Enum
from typing import TYPE_CHECKING, Iterable, Sequence

from flatforest.exceptions import MalformedHierarchyError
from flatforest.types import Depth, NodeId

if TYPE_CHECKING:
    from .base_hierarchy import Hierarchy


class ValidationAction(str, Enum):
    """Action to take on malformed input when a hierarchy is constructed.

    Values:
        IGNORE: Accept the sequences as given; the caller guarantees they are valid (default)
        RAISE: Check the sequences and raise MalformedHierarchyError on the first violation
    """

    IGNORE = "ignore"
    RAISE = "raise"


def validate_depths(depths: Iterable[Depth]) -> None:
    """Check that a depth sequence encodes an ordered forest.

    A valid sequence starts at depth 0, never goes negative and never rises by more
    than one between consecutive positions. Drops of any size are allowed.

    Args:
        depths: Depths in DFS order.

    Raises:
        MalformedHierarchyError: At the first position that breaks the invariant.

    Example:
        >>> validate_depths([0, 1, 2, 0, 1])
        >>> validate_depths([0, 2])
        Traceback (most recent call last):
        ...
        flatforest.exceptions.MalformedHierarchyError: Malformed hierarchy at position 1: depth rises from 0 to 2
    """
    previous = -1
    for position, depth in enumerate(depths):
        if depth < 0:
            raise MalformedHierarchyError(f"negative depth {depth}", position)
        if depth > previous + 1:
            if position == 0:
                reason = f"first node must have depth 0, got {depth}"
            else:
                reason = f"depth rises from {previous} to {depth}"
            raise MalformedHierarchyError(reason, position)
        previous = depth


def validate_sequences(node_ids: Sequence[NodeId], depths: Sequence[Depth]) -> None:
    """Check a pair of parallel sequences before they back a hierarchy.

    Args:
        node_ids: Node identifiers in DFS order.
        depths: Depths in DFS order, parallel to ``node_ids``.

    Raises:
        MalformedHierarchyError: If the lengths differ or the depths are invalid.
    """
    if len(node_ids) != len(depths):
        raise MalformedHierarchyError(f"{len(node_ids)} node ids but {len(depths)} depths")
    validate_depths(depths)


def validate_hierarchy(hierarchy: "Hierarchy") -> "Hierarchy":
    """Check the depth invariant of any Hierarchy implementation.

    Args:
        hierarchy: The hierarchy to check.

    Returns:
        The same hierarchy, so the call can wrap an expression.

    Raises:
        MalformedHierarchyError: At the first position that breaks the invariant.
    """
    validate_depths(hierarchy.depth(index) for index in range(hierarchy.size()))
    return hierarchy
