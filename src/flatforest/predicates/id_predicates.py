"""Predicates that select nodes by their identifiers."""

from typing import FrozenSet, Iterable, Optional

from flatforest.types import NodeId

from .base_predicates import BaseNodePredicate


class IdSetPredicate(BaseNodePredicate):
    """Predicate that accepts or rejects nodes by membership in a set of ids.

    With ``include=True`` only the listed ids pass (an allow-list). With
    ``include=False`` every id except the listed ones passes (a deny-list), which is
    the usual way to cut named subtrees out of a forest.

    Attributes:
        ids (FrozenSet[NodeId]): The configured ids.
        include (bool): Whether the ids form an allow-list (True) or deny-list (False).

    Example:
        >>> deny = IdSetPredicate([3, 6], include=False)
        >>> deny(3), deny(4)
        (False, True)
        >>> allow = IdSetPredicate([1, 2])
        >>> allow(1), allow(5)
        (True, False)
    """

    def __init__(self, ids: Iterable[NodeId], include: bool = True):
        self.ids: FrozenSet[NodeId] = frozenset(ids)
        self.include = include

    def accept(self, node_id: NodeId) -> bool:
        return (node_id in self.ids) == self.include

    def __repr__(self) -> str:
        return f"IdSetPredicate({sorted(self.ids)!r}, include={self.include})"


class IdRangePredicate(BaseNodePredicate):
    """Predicate that accepts ids within inclusive bounds.

    Either bound may be omitted to leave that side open, but not both.

    Attributes:
        minimum (Optional[NodeId]): Smallest accepted id, or None for no lower bound.
        maximum (Optional[NodeId]): Largest accepted id, or None for no upper bound.

    Example:
        >>> at_least_six = IdRangePredicate(minimum=6)
        >>> at_least_six(6), at_least_six(5)
        (True, False)
    """

    def __init__(self, minimum: Optional[NodeId] = None, maximum: Optional[NodeId] = None):
        """Initialize the range predicate.

        Args:
            minimum: Smallest accepted id. Defaults to None (unbounded).
            maximum: Largest accepted id. Defaults to None (unbounded).

        Raises:
            ValueError: If neither bound is given, or if minimum exceeds maximum.
        """
        if minimum is None and maximum is None:
            raise ValueError("At least one of minimum or maximum must be provided")
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
        self.minimum = minimum
        self.maximum = maximum

    def accept(self, node_id: NodeId) -> bool:
        if self.minimum is not None and node_id < self.minimum:
            return False
        if self.maximum is not None and node_id > self.maximum:
            return False
        return True

    def __repr__(self) -> str:
        return f"IdRangePredicate(minimum={self.minimum}, maximum={self.maximum})"
