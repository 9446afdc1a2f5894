"""Composite predicates for combining several node predicates."""

from typing import List, Sequence

from flatforest.types import NodeId, NodePredicate

from .base_predicates import BaseNodePredicate


class _CompositePredicate(BaseNodePredicate):
    """Shared bookkeeping for predicates built from other predicates.

    Members may be BaseNodePredicate instances or any plain callable taking a node id.
    They are evaluated in the order given, so cheap checks should come first.
    """

    def __init__(self, predicates: Sequence[NodePredicate]):
        """Initialize the composite.

        Args:
            predicates: Predicates to combine.

        Raises:
            ValueError: If ``predicates`` is empty.
            TypeError: If any member is not callable.
        """
        if not predicates:
            raise ValueError("At least one predicate must be provided")

        for i, predicate in enumerate(predicates):
            if not callable(predicate):
                raise TypeError(f"Predicate at index {i} must be callable, got {type(predicate)}")

        self.predicates: List[NodePredicate] = list(predicates)

    def add_predicate(self, predicate: NodePredicate) -> None:
        """Append another predicate to this composite.

        Raises:
            TypeError: If ``predicate`` is not callable.
        """
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate)}")
        self.predicates.append(predicate)

    def remove_predicate(self, predicate: NodePredicate) -> bool:
        """Remove a predicate from this composite.

        A composite never drops to zero members; removing the last one is refused.

        Returns:
            True if the predicate was found and removed, False otherwise.
        """
        if predicate not in self.predicates or len(self.predicates) == 1:
            return False
        self.predicates.remove(predicate)
        return True

    def get_predicate_count(self) -> int:
        return len(self.predicates)

    def get_predicates(self) -> List[NodePredicate]:
        """Return a copy of the member list."""
        return list(self.predicates)


class AllOfPredicate(_CompositePredicate):
    """Composite predicate that accepts a node only if every member accepts it.

    Evaluation stops at the first member that rejects the node.

    Example:
        >>> from flatforest.predicates.id_predicates import IdRangePredicate, IdSetPredicate
        >>> both = AllOfPredicate([IdRangePredicate(maximum=10), IdSetPredicate([3], include=False)])
        >>> both(2), both(3), both(11)
        (True, False, False)
    """

    def accept(self, node_id: NodeId) -> bool:
        return all(predicate(node_id) for predicate in self.predicates)


class AnyOfPredicate(_CompositePredicate):
    """Composite predicate that accepts a node if at least one member accepts it.

    Evaluation stops at the first member that accepts the node.

    Example:
        >>> from flatforest.predicates.id_predicates import IdSetPredicate
        >>> either = AnyOfPredicate([IdSetPredicate([1]), lambda node_id: node_id > 5])
        >>> either(1), either(6), either(3)
        (True, True, False)
    """

    def accept(self, node_id: NodeId) -> bool:
        return any(predicate(node_id) for predicate in self.predicates)
