from abc import ABC, abstractmethod

from flatforest.types import NodeId


class BaseNodePredicate(ABC):
    """
    Abstract base class defining the interface for node predicates.

    A node predicate decides, from a node id alone, whether a node may stay in a
    filtered hierarchy. Instances are callable, so they can be passed anywhere a
    plain ``Callable[[NodeId], bool]`` is expected, including ``filter_hierarchy``.
    Plain functions and lambdas remain valid predicates; this class only adds a
    common home for reusable, composable ones.

    Example:
        >>> class EvenPredicate(BaseNodePredicate):
        ...     def accept(self, node_id: NodeId) -> bool:
        ...         return node_id % 2 == 0
        >>> even = EvenPredicate()
        >>> even(4)
        True
        >>> even.accept(3)
        False
    """

    @abstractmethod
    def accept(self, node_id: NodeId) -> bool:
        """
        Determine whether the node with the given id passes this predicate.

        Args:
            node_id (NodeId): The identifier of the node being evaluated.

        Returns:
            bool: True if the node may stay, False if it (and its subtree) must go.
        """
        pass

    def __call__(self, node_id: NodeId) -> bool:
        return self.accept(node_id)
