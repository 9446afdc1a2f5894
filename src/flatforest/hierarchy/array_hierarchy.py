"""Tuple-backed implementation of the Hierarchy contract."""

from typing import Iterable, Tuple

from flatforest.exceptions import OutOfRangeError
from flatforest.types import Depth, NodeId

from .base_hierarchy import Hierarchy
from .validation import ValidationAction, validate_sequences


class ArrayHierarchy(Hierarchy):
    """A hierarchy stored as two parallel, immutable sequences.

    The input iterables are copied into tuples at construction time, so the instance
    owns its storage and later changes to the caller's lists have no effect.

    By default the sequences are accepted as given: the caller is responsible for a
    structurally valid encoding. Pass ``validation=ValidationAction.RAISE`` to check
    the lengths and the depth invariant up front.

    Attributes:
        node_ids (Tuple[NodeId, ...]): Node identifiers in DFS order.
        depths (Tuple[Depth, ...]): Node depths, parallel to ``node_ids``.

    Example:
        >>> h = ArrayHierarchy([1, 2, 3], [0, 1, 1])
        >>> h.size()
        3
        >>> h.node_id(2), h.depth(2)
        (3, 1)
        >>> h.format_string()
        '[1:0, 2:1, 3:1]'
    """

    def __init__(
        self,
        node_ids: Iterable[NodeId],
        depths: Iterable[Depth],
        validation: ValidationAction = ValidationAction.IGNORE,
    ) -> None:
        """Initialize an ArrayHierarchy.

        Args:
            node_ids: Node identifiers in DFS order.
            depths: Depths in DFS order, parallel to ``node_ids``.
            validation: What to do about malformed input. Defaults to IGNORE.

        Raises:
            MalformedHierarchyError: If validation is RAISE and the sequences do not
                encode a valid forest.
        """
        self._node_ids: Tuple[NodeId, ...] = tuple(node_ids)
        self._depths: Tuple[Depth, ...] = tuple(depths)
        if validation == ValidationAction.RAISE:
            validate_sequences(self._node_ids, self._depths)

    @property
    def node_ids(self) -> Tuple[NodeId, ...]:
        return self._node_ids

    @property
    def depths(self) -> Tuple[Depth, ...]:
        return self._depths

    def size(self) -> int:
        return len(self._depths)

    def node_id(self, index: int) -> NodeId:
        self._check_index(index)
        return self._node_ids[index]

    def depth(self, index: int) -> Depth:
        self._check_index(index)
        return self._depths[index]

    def _check_index(self, index: int) -> None:
        # Tuples accept negative indices; positions here must not wrap around.
        if not 0 <= index < len(self._depths):
            raise OutOfRangeError(index, len(self._depths))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayHierarchy):
            return self._node_ids == other._node_ids and self._depths == other._depths
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash((self._node_ids, self._depths))

    def __repr__(self) -> str:
        return f"ArrayHierarchy({list(self._node_ids)!r}, {list(self._depths)!r})"
