"""Abstract depth-encoded hierarchy.

A Hierarchy stores an ordered forest as node ids in DFS order together with a
parallel sequence of depths. Parent/child links are not stored; they follow from
the depth deltas between consecutive positions:

    node ids: 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11
    depths:   0, 1, 2, 3, 1, 0, 1, 0, 1,  1,  2

encodes the forest

    1
    - 2
    - - 3
    - - - 4
    - 5
    6
    - 7
    8
    - 9
    - 10
    - - 11
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Tuple

from anytree import ContStyle, RenderTree

from flatforest.exceptions import MalformedHierarchyError
from flatforest.types import Depth, NodeId

from .hierarchy_node import HierarchyNode


class Hierarchy(ABC):
    """Abstract base class for an ordered forest serialized in DFS order.

    Implementations provide the node count and per-position accessors. Everything
    else (iteration, subtree spans, equality and the debug renderings) is built on
    those three methods, so any conforming implementation can be filtered and
    rendered.

    Invariants on the depth sequence:
        - The first position, if any, has depth 0.
        - If position ``i`` has depth ``D``, position ``i + 1`` has depth ``D + 1``
          (first child of ``i``), ``D`` (next sibling) or anything less than ``D``
          (an unrelated, shallower branch).

    Instances are immutable. Identity is positional: two positions holding the same
    node id are different nodes.
    """

    @abstractmethod
    def size(self) -> int:
        """Return the number of nodes in the hierarchy."""

    @abstractmethod
    def node_id(self, index: int) -> NodeId:
        """Return the node id stored at ``index``.

        Args:
            index: Position in the hierarchy; must satisfy ``0 <= index < size()``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, size())``.
        """

    @abstractmethod
    def depth(self, index: int) -> Depth:
        """Return the depth of the node stored at ``index``.

        Args:
            index: Position in the hierarchy; must satisfy ``0 <= index < size()``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, size())``.
        """

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: Any) -> bool:
        """Compare two hierarchies by their (node id, depth) sequences.

        Any two Hierarchy implementations holding the same sequence are equal.
        """
        if not isinstance(other, Hierarchy):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(mine == theirs for mine, theirs in zip(self.iter_nodes(), other.iter_nodes()))

    def iter_nodes(self) -> Iterator[Tuple[NodeId, Depth]]:
        """Yield ``(node_id, depth)`` pairs in DFS order."""
        for index in range(self.size()):
            yield self.node_id(index), self.depth(index)

    def subtree_end(self, index: int) -> int:
        """Return the position just past the subtree span of ``index``.

        The subtree span is the maximal run of positions after ``index`` whose depth
        is strictly greater than the depth at ``index``. The scan never passes
        ``size()``, whatever the depth sequence holds.

        Args:
            index: Position of the subtree root.

        Returns:
            The first position that is not a descendant of ``index``.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, size())``.

        Example:
            >>> from flatforest.hierarchy import ArrayHierarchy
            >>> h = ArrayHierarchy([1, 2, 3, 4], [0, 1, 2, 0])
            >>> h.subtree_end(1)
            3
        """
        root_depth = self.depth(index)
        size = self.size()
        end = index + 1
        while end < size and self.depth(end) > root_depth:
            end += 1
        return end

    def format_string(self) -> str:
        """Render the hierarchy as ``[id:depth, id:depth, ...]``.

        Example:
            >>> from flatforest.hierarchy import ArrayHierarchy
            >>> ArrayHierarchy([1, 2, 6], [0, 1, 0]).format_string()
            '[1:0, 2:1, 6:0]'
            >>> ArrayHierarchy([], []).format_string()
            '[]'
        """
        return "[" + ", ".join(f"{node_id}:{depth}" for node_id, depth in self.iter_nodes()) + "]"

    def format_outline(self) -> str:
        """Render one node per line, prefixed by one ``"- "`` per level of depth.

        Example:
            >>> from flatforest.hierarchy import ArrayHierarchy
            >>> print(ArrayHierarchy([1, 2, 3, 5], [0, 1, 2, 1]).format_outline())
            1
            - 2
            - - 3
            - 5
        """
        return "\n".join(f"{'- ' * depth}{node_id}" for node_id, depth in self.iter_nodes())

    def to_forest(self) -> List[HierarchyNode]:
        """Build a pointer-based view of the forest.

        Parent links are rebuilt from the depth deltas with a stack holding the
        current ancestor chain. The flat hierarchy is not modified and the returned
        nodes share no storage with it.

        Returns:
            The root nodes of each tree, in order.

        Raises:
            MalformedHierarchyError: If a depth is negative or rises by more than one.

        Example:
            >>> from flatforest.hierarchy import ArrayHierarchy
            >>> roots = ArrayHierarchy([1, 2, 5, 6], [0, 1, 1, 0]).to_forest()
            >>> [root.node_id for root in roots]
            [1, 6]
            >>> [child.node_id for child in roots[0].children]
            [2, 5]
        """
        roots: List[HierarchyNode] = []
        ancestors: List[HierarchyNode] = []
        for position, (node_id, depth) in enumerate(self.iter_nodes()):
            if depth < 0:
                raise MalformedHierarchyError(f"negative depth {depth}", position)
            if depth > len(ancestors):
                if position == 0:
                    reason = f"first node must have depth 0, got {depth}"
                else:
                    reason = f"depth rises from {len(ancestors) - 1} to {depth}"
                raise MalformedHierarchyError(reason, position)

            del ancestors[depth:]
            parent = ancestors[-1] if ancestors else None
            node = HierarchyNode(node_id, position=position, parent=parent)
            if parent is None:
                roots.append(node)
            ancestors.append(node)
        return roots

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a box-drawing rendering of the forest one line at a time.

        Each tree root starts at column zero, similar to the Unix 'tree' command.

        Yields:
            Lines of the rendering, including the connecting lines.

        Raises:
            MalformedHierarchyError: If the depth sequence is not a valid forest.

        Example:
            >>> from flatforest.hierarchy import ArrayHierarchy
            >>> for line in ArrayHierarchy([1, 2, 3, 5], [0, 1, 2, 1]).stream_tree_representation():
            ...     print(line)
            1
            ├── 2
            │   └── 3
            └── 5
        """
        for root in self.to_forest():
            for prefix, _, node in RenderTree(root, style=ContStyle()):
                yield f"{prefix}{node.node_id}"

    def get_tree_representation(self) -> str:
        """Get the complete box-drawing rendering as a string.

        Raises:
            MalformedHierarchyError: If the depth sequence is not a valid forest.
        """
        return "\n".join(self.stream_tree_representation())
