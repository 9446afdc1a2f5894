"""Node representation for the pointer-based view of a hierarchy."""

from typing import Any, Optional

from anytree import Node

from flatforest.types import NodeId


class HierarchyNode(Node):  # type: ignore
    """Node class representing one position of a depth-encoded hierarchy.

    Extends anytree.Node so that a flat hierarchy can be viewed, rendered and walked
    as an ordinary tree. The node's ``name`` is its node id. The inherited ``depth``
    property (edge count to the root) equals the depth stored in the flat hierarchy
    for every node produced by ``Hierarchy.to_forest``.

    Attributes:
        node_id (NodeId): The opaque identifier stored at this position.
        position (int): Index of the node in the source hierarchy. Two nodes with the
            same id are told apart by position.
        parent (Optional[HierarchyNode]): The parent node, or None for a tree root.
        children (tuple[HierarchyNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = HierarchyNode(1, position=0)
        >>> child = HierarchyNode(2, position=1, parent=root)
        >>> child.depth
        1
        >>> root.children[0].node_id
        2
    """

    def __init__(
        self,
        node_id: NodeId,
        position: int,
        parent: Optional["HierarchyNode"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a HierarchyNode.

        Args:
            node_id: The identifier stored at this position.
            position: Index of the node in the source hierarchy.
            parent: The parent node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(node_id, parent, **kwargs)
        self.node_id = node_id
        self.position = position
