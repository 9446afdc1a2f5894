"""Structural filtering of depth-encoded forests.

A node is present in the filtered hierarchy iff its node id passes the predicate
and every one of its ancestors passes it as well.
"""

import logging
from typing import List

from flatforest.hierarchy import ArrayHierarchy, Hierarchy
from flatforest.types import Depth, NodeId, NodePredicate

logger = logging.getLogger(__name__)


def filter_hierarchy(hierarchy: Hierarchy, predicate: NodePredicate) -> ArrayHierarchy:
    """Remove every node that fails ``predicate`` together with its whole subtree.

    The source is walked once, left to right. An accepted node is copied to the
    result with its depth unchanged. A rejected node sends the cursor straight past
    its subtree span, so the predicate is never called on that node's descendants.
    Removing whole subtrees leaves every survivor's ancestor chain intact, which is
    why depths never need renumbering.

    Args:
        hierarchy: Any Hierarchy implementation. It is read, never modified.
        predicate: Callable deciding from a node id whether the node may stay.
            Exceptions it raises propagate unchanged and no result is produced.

    Returns:
        A new hierarchy holding the surviving nodes in their original order. It
        shares no storage with the source.

    Example:
        >>> h = ArrayHierarchy([1, 2, 3, 4, 5, 6, 7], [0, 1, 2, 3, 1, 0, 1])
        >>> filter_hierarchy(h, lambda node_id: node_id % 3 != 0).format_string()
        '[1:0, 2:1, 5:1]'
    """
    size = hierarchy.size()
    kept_ids: List[NodeId] = []
    kept_depths: List[Depth] = []
    evaluations = 0

    index = 0
    while index < size:
        node_id = hierarchy.node_id(index)
        evaluations += 1
        if predicate(node_id):
            kept_ids.append(node_id)
            kept_depths.append(hierarchy.depth(index))
            index += 1
        else:
            index = hierarchy.subtree_end(index)

    logger.debug(
        "Filtered hierarchy: kept %d of %d nodes, pruned %d, %d predicate evaluations",
        len(kept_ids),
        size,
        size - len(kept_ids),
        evaluations,
    )
    return ArrayHierarchy(kept_ids, kept_depths)
