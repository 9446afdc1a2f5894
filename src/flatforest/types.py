from typing import Callable

# Opaque node identifier. Identity is positional, so ids may repeat.
NodeId = int

# Edge count from a node to the root of its tree.
Depth = int

# Anything that decides, from a node id alone, whether the node is kept.
NodePredicate = Callable[[NodeId], bool]
