"""Depth-encoded forest containers.

This package provides the abstract Hierarchy contract, its tuple-backed
implementation, opt-in validation of the depth invariant, and an anytree-based
pointer view for rendering and inspection.
"""

from .array_hierarchy import ArrayHierarchy
from .base_hierarchy import Hierarchy
from .hierarchy_node import HierarchyNode
from .validation import ValidationAction, validate_depths, validate_hierarchy, validate_sequences

__all__ = [
    "ArrayHierarchy",
    "Hierarchy",
    "HierarchyNode",
    "ValidationAction",
    "validate_depths",
    "validate_hierarchy",
    "validate_sequences",
]
