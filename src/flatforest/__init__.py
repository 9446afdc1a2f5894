"""Compact depth-encoded forests with structural filtering.

This package stores ordered forests as two parallel sequences (node ids and
depths in DFS order) and provides a filter that prunes whole subtrees whose
root fails a node predicate.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from flatforest.exceptions import MalformedHierarchyError, OutOfRangeError
from flatforest.hierarchy import (
    ArrayHierarchy,
    Hierarchy,
    HierarchyNode,
    ValidationAction,
    validate_hierarchy,
)
from flatforest.hierarchy_filter import filter_hierarchy
from flatforest.predicates import (
    AllOfPredicate,
    AnyOfPredicate,
    BaseNodePredicate,
    IdRangePredicate,
    IdSetPredicate,
)

try:
    __version__ = version("flatforest")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AllOfPredicate",
    "AnyOfPredicate",
    "ArrayHierarchy",
    "BaseNodePredicate",
    "Hierarchy",
    "HierarchyNode",
    "IdRangePredicate",
    "IdSetPredicate",
    "MalformedHierarchyError",
    "OutOfRangeError",
    "ValidationAction",
    "filter_hierarchy",
    "validate_hierarchy",
]
