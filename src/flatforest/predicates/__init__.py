"""Reusable node predicates for filtering hierarchies."""

from .base_predicates import BaseNodePredicate
from .composite_predicates import AllOfPredicate, AnyOfPredicate
from .id_predicates import IdRangePredicate, IdSetPredicate

__all__ = [
    "AllOfPredicate",
    "AnyOfPredicate",
    "BaseNodePredicate",
    "IdRangePredicate",
    "IdSetPredicate",
]
