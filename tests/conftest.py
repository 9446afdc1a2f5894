"""Test configuration and fixtures for flatforest."""

import pytest

from flatforest.hierarchy import ArrayHierarchy

# 1         6       8
# - 2       - 7     - 9
# - - 3             - 10
# - - - 4           - - 11
# - 5
SAMPLE_IDS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]
SAMPLE_DEPTHS = [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2]


@pytest.fixture
def sample_forest():
    """The three-tree forest used throughout the filter tests."""
    return ArrayHierarchy(SAMPLE_IDS, SAMPLE_DEPTHS)


@pytest.fixture
def empty_hierarchy():
    return ArrayHierarchy([], [])


class RecordingPredicate:
    """Predicate that remembers every node id it was asked about."""

    def __init__(self, predicate):
        self.predicate = predicate
        self.calls = []

    def __call__(self, node_id):
        self.calls.append(node_id)
        return self.predicate(node_id)


@pytest.fixture
def recording_predicate():
    """Factory wrapping a plain predicate so its calls can be inspected."""
    return RecordingPredicate
