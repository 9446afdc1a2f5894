"""Unit tests for composite predicates."""

from unittest.mock import Mock

import pytest

from flatforest.predicates import AllOfPredicate, AnyOfPredicate, BaseNodePredicate, IdSetPredicate


class MockPredicate(BaseNodePredicate):
    """Mock predicate for testing."""

    def __init__(self, accepted_ids=None):
        self.accepted_ids = accepted_ids or []

    def accept(self, node_id: int) -> bool:
        return node_id in self.accepted_ids


@pytest.mark.parametrize("composite_class", [AllOfPredicate, AnyOfPredicate])
class TestCompositeBookkeeping:
    """Behaviour shared by both composite predicates."""

    def test_init_with_multiple_predicates(self, composite_class):
        first = MockPredicate()
        second = MockPredicate()
        composite = composite_class([first, second])

        assert composite.get_predicate_count() == 2
        assert composite.get_predicates() == [first, second]

    def test_init_with_empty_predicates(self, composite_class):
        with pytest.raises(ValueError, match="At least one predicate must be provided"):
            composite_class([])

    def test_init_with_invalid_predicate_type(self, composite_class):
        with pytest.raises(TypeError, match="Predicate at index 1 must be callable"):
            composite_class([MockPredicate(), "not a predicate"])

    def test_accepts_plain_callables(self, composite_class):
        composite = composite_class([lambda node_id: node_id > 2])

        assert composite(3)
        assert not composite(1)

    def test_add_predicate(self, composite_class):
        composite = composite_class([MockPredicate()])
        extra = MockPredicate([1])
        composite.add_predicate(extra)

        assert composite.get_predicate_count() == 2
        assert extra in composite.get_predicates()

    def test_add_invalid_predicate(self, composite_class):
        composite = composite_class([MockPredicate()])

        with pytest.raises(TypeError, match="Predicate must be callable"):
            composite.add_predicate(42)

    def test_remove_predicate(self, composite_class):
        first = MockPredicate()
        second = MockPredicate()
        composite = composite_class([first, second])

        assert composite.remove_predicate(second)
        assert not composite.remove_predicate(second)
        assert composite.get_predicates() == [first]

    def test_remove_last_predicate_refused(self, composite_class):
        only = MockPredicate()
        composite = composite_class([only])

        assert not composite.remove_predicate(only)
        assert composite.get_predicate_count() == 1

    def test_get_predicates_returns_copy(self, composite_class):
        composite = composite_class([MockPredicate()])
        composite.get_predicates().clear()

        assert composite.get_predicate_count() == 1


class TestAllOfPredicate:
    """Test the AllOfPredicate class."""

    def test_accepts_when_all_accept(self):
        composite = AllOfPredicate([MockPredicate([1, 2]), MockPredicate([2, 3])])

        assert composite(2)
        assert not composite(1)
        assert not composite(3)

    def test_short_circuit(self):
        second = Mock(return_value=True)
        composite = AllOfPredicate([MockPredicate([]), second])

        assert not composite(1)
        second.assert_not_called()

    def test_combines_id_predicates(self):
        composite = AllOfPredicate([IdSetPredicate([1, 2, 3]), IdSetPredicate([2], include=False)])

        assert composite(1)
        assert not composite(2)
        assert not composite(4)


class TestAnyOfPredicate:
    """Test the AnyOfPredicate class."""

    def test_accepts_when_any_accepts(self):
        composite = AnyOfPredicate([MockPredicate([1]), MockPredicate([2])])

        assert composite(1)
        assert composite(2)
        assert not composite(3)

    def test_short_circuit(self):
        second = Mock(return_value=False)
        composite = AnyOfPredicate([MockPredicate([1]), second])

        assert composite(1)
        second.assert_not_called()
