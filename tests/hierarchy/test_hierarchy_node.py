"""Unit tests for the HierarchyNode class."""

from flatforest.hierarchy import HierarchyNode


def test_hierarchy_node_initialization():
    """Test basic initialization of HierarchyNode."""
    node = HierarchyNode(42, position=3)

    assert node.node_id == 42
    assert node.name == 42
    assert node.position == 3
    assert node.parent is None
    assert node.depth == 0
    assert node.is_leaf


def test_hierarchy_node_parent_child():
    """Test parent-child relationships in HierarchyNode."""
    root = HierarchyNode(1, position=0)
    child1 = HierarchyNode(2, position=1, parent=root)
    grandchild = HierarchyNode(3, position=2, parent=child1)
    child2 = HierarchyNode(5, position=3, parent=root)

    assert child1.parent == root
    assert grandchild.parent == child1
    assert root.children == (child1, child2)
    assert grandchild.depth == 2
    assert child2.depth == 1


def test_hierarchy_node_with_additional_attributes():
    """Test HierarchyNode with additional attributes."""
    node = HierarchyNode(7, position=0, label="engineering")

    assert node.label == "engineering"
