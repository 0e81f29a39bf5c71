import pytest
from hypothesis import given
from hypothesis import strategies as st

from algosolve.trees import TreeNode, build_tree, max_depth, width_of_binary_tree


def _chain(length):
    root = None
    for value in range(length):
        root = TreeNode(value, left=root)
    return root


def test_build_tree_places_children_in_level_order():
    root = build_tree([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4
    assert root.right.left is None and root.right.right is None


def test_build_tree_empty():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_build_tree_tolerates_trailing_nones():
    root = build_tree([1, None, None, None, None])
    assert root.val == 1
    assert root.left is None and root.right is None


def test_build_tree_rejects_orphan_children():
    with pytest.raises(ValueError):
        build_tree([1, None, None, 5])


def test_max_depth_example():
    assert max_depth(build_tree([3, 9, 20, None, None, 15, 7])) == 3


def test_max_depth_empty():
    assert max_depth(None) == 0


@given(st.integers(min_value=1, max_value=300))
def test_max_depth_of_chain_is_its_length(length):
    assert max_depth(_chain(length)) == length


@given(st.integers(min_value=1, max_value=8))
def test_perfect_tree_depth_and_width(depth):
    root = build_tree(list(range(2**depth - 1)))
    assert max_depth(root) == depth
    assert width_of_binary_tree(root) == 2 ** (depth - 1)


def test_width_example():
    assert width_of_binary_tree(build_tree([1, 3, 2, 5, 3, None, 9])) == 4


def test_width_empty_and_single():
    assert width_of_binary_tree(None) == 0
    assert width_of_binary_tree(TreeNode(1)) == 1


@given(st.integers(min_value=1, max_value=300))
def test_width_of_chain_is_one(length):
    assert width_of_binary_tree(_chain(length)) == 1


@given(st.lists(st.one_of(st.none(), st.integers()), max_size=40))
def test_width_bounded_by_depth(values):
    values = [0, *values]
    try:
        root = build_tree(values)
    except ValueError:
        root = build_tree([0])
    depth = max_depth(root)
    width = width_of_binary_tree(root)
    assert 1 <= width <= 2 ** (depth - 1)