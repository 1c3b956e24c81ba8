from hypothesis import given
from hypothesis import strategies as st

from algokit.tree import TreeNode, width_of_binary_tree


def _perfect(depth):
    if depth == 0:
        return None
    return TreeNode(depth, _perfect(depth - 1), _perfect(depth - 1))


def test_empty_tree():
    assert width_of_binary_tree(None) == 0


def test_single_node():
    assert width_of_binary_tree(TreeNode(1)) == 1


def test_gap_counts():
    root = TreeNode(
        1,
        TreeNode(3, TreeNode(5), TreeNode(3)),
        TreeNode(2, None, TreeNode(9)),
    )
    assert width_of_binary_tree(root) == 4


@given(st.integers(1, 10))
def test_perfect_tree_width(depth):
    assert width_of_binary_tree(_perfect(depth)) == 2 ** (depth - 1)


@given(st.lists(st.booleans(), max_size=80))
def test_chain_has_width_of_one_node(directions):
    root = TreeNode()
    node = root
    for go_left in directions:
        child = TreeNode()
        if go_left:
            node.left = child
        else:
            node.right = child
        node = child
    assert width_of_binary_tree(root) == width_of_binary_tree(TreeNode())


def test_deep_outer_edges():
    depth = 100
    root = TreeNode()
    left = right = root
    for _ in range(depth):
        left.left = TreeNode()
        right.right = TreeNode()
        left, right = left.left, right.right
    assert width_of_binary_tree(root) == 2**depth