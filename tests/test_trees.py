import random

import pytest

from algokit.trees import TreeNode, inorder, level_order, postorder, preorder


def _sample():
    return TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))


def _mirror(node):
    if node is None:
        return None
    return TreeNode(node.val, _mirror(node.right), _mirror(node.left))


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            side = "left" if value < node.val else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(value))
                break
            node = child
    return root


def test_level_order_example():
    assert level_order(_sample()) == [[3], [9, 20], [15, 7]]


def test_preorder_example():
    assert preorder(_sample()) == [3, 9, 20, 15, 7]


def test_inorder_example():
    assert inorder(_sample()) == [9, 3, 15, 20, 7]


@pytest.mark.parametrize("traversal", [level_order, preorder, postorder, inorder])
def test_empty_tree(traversal):
    assert traversal(None) == []


def test_postorder_is_reversed_preorder_of_mirror():
    tree = _sample()
    assert postorder(tree) == preorder(_mirror(tree))[::-1]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_inorder_of_bst_is_sorted(seed):
    values = random.Random(seed).sample(range(100), 20)
    assert inorder(_bst(values)) == sorted(values)


@pytest.mark.parametrize("seed", [3, 4])
def test_traversals_visit_every_node_once(seed):
    values = random.Random(seed).sample(range(50), 15)
    tree = _bst(values)
    levels = [v for level in level_order(tree) for v in level]
    for visited in (preorder(tree), postorder(tree), inorder(tree), levels):
        assert sorted(visited) == sorted(values)


def test_root_position_in_traversals():
    tree = _bst([50, 20, 80, 10, 30, 70, 90])
    assert preorder(tree)[0] == 50
    assert postorder(tree)[-1] == 50
    assert level_order(tree)[0] == [50]


def test_level_sizes_of_complete_tree():
    tree = _bst([50, 20, 80, 10, 30, 70, 90])
    assert [len(level) for level in level_order(tree)] == [1, 2, 4]


def test_single_node():
    node = TreeNode(42)
    assert preorder(node) == inorder(node) == postorder(node) == [42]