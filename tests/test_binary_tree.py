import pytest

from algokit.binary_tree import BinarySearchTree, TreeNode, same_tree

VALUES = [5, 10, 2, 3, 8, 7]


def _check_links(tree):
    stack = [tree.root] if tree.root else []
    if tree.root is not None:
        assert tree.root.parent is None
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)


def test_inorder_is_sorted():
    tree = BinarySearchTree(VALUES)
    assert tree.inorder() == sorted(VALUES)
    assert list(tree) == sorted(VALUES)
    assert len(tree) == len(VALUES)


def test_successor_of_root_and_inner_node():
    tree = BinarySearchTree(VALUES)
    ordered = sorted(VALUES)
    root_next = tree.successor(tree.root)
    assert root_next.value == ordered[ordered.index(5) + 1]
    three_next = tree.successor(tree.find(3))
    assert three_next.value == ordered[ordered.index(3) + 1]


def test_successor_of_every_node_follows_inorder():
    tree = BinarySearchTree(VALUES)
    ordered = sorted(VALUES)
    for current, expected in zip(ordered, ordered[1:]):
        assert tree.successor(tree.find(current)).value == expected
    assert tree.successor(tree.find(max(VALUES))) is None


def test_find_missing_returns_none():
    tree = BinarySearchTree(VALUES)
    assert tree.find(4) is None
    assert tree.find(8).value == 8


def test_duplicates_go_left():
    tree = BinarySearchTree([5, 5])
    assert tree.root.left.value == 5
    assert tree.root.right is None


def test_delete_root_until_empty():
    tree = BinarySearchTree(VALUES)
    remaining = sorted(VALUES)
    while len(tree):
        root_value = tree.root.value
        removed = tree.delete_root()
        assert removed == root_value
        remaining.remove(removed)
        assert tree.inorder() == remaining
        _check_links(tree)
    assert remaining == []
    with pytest.raises(IndexError):
        tree.delete_root()


def test_delete_from_empty_tree_raises():
    with pytest.raises(IndexError):
        BinarySearchTree().delete_root()


def test_mirror_reverses_order_and_is_involution():
    tree = BinarySearchTree(VALUES)
    tree.mirror()
    assert list(tree) == sorted(VALUES, reverse=True)
    tree.mirror()
    assert same_tree(tree, BinarySearchTree(VALUES))


def test_same_tree_depends_on_shape():
    assert same_tree(BinarySearchTree([2, 1, 3]), BinarySearchTree([2, 3, 1]))
    assert not same_tree(BinarySearchTree([2, 1, 3]), BinarySearchTree([1, 2, 3]))
    assert same_tree(None, BinarySearchTree())
    assert not same_tree(TreeNode(1), None)