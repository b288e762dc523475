"""Binary search tree with parent links, in-order successor and mirroring."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreeNode:
    """A tree node; nodes compare by identity."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, repr=False)


def _iter_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    """Yield the nodes under ``root`` in in-order (left, node, right)."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


class BinarySearchTree:
    """A binary search tree where equal values go to the left."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> TreeNode:
        """Insert ``value`` and return the new node."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return node
        current = self.root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        node.parent = current
        return node

    def delete_root(self) -> int:
        """Remove the root value, filling it from the rightmost node of the left subtree.

        Returns the removed value. Raises IndexError when the tree is empty.
        """
        root = self.root
        if root is None:
            raise IndexError("delete from an empty tree")
        removed = root.value
        if root.left is None:
            self.root = root.right
            if self.root is not None:
                self.root.parent = None
            return removed

        parent: TreeNode | None = None
        current = root.left
        while current.right is not None:
            parent = current
            current = current.right
        root.value = current.value
        if parent is not None:
            parent.right = current.left
            attach = parent
        else:
            root.left = current.left
            attach = root
        if current.left is not None:
            current.left.parent = attach
        return removed

    def inorder(self) -> list[int]:
        """Return the values in in-order."""
        return list(self)

    def mirror(self) -> None:
        """Swap the left and right children of every node."""
        for node in list(_iter_nodes(self.root)):
            node.left, node.right = node.right, node.left

    def find(self, value: int) -> TreeNode | None:
        """Return the first node holding ``value`` on the search path, or None."""
        node = self.root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def successor(self, node: TreeNode) -> TreeNode | None:
        """Return the in-order successor of ``node``, or None if it is the last."""
        if node.right is not None:
            current = node.right
            while current.left is not None:
                current = current.left
            return current
        current = node.parent
        while current is not None and current.right is node:
            node = current
            current = current.parent
        return current

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in _iter_nodes(self.root))

    def __len__(self) -> int:
        return sum(1 for _ in _iter_nodes(self.root))


def same_tree(
    first: BinarySearchTree | TreeNode | None,
    second: BinarySearchTree | TreeNode | None,
) -> bool:
    """Return True if both trees have the same shape and values."""
    if isinstance(first, BinarySearchTree):
        first = first.root
    if isinstance(second, BinarySearchTree):
        second = second.root
    pairs = [(first, second)]
    while pairs:
        a, b = pairs.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.value != b.value:
            return False
        pairs.append((a.left, b.left))
        pairs.append((a.right, b.right))
    return True