"""Self-balancing AVL trees built on the binary search tree."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from arbor.bst import BinarySearchTree
from arbor.node import Node, rotate_left, rotate_right
from arbor.properties import balance


def _avl_within(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and node.value <= low:
        return False
    if high is not None and node.value >= high:
        return False
    if abs(balance(node)) > 1:
        return False
    return _avl_within(node.left, low, node.value) and _avl_within(
        node.right, node.value, high
    )


def is_avl(tree: Optional[Node]) -> bool:
    """True when the tree is a BST whose subtree heights differ by at most one everywhere.

    An empty tree is not an AVL tree.
    """
    if tree is None:
        return False
    return _avl_within(tree, None, None)


def _insert(node: Optional[Node], parent: Optional[Node], value: int) -> Tuple[Node, Optional[Node]]:
    """Insert below ``node``; return the subtree's new top and the created node."""
    if node is None:
        created = Node(value, parent=parent)
        return created, created
    if value < node.value:
        node.left, created = _insert(node.left, node, value)
    elif value > node.value:
        node.right, created = _insert(node.right, node, value)
    else:
        return node, None
    if created is None:
        return node, None
    factor = balance(node)
    if factor > 1:
        if value > node.left.value:
            node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1:
        if value < node.right.value:
            node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, created


def _rebalance(node: Optional[Node]) -> Optional[Node]:
    """Restore balance bottom-up after a removal; return the subtree's new top."""
    if node is None or node.is_leaf():
        return node
    node.left = _rebalance(node.left)
    node.right = _rebalance(node.right)
    factor = balance(node)
    if factor > 1:
        if balance(node.left) < 0:
            node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1:
        if balance(node.right) > 0:
            node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node


class AVLTree(BinarySearchTree):
    """A binary search tree kept height-balanced on every insertion and removal."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(values)

    def insert(self, value: int) -> Optional[Node]:
        """Add ``value`` and rebalance; return the new node, or None if present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        self.root, created = _insert(self.root, None, value)
        return created

    def remove(self, value: int) -> None:
        """Delete ``value`` and rebalance; nothing happens if it is absent."""
        super().remove(value)
        self.root = _rebalance(self.root)


def _build(parent: Optional[Node], values: list, begin: int, last: int) -> Optional[Node]:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent=parent)
    node.left = _build(node, values, begin, mid - 1)
    node.right = _build(node, values, mid + 1, last)
    return node


def sorted_to_avl(values: Iterable[int]) -> AVLTree:
    """Build an AVL tree from ascending values by taking middles as subtree roots."""
    items = list(values)
    tree = AVLTree()
    tree.root = _build(None, items, 0, len(items) - 1)
    return tree