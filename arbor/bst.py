"""Binary search trees: validation, lookup, insertion and removal."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from arbor.node import Node
from arbor.properties import size
from arbor.traversal import inorder


def _within(node: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if node is None:
        return True
    if low is not None and node.value <= low:
        return False
    if high is not None and node.value >= high:
        return False
    return _within(node.left, low, node.value) and _within(node.right, node.value, high)


def is_bst(tree: Optional[Node]) -> bool:
    """True when every left descendant is smaller and every right one larger.

    Duplicate values are not allowed. An empty tree is not a BST.
    """
    if tree is None:
        return False
    return _within(tree, None, None)


def search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value`` in a BST, or None if it is absent."""
    node = tree
    while node is not None:
        if value < node.value:
            node = node.left
        elif value > node.value:
            node = node.right
        else:
            return node
    return None


class BinarySearchTree:
    """A binary search tree of distinct integers rooted at ``root``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> Optional[Node]:
        """Add ``value`` as a new leaf; return the new node, or None if present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    return node.insert_left(value)
                node = node.left
            elif value > node.value:
                if node.right is None:
                    return node.insert_right(value)
                node = node.right
            else:
                return None

    def search(self, value: int) -> Optional[Node]:
        """Return the node holding ``value``, or None if it is absent."""
        return search(self.root, value)

    def remove(self, value: int) -> None:
        """Delete ``value`` from the tree; nothing happens if it is absent.

        A node with two children takes the value of its in-order successor,
        which is then unlinked in its place.
        """
        node = search(self.root, value)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node = successor
        child = node.left if node.left is not None else node.right
        self._replace(node, child)

    def _replace(self, node: Node, child: Optional[Node]) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and search(self.root, value) is not None

    def __iter__(self) -> Iterator[int]:
        return inorder(self.root)

    def __len__(self) -> int:
        return size(self.root)