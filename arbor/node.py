"""Binary tree nodes and the operations that act on links between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, value: int) -> Node:
        """Insert a new left child, pushing any existing left child below it."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child, pushing any existing right child below it."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Number of edges between this node and the root of its tree."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, if any."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def lowest_common_ancestor(
    first: Optional[Node], second: Optional[Node]
) -> Optional[Node]:
    """Walk both nodes towards the root until they meet; None if they never do."""
    while first is not None and second is not None:
        if first is second:
            return first
        p, q = first.parent, second.parent
        if p is None or first is q or (p.parent is None and q is not None):
            second = q
        elif q is None or p is second or (q.parent is None and p is not None):
            first = p
        else:
            first, second = p, q
    return None


def rotate_left(tree: Node) -> Node:
    """Rotate the subtree left around its right child and return the new top.

    The link from the former parent to the subtree is left for the caller.
    """
    pivot = tree.right
    if pivot is None:
        raise ValueError("cannot rotate left: node has no right child")
    tree.right = pivot.left
    if pivot.left is not None:
        pivot.left.parent = tree
    pivot.left = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate the subtree right around its left child and return the new top.

    The link from the former parent to the subtree is left for the caller.
    """
    pivot = tree.left
    if pivot is None:
        raise ValueError("cannot rotate right: node has no left child")
    tree.left = pivot.right
    if pivot.right is not None:
        pivot.right.parent = tree
    pivot.right = tree
    pivot.parent = tree.parent
    tree.parent = pivot
    return pivot