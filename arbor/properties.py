"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from collections import deque
from typing import Optional

from arbor.node import Node


def height(tree: Optional[Node]) -> int:
    """Number of edges on the longest path from the node down to a leaf."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Optional[Node]) -> int:
    """Number of nodes on the longest downward path; 0 for an empty tree."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Number of nodes with no children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if tree.is_leaf() else 1
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Left subtree height minus right subtree height; 0 for an empty tree."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """True when every node has either two children or none."""
    if tree is None:
        return False
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return tree.is_leaf()


def _perfect_levels(tree: Node) -> int:
    """Level count of a perfect subtree, or 0 if it is not perfect."""
    if tree.left is not None and tree.right is not None:
        left = _perfect_levels(tree.left)
        right = _perfect_levels(tree.right)
        if left and left == right:
            return left + 1
        return 0
    return 1 if tree.is_leaf() else 0


def is_perfect(tree: Optional[Node]) -> bool:
    """True when all internal nodes have two children and all leaves share a level."""
    if tree is None:
        return False
    return _perfect_levels(tree) != 0


def is_complete(tree: Optional[Node]) -> bool:
    """True when every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    gap_seen = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                gap_seen = True
            elif gap_seen:
                return False
            else:
                queue.append(child)
    return True