"""Depth-first and breadth-first walks over binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from arbor.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values node first, then left subtree, then right subtree."""
    if tree is None:
        return
    yield tree.value
    yield from preorder(tree.left)
    yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values left subtree first, then the node, then the right subtree."""
    if tree is None:
        return
    yield from inorder(tree.left)
    yield tree.value
    yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values of both subtrees before the node itself."""
    if tree is None:
        return
    yield from postorder(tree.left)
    yield from postorder(tree.right)
    yield tree.value


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values level by level, left to right within each level."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)