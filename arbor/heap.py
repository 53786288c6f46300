"""Max binary heaps stored as complete binary trees of linked nodes."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from arbor.node import Node
from arbor.properties import is_complete, size


def _ordered(node: Optional[Node]) -> bool:
    """True when no child anywhere below ``node`` holds a larger value than its parent."""
    if node is None:
        return True
    for child in (node.left, node.right):
        if child is not None and child.value > node.value:
            return False
    return _ordered(node.left) and _ordered(node.right)


def is_heap(tree: Optional[Node]) -> bool:
    """True when the tree is complete and every parent is at least as large as its children.

    An empty tree is not a heap.
    """
    if tree is None:
        return False
    return is_complete(tree) and _ordered(tree)


def _turns(position: int) -> Iterator[bool]:
    """Yield the turns from the root to a 1-based level-order position; True means right."""
    for bit in bin(position)[3:]:
        yield bit == "1"


class MaxHeap:
    """A max binary heap whose largest value sits at ``root``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Optional[Node] = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return size(self.root)

    def _node_at(self, position: int) -> Node:
        """The node at a 1-based level-order position that is known to exist."""
        node = self.root
        for right in _turns(position):
            node = node.right if right else node.left
        return node

    def insert(self, value: int) -> Node:
        """Add ``value`` and sift it up; return the node where the value comes to rest."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        position = len(self) + 1
        parent = self._node_at(position // 2)
        node = Node(value, parent=parent)
        if position % 2:
            parent.right = node
        else:
            parent.left = node
        while node.parent is not None and node.value > node.parent.value:
            node.value, node.parent.value = node.parent.value, node.value
            node = node.parent
        return node

    def extract(self) -> int:
        """Remove and return the largest value.

        The last node in level order takes the root's place and sinks down.
        Raises IndexError when the heap is empty.
        """
        if self.root is None:
            raise IndexError("extract from an empty heap")
        top = self.root.value
        count = len(self)
        if count == 1:
            self.root = None
            return top
        last = self._node_at(count)
        self.root.value = last.value
        parent = last.parent
        if parent.left is last:
            parent.left = None
        else:
            parent.right = None
        last.parent = None
        self._sift_down(self.root)
        return top

    @staticmethod
    def _sift_down(node: Node) -> None:
        while True:
            larger = node.left
            if node.right is not None and (larger is None or node.right.value > larger.value):
                larger = node.right
            if larger is None or larger.value <= node.value:
                return
            node.value, larger.value = larger.value, node.value
            node = larger

    def to_sorted_list(self) -> List[int]:
        """Drain the heap and return its values in descending order.

        The heap is empty afterwards.
        """
        result: List[int] = []
        while self.root is not None:
            result.append(self.extract())
        return result