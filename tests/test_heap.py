import pytest

from arbor.heap import MaxHeap, is_heap
from arbor.node import Node
from arbor.properties import is_complete
from arbor.traversal import levelorder

SAMPLE = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def basic_tree():
    root = Node(98)
    root.left = Node(90, parent=root)
    root.right = Node(85, parent=root)
    root.left.right = Node(80, parent=root.left)
    root.left.left = Node(79, parent=root.left)
    return root


def test_basic_tree_is_heap():
    root = basic_tree()
    assert is_heap(root) is True
    assert is_heap(root.left) is True


def test_larger_child_breaks_heap():
    root = basic_tree()
    root.right.left = Node(97, parent=root.right)
    assert is_heap(root) is False


def test_incomplete_tree_is_not_heap():
    root = basic_tree()
    root.right.right = Node(79, parent=root.right)
    assert is_heap(root) is False


def test_empty_tree_is_not_heap():
    assert is_heap(None) is False


def test_deep_order_violation_detected():
    root = Node(100)
    root.left = Node(50, parent=root)
    root.right = Node(40, parent=root)
    root.left.left = Node(60, parent=root.left)
    assert is_heap(root) is False


def test_insert_into_empty_returns_root():
    heap = MaxHeap()
    node = heap.insert(98)
    assert node is heap.root
    assert node.value == 98
    assert len(heap) == 1


def test_insert_sifts_up_and_returns_resting_node():
    heap = MaxHeap([98])
    node = heap.insert(402)
    assert node is heap.root
    assert node.value == 402
    assert list(levelorder(heap.root)) == [402, 98]


def test_array_to_heap_keeps_invariants():
    heap = MaxHeap(SAMPLE)
    assert len(heap) == len(SAMPLE)
    assert is_heap(heap.root)
    assert is_complete(heap.root)
    assert heap.root.value == max(SAMPLE)
    assert sorted(levelorder(heap.root)) == sorted(SAMPLE)


def test_extract_returns_largest_each_time():
    heap = MaxHeap(SAMPLE)
    expected = sorted(SAMPLE, reverse=True)
    for value in expected[:5]:
        assert heap.extract() == value
        assert is_heap(heap.root)
    assert len(heap) == len(SAMPLE) - 5


def test_extract_last_value_empties_heap():
    heap = MaxHeap([7])
    assert heap.extract() == 7
    assert heap.root is None
    assert len(heap) == 0


def test_extract_from_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract()


def test_to_sorted_list_drains_in_descending_order():
    heap = MaxHeap(SAMPLE)
    assert heap.to_sorted_list() == sorted(SAMPLE, reverse=True)
    assert len(heap) == 0
    assert heap.root is None


def test_duplicates_are_kept():
    values = [5, 5, 3, 5, 1]
    heap = MaxHeap(values)
    assert len(heap) == len(values)
    assert heap.to_sorted_list() == sorted(values, reverse=True)


def test_parent_links_consistent_after_operations():
    heap = MaxHeap(SAMPLE)
    heap.extract()
    heap.insert(50)

    def check(node):
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                check(child)

    assert heap.root.parent is None
    check(heap.root)
    assert is_heap(heap.root)