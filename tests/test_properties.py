from arbor.node import Node
from arbor.properties import (
    balance,
    height,
    internal_nodes,
    is_complete,
    is_full,
    is_perfect,
    leaves,
    size,
)
from arbor.traversal import preorder


def _attach_left(parent, value):
    parent.left = Node(value, parent=parent)
    return parent.left


def _attach_right(parent, value):
    parent.right = Node(value, parent=parent)
    return parent.right


def _nodes(tree):
    if tree is None:
        return []
    return [tree] + _nodes(tree.left) + _nodes(tree.right)


def _base_tree():
    root = Node(98)
    _attach_left(root, 12)
    _attach_right(root, 402)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def test_height_matches_deepest_node():
    root = _base_tree()
    assert height(root) == max(node.depth() for node in _nodes(root))
    assert height(root.left.right) == 0
    assert height(root.right) == height(root.right.right) + 1
    assert height(None) == 0


def test_size():
    root = _base_tree()
    values = [98, 12, 402, 54, 128]
    assert size(root) == len(values)
    assert size(root) == len(list(preorder(root)))
    assert size(root.left.right) == 1
    assert size(None) == 0


def test_leaves_and_internal_nodes_partition_tree():
    root = _base_tree()
    assert leaves(root) == sum(node.is_leaf() for node in _nodes(root))
    assert leaves(root) + internal_nodes(root) == size(root)
    assert leaves(root.left.right) == 1
    assert internal_nodes(root.left.right) == 0
    assert leaves(None) == internal_nodes(None) == 0


def test_internal_nodes_of_chain():
    root = Node(1)
    _attach_right(_attach_right(root, 2), 3)
    assert internal_nodes(root) == size(root) - 1
    assert leaves(root) == 1


def test_balance():
    root = _base_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    assert balance(root) == 2
    assert balance(root.right) == -1
    assert balance(root.left.left.right) == 0
    assert balance(None) == 0


def test_balance_of_perfect_tree_is_zero():
    root = Node(2)
    _attach_left(root, 1)
    _attach_right(root, 3)
    assert balance(root) == 0


def test_is_full():
    root = _base_tree()
    _attach_left(root.left, 10)
    assert not is_full(root)
    assert is_full(root.left)
    assert not is_full(root.right)
    assert is_full(root.left.left)
    assert not is_full(None)


def test_is_perfect():
    root = _base_tree()
    _attach_left(root.left, 10)
    _attach_left(root.right, 10)
    assert is_perfect(root)
    assert size(root) == 2 ** (height(root) + 1) - 1

    _attach_left(root.right.right, 10)
    assert not is_perfect(root)

    _attach_right(root.right.right, 10)
    assert not is_perfect(root)
    assert not is_perfect(None)
    assert is_perfect(Node(1))


def test_is_complete():
    root = Node(98)
    n12 = _attach_left(root, 12)
    n128 = _attach_right(root, 128)
    n54 = _attach_right(n12, 54)
    _attach_right(n128, 402)
    n10 = _attach_left(n12, 10)
    _attach_left(n128, 45)
    assert is_complete(root)
    assert is_complete(n12)

    _attach_left(n128, 112)
    assert is_complete(root)

    _attach_left(n10, 8)
    assert is_complete(root)

    _attach_left(n54, 23)
    assert not is_complete(root)


def test_is_complete_gap_on_left():
    root = Node(1)
    _attach_right(root, 2)
    assert not is_complete(root)
    assert not is_complete(None)
    assert is_complete(Node(1))