# arbor

Binary trees made of linked `Node` objects, with the usual operations on
them: traversals, measurements and shape checks, rotations, and three kinds
of ordered trees (binary search trees, AVL trees and max heaps). It can also
draw a tree as text.

## Installation

```
pip install .
```

## Building a tree by hand

```python
from arbor.node import Node

root = Node(98)
left = root.insert_left(12)
root.insert_right(402)
left.insert_right(54)

print(left.right.depth())    # 2
print(left.sibling().value)  # 402
```

A `Node` has `value`, `parent`, `left` and `right`. `insert_left` and
`insert_right` push any existing child one level down, beneath the new node.
`is_leaf`, `is_root`, `depth`, `sibling` and `uncle` describe a node's place
in its tree.

`arbor.node` also provides:

- `lowest_common_ancestor(first, second)`: the deepest node that both nodes
  descend from (a node counts as its own ancestor), or `None`.
- `rotate_left(tree)` and `rotate_right(tree)`: rotate a subtree and return
  its new top. They raise `ValueError` when the needed child is missing. The
  link from the former parent to the subtree is left for the caller to fix.

## Traversals

`arbor.traversal` has generators that yield node values:

```python
from arbor.traversal import preorder, inorder, postorder, levelorder

list(preorder(root))    # [98, 12, 54, 402]
list(inorder(root))     # [12, 54, 98, 402]
list(postorder(root))   # [54, 12, 402, 98]
list(levelorder(root))  # [98, 12, 402, 54]
```

An empty tree (`None`) yields nothing.

## Measurements and shape checks

`arbor.properties` provides `height` (edges on the longest downward path),
`size`, `leaves`, `internal_nodes` (nodes with at least one child),
`balance` (left subtree height minus right subtree height), and the checks
`is_full`, `is_perfect` and `is_complete`. The checks return `False` for an
empty tree.

## Drawing

```python
from arbor.printing import render, print_tree

print_tree(root)
```

```
  .-------(098)--.
(012)--.       (402)
     (054)
```

Each value is shown as `(NNN)`, one level per line. `render` returns the same
picture as a string (an empty string for an empty tree); `print_tree` writes
it to standard output, or to the file given as its second argument.

## Ordered trees

```python
from arbor.bst import BinarySearchTree, is_bst, search
from arbor.avl import AVLTree, is_avl, sorted_to_avl
from arbor.heap import MaxHeap, is_heap

bst = BinarySearchTree([79, 47, 68, 87])
bst.insert(21)          # the new node; None if 21 were already present
bst.remove(79)          # does nothing when the value is absent
list(bst)               # [21, 47, 68, 87]
68 in bst, len(bst)     # (True, 4)

avl = AVLTree([79, 47, 68, 87, 84, 91])
is_avl(avl.root)        # True
balanced = sorted_to_avl([1, 2, 20, 21, 22])

heap = MaxHeap([5, 9, 1])
heap.extract()          # 9
heap.to_sorted_list()   # [5, 1]; the heap is empty afterwards
```

`BinarySearchTree` and `AVLTree` keep distinct integers; duplicates are
ignored. Removing a node with two children moves its in-order successor's
value into it. `AVLTree` rebalances after every insertion and removal.
`MaxHeap.extract` raises `IndexError` on an empty heap.

`is_bst`, `is_avl` and `is_heap` check any tree of nodes, and `search` looks a
value up in any binary search tree. Each returns `False` (or `None` for
`search`) for an empty tree.

## What it does not do

This is a library only. It has no command-line program, and trees live in
memory; nothing is saved to or loaded from files.

## Running the tests

```
pip install .[test]
pytest
```