"""Binary trees of linked nodes: traversals, properties, drawing, BSTs, AVL trees and max heaps."""

__version__ = "0.1.0"
__all__ = ["node", "traversal", "properties", "printing", "bst", "avl", "heap"]