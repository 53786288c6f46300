"""Text rendering of binary trees as boxed values joined by connector lines."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from arbor.node import Node
from arbor.properties import height


def render(tree: Optional[Node]) -> str:
    """Draw the tree one level per line, with trailing spaces removed.

    Each value is shown as ``(NNN)``. A dotted connector on the line above
    marks where a child hangs from its parent. An empty tree renders as "".
    """
    if tree is None:
        return ""
    rows: List[List[str]] = [[] for _ in range(height(tree) + 1)]

    def put(depth: int, col: int, text: str) -> None:
        if col < 0:
            text = text[-col:]
            col = 0
        row = rows[depth]
        end = col + len(text)
        if len(row) < end:
            row.extend(" " * (end - len(row)))
        row[col:end] = text

    def place(node: Optional[Node], offset: int, depth: int, is_left: bool) -> int:
        if node is None:
            return 0
        label = f"({node.value:03d})"
        width = len(label)
        left = place(node.left, offset, depth + 1, True)
        right = place(node.right, offset + left + width, depth + 1, False)
        put(depth, offset + left, label)
        if depth:
            joint = offset + left + width // 2
            if is_left:
                put(depth - 1, joint, "-" * (width + right))
            else:
                put(depth - 1, offset - width // 2, "-" * (left + width))
            put(depth - 1, joint, ".")
        return left + width + right

    place(tree, 0, 0, False)
    return "\n".join("".join(row).rstrip() for row in rows)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendering of the tree to ``file`` (standard output by default)."""
    if tree is None:
        return
    print(render(tree), file=file if file is not None else sys.stdout)