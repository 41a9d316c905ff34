"""Sideways text rendering of a tree, right subtree on top.

For the tree built from ``[1, 2, 3]``::

    │   ┌── 3
    └── 2
        └── 1
"""

from typing import List, Optional

from .node import Node

EMPTY = "<empty>"


def _render(node: Node, prefix: str, is_left: bool, lines: List[str]) -> None:
    if node.right is not None:
        _render(node.right, prefix + ("│   " if is_left else "    "), False, lines)
    lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.value}")
    if node.left is not None:
        _render(node.left, prefix + ("    " if is_left else "│   "), True, lines)


def format_tree(node: Optional[Node]) -> str:
    if node is None:
        return EMPTY
    lines: List[str] = []
    _render(node, "", True, lines)
    return "\n".join(lines)


def print_tree(node: Optional[Node]) -> None:
    print(format_tree(node))
