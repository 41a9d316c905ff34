"""In-memory binary search tree with iterative traversals and rebalancing."""

from .binary_search_tree import BinarySearchTree
from .errors import DuplicateValueError, EmptyContainerError, InvalidCallbackError
from .node import Node
from .queue import Queue
from .stack import Stack
from .tree_printer import format_tree, print_tree

__all__ = [
    "BinarySearchTree",
    "DuplicateValueError",
    "EmptyContainerError",
    "InvalidCallbackError",
    "Node",
    "Queue",
    "Stack",
    "format_tree",
    "print_tree",
]
