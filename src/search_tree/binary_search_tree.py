"""
Binary search tree built from a sorted sequence.

The tree owns a single root ``Node``; every value in a node's left subtree is
strictly smaller than the node's value and every value in its right subtree is
strictly larger. Structural operations (build, insert, remove) are recursive
and return the root of the subtree they were given so callers can reattach it.
Traversals are iterative and keep their bookkeeping in a ``Stack`` or
``Queue`` instead of the call stack.

Balance is never maintained incrementally. ``rebalance`` flattens the tree in
order and rebuilds it from scratch.
"""

from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

from .errors import DuplicateValueError, InvalidCallbackError
from .node import Node
from .queue import Queue
from .stack import Stack

T = TypeVar('T')

Visitor = Callable[[Node], Any]

# Stands in for "this tree's root" in default arguments, since None already
# means an empty subtree.
_TREE_ROOT: Any = object()


def _require_callable(callback: Any) -> None:
    if not callable(callback):
        raise InvalidCallbackError()


class BinarySearchTree(Generic[T]):
    def __init__(self, values: Sequence[T] = ()) -> None:
        """
        Args:
            values: Strictly ascending values without duplicates. The order is
                trusted, not checked.
        """
        self.root: Optional[Node[T]] = self.build(values)

    def build(self, values: Sequence[T]) -> Optional[Node[T]]:
        """Return the root of a height-balanced subtree holding ``values``."""
        if len(values) == 0:
            return None

        mid = len(values) // 2
        root = Node(values[mid])
        root.left = self.build(values[:mid])
        root.right = self.build(values[mid + 1:])
        return root

    # ------------------------------------------------------------------
    # Mutation and lookup
    # ------------------------------------------------------------------

    def insert(self, value: T, root: Optional[Node[T]] = _TREE_ROOT) -> Node[T]:
        """Insert ``value`` below ``root`` and return the subtree root.

        Raises:
            DuplicateValueError: ``value`` is already present. Nothing is
                relinked in that case.
        """
        if root is _TREE_ROOT:
            self.root = self._insert(value, self.root)
            return self.root
        return self._insert(value, root)

    def _insert(self, value: T, root: Optional[Node[T]]) -> Node[T]:
        if root is None:
            return Node(value)

        if value == root.value:
            raise DuplicateValueError(value)
        if value < root.value:
            root.left = self._insert(value, root.left)
        else:
            root.right = self._insert(value, root.right)
        return root

    def remove(self, value: T, root: Optional[Node[T]] = _TREE_ROOT) -> Optional[Node[T]]:
        """Remove ``value`` below ``root`` and return the new subtree root.

        Removing a value that is not present leaves the tree untouched.
        """
        if root is _TREE_ROOT:
            self.root = self._remove(value, self.root)
            return self.root
        return self._remove(value, root)

    def _remove(self, value: T, root: Optional[Node[T]]) -> Optional[Node[T]]:
        if root is None:
            return None

        if value < root.value:
            root.left = self._remove(value, root.left)
        elif value > root.value:
            root.right = self._remove(value, root.right)
        else:
            if root.left is None:
                return root.right
            if root.right is None:
                return root.left

            successor = self.get_smallest_node(root.right)
            root.value = successor.value
            root.right = self._remove(successor.value, root.right)
        return root

    def find(self, value: T, root: Optional[Node[T]] = _TREE_ROOT) -> Optional[Node[T]]:
        if root is _TREE_ROOT:
            root = self.root
        if root is None:
            return None

        if value == root.value:
            return root
        if value < root.value:
            return self.find(value, root.left)
        return self.find(value, root.right)

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def level_order(self, callback: Visitor, root: Optional[Node[T]] = _TREE_ROOT) -> None:
        """Visit nodes breadth-first, top to bottom and left to right."""
        _require_callable(callback)
        if root is _TREE_ROOT:
            root = self.root
        if root is None:
            return

        queue = Queue()
        queue.enqueue(root)
        while not queue.is_empty():
            node = queue.dequeue()
            callback(node)
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

    def pre_order(self, callback: Visitor, root: Optional[Node[T]] = _TREE_ROOT) -> None:
        """Visit each node before its left subtree, then its right subtree."""
        _require_callable(callback)
        if root is _TREE_ROOT:
            root = self.root
        if root is None:
            return

        stack = Stack()
        stack.push(root)
        while not stack.is_empty():
            node = stack.pop()
            callback(node)
            # Right goes first so the left child is popped next.
            if node.right is not None:
                stack.push(node.right)
            if node.left is not None:
                stack.push(node.left)

    def in_order(self, callback: Visitor, root: Optional[Node[T]] = _TREE_ROOT) -> None:
        """Visit the left subtree, the node, then the right subtree."""
        _require_callable(callback)
        if root is _TREE_ROOT:
            root = self.root
        if root is None:
            return

        stack = Stack()
        node = root
        while node is not None or not stack.is_empty():
            while node is not None:
                stack.push(node)
                node = node.left
            node = stack.pop()
            callback(node)
            node = node.right

    def post_order(self, callback: Visitor, root: Optional[Node[T]] = _TREE_ROOT) -> None:
        """Visit both subtrees before the node itself."""
        _require_callable(callback)
        if root is _TREE_ROOT:
            root = self.root
        if root is None:
            return

        stack = Stack()
        node = root
        last_visited: Optional[Node[T]] = None
        while node is not None or not stack.is_empty():
            while node is not None:
                stack.push(node)
                node = node.left

            top = stack.peek()
            if top.right is not None and top.right is not last_visited:
                node = top.right
            else:
                callback(top)
                last_visited = stack.pop()

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------

    def height(self, node: Optional[Node[T]] = _TREE_ROOT) -> int:
        """Edges on the longest downward path; -1 for an empty subtree."""
        if node is _TREE_ROOT:
            node = self.root
        if node is None:
            return -1
        return 1 + max(self.height(node.left), self.height(node.right))

    def depth(self, node: Optional[Node[T]]) -> int:
        """Edges from the root down to the position of ``node.value``.

        The path is found by comparing values, so a node that belongs to
        another tree is reported at the depth its value has in this one.
        Returns -1 for None or for a value this tree does not hold.
        """
        if node is None:
            return -1

        current = self.root
        depth = 0
        while current is not None:
            if node.value == current.value:
                return depth
            if node.value < current.value:
                current = current.left
            else:
                current = current.right
            depth += 1
        return -1

    def is_balanced(self, root: Optional[Node[T]] = _TREE_ROOT) -> bool:
        if root is _TREE_ROOT:
            root = self.root
        if root is None:
            return True

        if abs(self.height(root.left) - self.height(root.right)) > 1:
            return False
        return self.is_balanced(root.left) and self.is_balanced(root.right)

    def rebalance(self) -> None:
        """Rebuild the tree balanced. Existing ``Node`` objects are discarded."""
        self.root = self.build(self.values())

    def get_smallest_node(self, root: Node[T] = _TREE_ROOT) -> Node[T]:
        if root is _TREE_ROOT:
            root = self.root
        while root.left is not None:
            root = root.left
        return root

    def get_largest_node(self, root: Node[T] = _TREE_ROOT) -> Node[T]:
        if root is _TREE_ROOT:
            root = self.root
        while root.right is not None:
            root = root.right
        return root

    # ------------------------------------------------------------------
    # Conveniences
    # ------------------------------------------------------------------

    def values(self) -> List[T]:
        result: List[T] = []
        self.in_order(lambda node: result.append(node.value))
        return result

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        count = 0

        def tally(_node: Node) -> None:
            nonlocal count
            count += 1

        self.level_order(tally)
        return count

    def __contains__(self, value: T) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[T]:
        return iter(self.values())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.values()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={len(self)}, height={self.height()})"
