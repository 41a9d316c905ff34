from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class Node(Generic[T]):
    def __init__(
        self,
        value: T,
        left: Optional['Node[T]'] = None,
        right: Optional['Node[T]'] = None,
    ) -> None:
        self.value: T = value
        self.left: Optional[Node[T]] = left
        self.right: Optional[Node[T]] = right

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
