from typing import Generic, List, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    pass


class Stack(Generic[T]):
    """
    List-backed LIFO container.
    push / pop / peek: O(1)
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise EmptyStackError("Stack is empty")
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        self._items = []

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()
