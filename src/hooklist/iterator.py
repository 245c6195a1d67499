"""External cursor over a DoublyLinkedList."""

from typing import TYPE_CHECKING, Generic

from hooklist.types import START_HEAD, START_TAIL, Direction, T

if TYPE_CHECKING:
    from hooklist.linkedlist import DoublyLinkedList, Node


class ListIter(Generic[T]):
    """
    Resumable cursor over a list in a fixed direction.

    The cursor always holds the node that will be yielded next. ``next()``
    advances it before returning, so the caller may delete the node it just
    received and keep iterating. Deleting any other node while iterating is
    not supported.
    """

    __slots__ = ("_list", "_next", "_direction")

    def __init__(self, lst: "DoublyLinkedList[T]", direction: Direction = START_HEAD) -> None:
        self._list: DoublyLinkedList[T] | None = None
        self._next: Node[T] | None = None
        self._direction: Direction = START_HEAD
        self.reset(lst, direction)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def released(self) -> bool:
        return self._list is None

    def reset(self, lst: "DoublyLinkedList[T]", direction: Direction) -> None:
        """Bind the iterator to ``lst`` and place it at the end given by ``direction``."""
        if direction == START_HEAD:
            self._next = lst.head
        elif direction == START_TAIL:
            self._next = lst.tail
        else:
            raise ValueError(f"Invalid iteration direction {direction!r}")
        self._list = lst
        self._direction = direction

    def rewind(self) -> None:
        """Restart from the head of the bound list, moving forward."""
        if self._list is not None:
            self.reset(self._list, START_HEAD)

    def rewind_tail(self) -> None:
        """Restart from the tail of the bound list, moving backward."""
        if self._list is not None:
            self.reset(self._list, START_TAIL)

    def next(self) -> "Node[T] | None":
        """Return the next node, or None when exhausted."""
        current = self._next
        if current is not None:
            if self._direction == START_HEAD:
                self._next = current.next
            else:
                self._next = current.prev
        return current

    def release(self) -> None:
        """Detach from the list. The list itself is unaffected."""
        self._list = None
        self._next = None

    def __iter__(self) -> "ListIter[T]":
        return self

    def __next__(self) -> "Node[T]":
        node = self.next()
        if node is None:
            raise StopIteration
        return node
