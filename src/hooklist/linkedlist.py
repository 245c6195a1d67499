"""Doubly-linked list with pluggable value hooks and O(1) splicing."""

import logging
from collections.abc import Iterator
from typing import Any, Generic

from hooklist.errors import AllocationError, ListReleasedError
from hooklist.hooks import ValueHooks
from hooklist.iterator import ListIter
from hooklist.types import (
    START_HEAD,
    START_TAIL,
    Direction,
    DupMethod,
    FreeMethod,
    MatchMethod,
    T,
)

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list that owns its nodes and treats values as opaque.

    Values are only touched through the list's hooks: ``dup`` when the list
    is duplicated, ``free`` when a node is removed, and ``match`` when
    searching. Insertion at either end, deletion of a known node, rotation
    and joining are all O(1).
    """

    def __init__(self, hooks: ValueHooks | None = None) -> None:
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        self._hooks = hooks if hooks is not None else ValueHooks.default()
        self._released = False

    @classmethod
    def create(cls, hooks: ValueHooks | None = None) -> "DoublyLinkedList[T]":
        """
        Create an empty list.

        Raises:
            AllocationError: If the list storage cannot be obtained
        """
        try:
            return cls(hooks)
        except MemoryError as exc:
            raise AllocationError("Cannot allocate list") from exc

    # Accessors

    @property
    def head(self) -> Node[T] | None:
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        return self._tail

    first = head
    last = tail

    @property
    def hooks(self) -> ValueHooks:
        return self._hooks

    @property
    def released(self) -> bool:
        """Return True once release() has been called."""
        return self._released

    def set_dup_method(self, method: DupMethod | None) -> None:
        self._hooks = self._hooks.with_dup(method)

    def set_free_method(self, method: FreeMethod | None) -> None:
        self._hooks = self._hooks.with_free(method)

    def set_match_method(self, method: MatchMethod | None) -> None:
        self._hooks = self._hooks.with_match(method)

    def get_dup_method(self) -> DupMethod | None:
        return self._hooks.dup

    def get_free_method(self) -> FreeMethod | None:
        return self._hooks.free

    def get_match_method(self) -> MatchMethod | None:
        return self._hooks.match

    def _check_live(self) -> None:
        if self._released:
            raise ListReleasedError("Cannot use a released list")

    def _new_node(self, value: T) -> Node[T]:
        self._check_live()
        try:
            return Node(value)
        except MemoryError as exc:
            raise AllocationError("Cannot allocate list node") from exc

    # Teardown

    def empty(self) -> None:
        """Remove every node, freeing each value through the free hook. O(n)."""
        node = self._head
        if node is not None:
            logger.debug("Emptying list of %d nodes", self._size)

        # Detach the whole chain first so the list is empty even if a hook raises
        self._head = self._tail = None
        self._size = 0

        while node is not None:
            next_node = node.next
            node.prev = node.next = None
            self._hooks.free_value(node.value)
            node = next_node

    def release(self) -> None:
        """Empty the list and retire it. Further insertions raise ListReleasedError."""
        if self._released:
            return
        self.empty()
        self._released = True

    # Insertion

    def add_head(self, value: T) -> Node[T]:
        """
        Add a value at the head of the list. O(1).

        Returns:
            The newly created node

        Raises:
            AllocationError: If the node cannot be allocated (list unchanged)
            ListReleasedError: If the list was released
        """
        node = self._new_node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1
        return node

    def add_tail(self, value: T) -> Node[T]:
        """
        Add a value at the tail of the list. O(1).

        Returns:
            The newly created node

        Raises:
            AllocationError: If the node cannot be allocated (list unchanged)
            ListReleasedError: If the list was released
        """
        node = self._new_node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1
        return node

    def insert(self, anchor: Node[T], value: T, after: bool = False) -> Node[T]:
        """
        Insert a value right before or right after ``anchor``. O(1).

        Args:
            anchor: A node of this list
            value: Value to store
            after: Insert after the anchor instead of before it

        Returns:
            The newly created node

        Raises:
            AllocationError: If the node cannot be allocated (list unchanged)
            ListReleasedError: If the list was released
        """
        node = self._new_node(value)
        # Links come from the anchor before any of its pointers change
        if after:
            node.prev = anchor
            node.next = anchor.next
            if self._tail is anchor:
                self._tail = node
        else:
            node.next = anchor
            node.prev = anchor.prev
            if self._head is anchor:
                self._head = node
        if node.prev is not None:
            node.prev.next = node
        if node.next is not None:
            node.next.prev = node
        self._size += 1
        return node

    # Deletion

    def unlink_node(self, node: Node[T]) -> Node[T]:
        """Detach a node without freeing its value. O(1)."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = None
        node.next = None
        self._size -= 1
        return node

    def delete_node(self, node: Node[T]) -> None:
        """Remove a node from the list and free its value. O(1)."""
        self.unlink_node(node)
        self._hooks.free_value(node.value)

    # Query

    def search(self, key: Any) -> Node[T] | None:
        """
        Return the first node, from the head, whose value matches ``key``.

        Values are compared with the match hook when set, by identity
        otherwise. O(n).
        """
        for node in self.nodes():
            if self._hooks.matches(node.value, key):
                return node
        return None

    def index(self, index: int) -> Node[T] | None:
        """
        Return the node at a zero-based position. O(n).

        Negative indexes count from the tail: -1 is the tail, -2 the node
        before it, and so on. Out of range indexes return None.
        """
        if index < 0:
            steps = -index - 1
            node = self._tail
            while steps and node is not None:
                node = node.prev
                steps -= 1
        else:
            steps = index
            node = self._head
            while steps and node is not None:
                node = node.next
                steps -= 1
        return node

    # Structural transforms

    def rotate_tail_to_head(self) -> None:
        """Move the tail node to the head. O(1)."""
        if self._size <= 1:
            return
        tail = self._tail
        assert tail is not None and tail.prev is not None and self._head is not None

        self._tail = tail.prev
        self._tail.next = None

        self._head.prev = tail
        tail.prev = None
        tail.next = self._head
        self._head = tail

    rotate = rotate_tail_to_head

    def rotate_head_to_tail(self) -> None:
        """Move the head node to the tail. O(1)."""
        if self._size <= 1:
            return
        head = self._head
        assert head is not None and head.next is not None and self._tail is not None

        self._head = head.next
        self._head.prev = None

        self._tail.next = head
        head.next = None
        head.prev = self._tail
        self._tail = head

    def join(self, other: "DoublyLinkedList[T]") -> None:
        """
        Move every node of ``other`` to the end of this list. O(1).

        ``other`` is left as a valid empty list.

        Raises:
            ListReleasedError: If this list was released
            ValueError: If ``other`` is this list
        """
        self._check_live()
        if other is self:
            raise ValueError("Cannot join a list with itself")

        if other._head is not None:
            other._head.prev = self._tail
        if self._tail is not None:
            self._tail.next = other._head
        else:
            self._head = other._head
        if other._tail is not None:
            self._tail = other._tail
        self._size += other._size

        other._head = other._tail = None
        other._size = 0

    def dup(self) -> "DoublyLinkedList[T]":
        """
        Return an independent copy of the list with the same hooks.

        Values go through the dup hook when set and are shared otherwise.
        If the hook raises or a node cannot be allocated, the partial copy
        is released and the error propagates. This list is never modified.

        Raises:
            AllocationError: If the copy or one of its nodes cannot be allocated
            ListReleasedError: If this list was released
        """
        self._check_live()
        copy = type(self).create(self._hooks)
        try:
            for node in self.nodes():
                value = self._hooks.copy_value(node.value)
                try:
                    copy.add_tail(value)
                except AllocationError:
                    if self._hooks.dup is not None:
                        self._hooks.free_value(value)
                    raise
        except Exception:
            logger.debug("Duplication failed after %d nodes, releasing copy", len(copy))
            if self._hooks.dup is None:
                # Shared values still belong to this list
                copy.set_free_method(None)
            copy.release()
            raise
        return copy

    def __copy__(self) -> "DoublyLinkedList[T]":
        return self.dup()

    # Iteration

    def get_iterator(self, direction: Direction = START_HEAD) -> ListIter[T]:
        """
        Return an iterator positioned at the head or the tail.

        Raises:
            AllocationError: If the iterator cannot be allocated
            ListReleasedError: If the list was released
            ValueError: If ``direction`` is not "head" or "tail"
        """
        self._check_live()
        try:
            return ListIter(self, direction)
        except MemoryError as exc:
            raise AllocationError("Cannot allocate list iterator") from exc

    def rewind(self, it: ListIter[T]) -> None:
        """Reposition an iterator at the head, moving forward."""
        it.reset(self, START_HEAD)

    def rewind_tail(self, it: ListIter[T]) -> None:
        """Reposition an iterator at the tail, moving backward."""
        it.reset(self, START_TAIL)

    def nodes(self, direction: Direction = START_HEAD) -> Iterator[Node[T]]:
        """Yield nodes in the given direction; the yielded node may be deleted."""
        it = ListIter(self, direction)
        while (node := it.next()) is not None:
            yield node

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes(START_HEAD):
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        for node in self.nodes(START_TAIL):
            yield node.value

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
