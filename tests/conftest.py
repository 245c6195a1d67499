"""Shared fixtures for hooklist tests."""

from collections.abc import Callable
from typing import Any

import pytest

from hooklist import DoublyLinkedList


def _check_consistent(lst: DoublyLinkedList[Any]) -> list[Any]:
    """Walk the chain both ways, check every structural invariant, return the values."""
    if len(lst) == 0:
        assert lst.head is None
        assert lst.tail is None
        return []

    assert lst.head is not None and lst.tail is not None
    assert lst.head.prev is None
    assert lst.tail.next is None

    forward = []
    node = lst.head
    while node is not None:
        forward.append(node)
        assert len(forward) <= len(lst), "forward walk longer than length"
        node = node.next
    assert len(forward) == len(lst)
    assert forward[-1] is lst.tail

    backward = []
    node = lst.tail
    while node is not None:
        backward.append(node)
        assert len(backward) <= len(lst), "backward walk longer than length"
        node = node.prev
    assert backward == forward[::-1]

    return [n.value for n in forward]


@pytest.fixture
def assert_consistent() -> Callable[[DoublyLinkedList[Any]], list[Any]]:
    """Return a checker that validates a list's links and returns its values."""
    return _check_consistent


@pytest.fixture
def abc_list() -> DoublyLinkedList[str]:
    """A list holding A, B, C head to tail."""
    lst = DoublyLinkedList[str]()
    for value in ("A", "B", "C"):
        lst.add_tail(value)
    return lst
