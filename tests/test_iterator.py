"""Tests for the external list iterator."""

import pytest

from hooklist import START_HEAD, START_TAIL, DoublyLinkedList, ListIter


def _drain(it: ListIter[str]) -> list[str]:
    values = []
    while (node := it.next()) is not None:
        values.append(node.value)
    return values


def test_forward_iteration(abc_list) -> None:
    """Test iterating from the head."""
    it = abc_list.get_iterator(START_HEAD)
    assert it.direction == START_HEAD
    assert _drain(it) == ["A", "B", "C"]


def test_backward_iteration(abc_list) -> None:
    """Test iterating from the tail."""
    it = abc_list.get_iterator(START_TAIL)
    assert it.direction == START_TAIL
    assert _drain(it) == ["C", "B", "A"]


def test_default_direction_is_forward(abc_list) -> None:
    """Test get_iterator defaults to head-first traversal."""
    assert _drain(abc_list.get_iterator()) == ["A", "B", "C"]


def test_exhausted_iterator_stays_exhausted(abc_list) -> None:
    """Test next() keeps returning None once exhausted."""
    it = abc_list.get_iterator()
    _drain(it)
    assert it.next() is None
    assert it.next() is None


def test_empty_list_iterator() -> None:
    """Test iterating an empty list."""
    lst = DoublyLinkedList[int]()
    assert lst.get_iterator().next() is None
    assert lst.get_iterator(START_TAIL).next() is None


def test_rewind(abc_list) -> None:
    """Test rewinding an exhausted iterator to head and tail."""
    it = abc_list.get_iterator()
    _drain(it)

    abc_list.rewind(it)
    assert it.direction == START_HEAD
    assert _drain(it) == ["A", "B", "C"]

    abc_list.rewind_tail(it)
    assert it.direction == START_TAIL
    assert _drain(it) == ["C", "B", "A"]


def test_iterator_rewind_methods(abc_list) -> None:
    """Test rewinding through the iterator's own methods."""
    it = abc_list.get_iterator(START_TAIL)
    it.next()
    it.rewind()
    assert _drain(it) == ["A", "B", "C"]
    it.rewind_tail()
    assert _drain(it) == ["C", "B", "A"]


def test_rewind_sees_new_head(abc_list) -> None:
    """Test rewind picks up the current head, not the one at creation."""
    it = abc_list.get_iterator()
    abc_list.add_head("Z")
    abc_list.rewind(it)
    assert _drain(it) == ["Z", "A", "B", "C"]


def test_delete_yielded_node_forward(assert_consistent) -> None:
    """Test deleting the just-yielded node while iterating forward."""
    lst = DoublyLinkedList[int]()
    for i in range(6):
        lst.add_tail(i)

    seen = []
    it = lst.get_iterator()
    while (node := it.next()) is not None:
        seen.append(node.value)
        if node.value % 2 == 0:
            lst.delete_node(node)

    assert seen == [0, 1, 2, 3, 4, 5]
    assert assert_consistent(lst) == [1, 3, 5]


def test_delete_yielded_node_backward(assert_consistent) -> None:
    """Test deleting the just-yielded node while iterating backward."""
    lst = DoublyLinkedList[int]()
    for i in range(5):
        lst.add_tail(i)

    seen = []
    it = lst.get_iterator(START_TAIL)
    while (node := it.next()) is not None:
        seen.append(node.value)
        lst.delete_node(node)

    assert seen == [4, 3, 2, 1, 0]
    assert assert_consistent(lst) == []


def test_delete_during_value_iteration(abc_list, assert_consistent) -> None:
    """Test deleting the current node while looping over nodes()."""
    for node in abc_list.nodes():
        if node.value == "B":
            abc_list.delete_node(node)
    assert assert_consistent(abc_list) == ["A", "C"]


def test_python_iteration_protocol(abc_list) -> None:
    """Test ListIter works as a Python iterator."""
    it = abc_list.get_iterator()
    assert iter(it) is it
    assert [node.value for node in it] == ["A", "B", "C"]
    with pytest.raises(StopIteration):
        next(it)


def test_list_iteration_yields_values(abc_list) -> None:
    """Test iterating the list yields values in both directions."""
    assert list(abc_list) == ["A", "B", "C"]
    assert list(reversed(abc_list)) == ["C", "B", "A"]
    assert [n.value for n in abc_list.nodes(START_TAIL)] == ["C", "B", "A"]


def test_release_iterator(abc_list) -> None:
    """Test releasing an iterator leaves the list untouched."""
    it = abc_list.get_iterator()
    it.next()
    it.release()

    assert it.released
    assert it.next() is None
    it.rewind()
    assert it.next() is None
    assert list(abc_list) == ["A", "B", "C"]


def test_invalid_direction(abc_list) -> None:
    """Test an unknown direction is rejected."""
    with pytest.raises(ValueError):
        abc_list.get_iterator("sideways")  # type: ignore[arg-type]
