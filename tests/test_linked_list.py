"""Behavioural parity tests for `LinkedList` against the built-in `list`."""

from __future__ import annotations

import pytest

from list_iteration import LinkedList


@pytest.mark.parametrize("values", [
    [],
    [3, 1, 2],
    list(range(10)),
    list(range(10))[::-1],
])
def test_append_and_order(values: list[int]) -> None:
    py = []
    ll = LinkedList()

    for v in values:
        py.append(v)
        ll.append(v)

    assert len(ll) == len(py)
    assert list(ll) == py
    assert list(reversed(ll)) == py[::-1]


@pytest.mark.parametrize("index", [0, 1, 4, 5, 8, 9, -1, -10])
def test_indexing_from_both_ends(index: int) -> None:
    values = list(range(10, 20))
    ll = LinkedList(values)

    assert ll[index] == values[index]


@pytest.mark.parametrize("index", [10, 11, -11])
def test_index_out_of_range(index: int) -> None:
    ll = LinkedList(range(10))

    with pytest.raises(IndexError):
        ll[index]


def test_index_empty() -> None:
    with pytest.raises(IndexError):
        LinkedList()[0]


def test_non_integer_index() -> None:
    ll = LinkedList([1, 2, 3])

    with pytest.raises(TypeError):
        ll["0"]
    with pytest.raises(TypeError):
        ll[0:2]


def test_clear_then_reuse() -> None:
    ll = LinkedList(range(5))
    ll.clear()

    assert len(ll) == 0
    assert list(ll) == []
    assert ll.first is None and ll.last is None

    ll.append(7)
    assert list(ll) == [7]
    assert ll[0] == 7
    assert ll[-1] == 7


def test_nodes_are_doubly_linked() -> None:
    ll = LinkedList([1, 2, 3])

    assert ll.first.prev is None
    assert ll.last.next is None
    assert ll.first.next.next is ll.last
    assert ll.last.prev.prev is ll.first


def test_repr() -> None:
    assert repr(LinkedList([0, 1, 2])) == "LinkedList([0, 1, 2])"


class Position:
    def __init__(self, value: int) -> None:
        self.value = value

    def __index__(self) -> int:
        return self.value


@pytest.mark.parametrize("index", [0, 3, -1])
def test_index_accepts_integer_like(index: int) -> None:
    values = [5, 6, 7, 8]
    ll = LinkedList(values)

    assert ll[Position(index)] == values[Position(index)]
