import io

import pytest

from tadkit.nodes import CircularQueue, NodeList
from tadkit.numbers import cmp_int


def test_add_keeps_order():
    nl = NodeList()
    node = nl.add(1)
    nl.add(2)
    nl.add(3)
    assert node.info == 1
    assert list(nl) == [1, 2, 3]


def test_add_first():
    nl = NodeList([2, 3])
    assert nl.add_first(1).info == 1
    assert list(nl) == [1, 2, 3]


def test_remove_by_key():
    nl = NodeList([4, 5, 6])
    assert nl.remove(5, cmp_int) == 5
    assert list(nl) == [4, 6]
    assert nl.remove(4, cmp_int) == 4
    assert list(nl) == [6]


def test_remove_missing_raises():
    with pytest.raises(ValueError):
        NodeList([1, 2]).remove(3, cmp_int)


def test_remove_first_on_empty_raises():
    with pytest.raises(IndexError):
        NodeList().remove_first()


def test_find():
    nl = NodeList([10, 20, 30])
    assert nl.find(20, cmp_int).info == 20
    assert nl.find(99, cmp_int) is None


def test_ordered_insert():
    values = [5, 2, 8, 2, 1]
    nl = NodeList()
    for v in values:
        assert nl.ordered_insert(v, cmp_int).info == v
    assert list(nl) == sorted(values)


def test_search_and_insert():
    nl = NodeList([1, 3])
    node, found = nl.search_and_insert(3, cmp_int)
    assert found is True and node.info == 3
    node, found = nl.search_and_insert(2, cmp_int)
    assert found is False and node.info == 2
    assert list(nl) == [1, 2, 3]


def test_sort():
    values = [9, -1, 4, 4, 0]
    nl = NodeList(values)
    nl.sort(cmp_int)
    assert list(nl) == sorted(values)


def test_sort_is_stable():
    nl = NodeList([(2, "a"), (1, "b"), (2, "c")])
    nl.sort(lambda x, y: x[0] - y[0])
    assert list(nl) == [(1, "b"), (2, "a"), (2, "c")]


def test_is_empty_and_clear():
    nl = NodeList([1])
    assert not nl.is_empty()
    nl.clear()
    assert nl.is_empty()
    assert list(nl) == []


def test_stack_is_lifo():
    nl = NodeList()
    for v in "abc":
        nl.push(v)
    assert [nl.pop() for _ in range(3)] == ["c", "b", "a"]
    assert nl.is_empty()


def test_queue_is_fifo():
    nl = NodeList()
    for v in "abc":
        nl.enqueue(v)
    assert [nl.dequeue() for _ in range(3)] == ["a", "b", "c"]


def test_display():
    out = io.StringIO()
    NodeList([1, 2, 3]).display(out)
    assert out.getvalue() == "1 -> 2 -> 3\n"


def test_display_empty_prints_nothing():
    out = io.StringIO()
    NodeList().display(out)
    assert out.getvalue() == ""


def test_circular_queue_fifo():
    q = CircularQueue()
    for v in [1, 2, 3]:
        assert q.enqueue(v).info == v
    assert q.dequeue() == 1
    q.enqueue(4)
    assert [q.dequeue() for _ in range(3)] == [2, 3, 4]
    assert q.is_empty()


def test_circular_queue_empty_raises():
    q = CircularQueue()
    q.enqueue("x")
    assert q.dequeue() == "x"
    with pytest.raises(IndexError):
        q.dequeue()