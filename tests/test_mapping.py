import io

import pytest

from tadkit.mapping import Map, cmp_tt
from tadkit.numbers import cmp_int
from tadkit.text import cmp_string


def test_cmp_tt_three_way():
    assert cmp_tt(1, 2) == -1
    assert cmp_tt(2, 1) == 1
    assert cmp_tt("a", "a") == 0


def test_put_and_get():
    m = Map()
    assert m.put("uno", 1) == 1
    m.put("dos", 2)
    assert m.get("uno") == 1
    assert m.get("dos") == 2
    assert len(m) == 2


def test_get_missing_returns_none():
    m = Map()
    m.put("a", 1)
    assert m.get("b") is None


def test_put_replaces_existing():
    m = Map()
    m.put("k", "old")
    m.put("k", "new")
    assert m.get("k") == "new"
    assert len(m) == 1


def test_contains():
    m = Map()
    m.put(3, "three")
    assert m.contains(3)
    assert not m.contains(4)


def test_remove_returns_value():
    m = Map()
    m.put("a", 1)
    m.put("b", 2)
    assert m.remove("a") == 1
    assert not m.contains("a")
    assert m.get("b") == 2
    assert len(m) == 1


def test_remove_missing_raises():
    m = Map()
    with pytest.raises(KeyError):
        m.remove("nope")


def test_remove_all():
    m = Map()
    m.put("a", 1)
    m.put("b", 2)
    m.remove_all()
    assert len(m) == 0
    assert not m.has_next()


def test_discover_keeps_existing_value():
    m = Map()
    assert m.discover("x", 10) == 10
    assert m.discover("x", 99) == 10
    assert len(m) == 1


def test_cursors_walk_in_insertion_order():
    m = Map()
    m.put("b", 2)
    m.put("a", 1)
    keys, values = [], []
    while m.has_next():
        keys.append(m.next_key())
        values.append(m.next_value())
    assert keys == ["b", "a"]
    assert values == [2, 1]
    with pytest.raises(IndexError):
        m.next_key()
    m.reset()
    assert m.next_key() == "b"


def test_sort_by_keys_keeps_pairs_together():
    m = Map()
    for k, v in [("c", 3), ("a", 1), ("b", 2)]:
        m.put(k, v)
    m.sort_by_keys(cmp_string)
    keys, values = [], []
    while m.has_next():
        keys.append(m.next_key())
        values.append(m.next_value())
    assert keys == ["a", "b", "c"]
    assert [m.get(k) for k in keys] == values


def test_sort_by_values():
    m = Map()
    for k, v in [("x", 30), ("y", 10), ("z", 20)]:
        m.put(k, v)
    m.sort_by_values(cmp_int)
    values = []
    while m.has_next():
        m.next_key()
        values.append(m.next_value())
    assert values == sorted([30, 10, 20])


def test_display_format_and_cursor_untouched():
    m = Map()
    m.put("a", 1)
    out = io.StringIO()
    m.display(out)
    assert out.getvalue() == "La key a tiene el value asociado: 1\n"
    assert m.next_key() == "a"