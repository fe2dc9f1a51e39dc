import copy

import pytest

from linkedtable.entry import OccupiedEntry, VacantEntry
from linkedtable.linkedmap import LinkedHashMap


def abc_map():
    m = LinkedHashMap()
    m.insert_back("a", 1)
    m.insert_back("b", 2)
    m.insert_back("c", 3)
    return m


def test_insert_back_and_get():
    m = LinkedHashMap()
    assert len(m) == 0
    m.insert_back("a", 1)
    m.insert_back("b", 2)
    m.insert_back("c", 3)
    assert len(m) == 3
    assert m.get("a") == 1
    assert m.get("b") == 2
    assert m.get("c") == 3
    assert m.get("z") is None
    assert m.get("z", -1) == -1


def test_insert_front_and_get():
    m = LinkedHashMap()
    m.insert_front("a", 1)
    m.insert_front("b", 2)
    m.insert_front("c", 3)
    assert list(m.keys()) == ["c", "b", "a"]


def test_insert_alias():
    m = LinkedHashMap()
    m.insert(1, 10)
    m.insert(2, 20)
    assert m[1] == 10
    assert m[2] == 20


def test_insert_alias_existing_key_preserves_position():
    m = abc_map()
    assert m.insert("b", 200) == 2
    assert m.get("b") == 200
    assert list(m.keys()) == ["a", "b", "c"]


def test_insertion_order_back():
    m = LinkedHashMap()
    for i in range(10):
        m.insert_back(i, i * 2)
    assert list(m.items()) == [(i, i * 2) for i in range(10)]


def test_insertion_order_front():
    m = LinkedHashMap()
    for i in range(10):
        m.insert_front(i, i * 2)
    assert list(m.keys()) == list(range(9, -1, -1))


def test_insert_back_update_preserves_position():
    m = abc_map()
    assert m.insert_back("a", 99) == 1
    assert m.get("a") == 99
    assert list(m.keys()) == ["a", "b", "c"]


def test_insert_front_update_preserves_position():
    m = LinkedHashMap()
    m.insert_front("a", 1)
    m.insert_front("b", 2)
    m.insert_front("c", 3)
    assert m.insert_front("b", 42) == 2
    assert m.get("b") == 42
    assert list(m.keys()) == ["c", "b", "a"]


def test_new_key_insert_returns_none():
    m = LinkedHashMap()
    assert m.insert_back("x", 1) is None
    assert m.insert_front("y", 2) is None


def test_front_back_empty():
    m = LinkedHashMap()
    assert m.front() is None
    assert m.back() is None


def test_front_back():
    m = LinkedHashMap()
    m.insert_back(1, "one")
    m.insert_back(2, "two")
    m.insert_back(3, "three")
    assert m.front() == (1, "one")
    assert m.back() == (3, "three")


def test_pop_front():
    m = LinkedHashMap([(1, "a"), (2, "b"), (3, "c")])
    assert m.pop_front() == (1, "a")
    assert m.pop_front() == (2, "b")
    assert m.pop_front() == (3, "c")
    assert m.pop_front() is None
    assert len(m) == 0


def test_pop_back():
    m = LinkedHashMap([(1, "a"), (2, "b"), (3, "c")])
    assert m.pop_back() == (3, "c")
    assert m.pop_back() == (2, "b")
    assert m.pop_back() == (1, "a")
    assert m.pop_back() is None
    assert len(m) == 0


def test_pop_front_back_alternating():
    m = LinkedHashMap((i, i) for i in range(6))
    assert m.pop_front() == (0, 0)
    assert m.pop_back() == (5, 5)
    assert m.pop_front() == (1, 1)
    assert m.pop_back() == (4, 4)
    assert len(m) == 2


def test_remove():
    m = abc_map()
    assert m.remove("b") == 2
    assert m.remove("b") is None
    assert list(m.keys()) == ["a", "c"]


def test_remove_entry():
    m = LinkedHashMap()
    m.insert_back(10, "ten")
    m.insert_back(20, "twenty")
    assert m.remove_entry(10) == (10, "ten")
    assert m.back() == (20, "twenty")
    assert m.front() == (20, "twenty")
    assert not m.contains_key(10)
    assert len(m) == 1
    assert m.remove_entry(10) is None
    assert m.remove_entry(20) == (20, "twenty")
    assert len(m) == 0
    assert m.front() is None
    assert m.back() is None


def test_get_mut_equivalent_via_setitem():
    m = LinkedHashMap()
    m.insert_back("k", 0)
    m["k"] += 42
    assert m["k"] == 42


def test_index_missing_key_raises():
    m = LinkedHashMap()
    with pytest.raises(KeyError) as excinfo:
        m[99]
    assert "key not found" in str(excinfo.value)
    assert len(m) == 0


def test_delitem_missing_key_raises():
    m = LinkedHashMap([("a", 1)])
    with pytest.raises(KeyError) as excinfo:
        del m["nope"]
    assert "key not found" in str(excinfo.value)
    assert list(m.items()) == [("a", 1)]


def test_delitem_removes():
    m = abc_map()
    del m["a"]
    assert list(m) == ["b", "c"]


def test_index_mut_updates_value():
    m = LinkedHashMap()
    m.insert_back("x", 1)
    m["x"] += 41
    assert m.get("x") == 42


def test_contains_key():
    m = LinkedHashMap()
    m.insert_back("hello", 1)
    assert m.contains_key("hello")
    assert not m.contains_key("world")
    assert "hello" in m
    assert "world" not in m


def test_entry_or_insert():
    m = LinkedHashMap()
    m.insert_back("a", 1)
    m["a"] = m.entry("a").or_insert(10) + 1
    m["b"] = m.entry("b").or_insert(20) + 2
    assert m.get("a") == 2
    assert m.get("b") == 22
    assert list(m.keys()) == ["a", "b"]


def test_entry_or_insert_existing_key_preserves_position():
    m = abc_map()
    m["b"] = m.entry("b").or_insert(999) + 10
    assert m.get("b") == 12
    assert list(m.keys()) == ["a", "b", "c"]


def test_entry_and_modify_or_default():
    m = LinkedHashMap()
    m.insert_back("x", 5)
    for key in ("x", "y"):
        m.entry(key).and_modify(lambda v: v + 7).or_default(int)
    assert m.get("x") == 12
    assert m.get("y") == 0


def test_entry_occupied_remove_entry():
    m = LinkedHashMap([("a", 1), ("b", 2)])
    e = m.entry("a")
    assert isinstance(e, OccupiedEntry)
    assert e.key() == "a"
    assert e.remove_entry() == ("a", 1)
    assert m.get("a") is None
    assert list(m.keys()) == ["b"]


def test_entry_vacant_into_key_leaves_map_empty():
    m = LinkedHashMap()
    e = m.entry("hello")
    assert isinstance(e, VacantEntry)
    assert e.into_key() == "hello"
    assert len(m) == 0


def test_get_none_and_remove_entry_none():
    m = LinkedHashMap()
    assert m.get(1) is None
    assert m.remove_entry(1) is None


def test_with_capacity():
    m = LinkedHashMap(capacity=32)
    assert m.capacity() >= 32
    m.insert_back(1, 1)
    assert m.get(1) == 1


def test_capacity_grows_with_len():
    m = LinkedHashMap(capacity=1)
    for i in range(5):
        m[i] = i
    assert m.capacity() >= 5


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        LinkedHashMap(capacity=-1)


def test_string_lookup_paths():
    m = LinkedHashMap()
    m.insert_back("hello", 1)
    assert m.contains_key("hello")
    assert m.get("hello") == 1
    assert m.get_key_value("hello") == ("hello", 1)
    assert m.remove("hello") == 1
    assert len(m) == 0


def test_partial_items_iteration():
    m = LinkedHashMap((i, i * 10) for i in range(5))
    it = m.items()
    assert next(it) == (0, 0)
    assert next(it) == (1, 10)
    assert len(m) == 5


def test_keys_values_size_hint_and_double_ended():
    m = LinkedHashMap([("a", 1), ("b", 2), ("c", 3)])
    k = m.keys()
    assert k.size_hint() == (3, 3)
    assert k.next_back() == "c"
    assert k.size_hint() == (2, 2)

    v = m.values()
    assert v.size_hint() == (3, 3)
    assert v.next_back() == 3
    assert v.size_hint() == (2, 2)


def test_move_to_back():
    m = abc_map()
    assert m.move_to_back("a")
    assert list(m.keys()) == ["b", "c", "a"]
    assert not m.move_to_back("z")


def test_move_to_front():
    m = abc_map()
    assert m.move_to_front("c")
    assert list(m.keys()) == ["c", "a", "b"]
    assert not m.move_to_front("missing")


def test_iter_double_ended():
    m = LinkedHashMap((i, i * 10) for i in range(5))
    it = m.items()
    assert next(it) == (0, 0)
    assert it.next_back() == (4, 40)
    assert next(it) == (1, 10)
    assert it.next_back() == (3, 30)
    assert next(it) == (2, 20)
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        it.next_back()


def test_update_values_while_iterating():
    m = LinkedHashMap([("a", 1), ("b", 2)])
    for key, value in m.items():
        m[key] = value * 10
    assert m["a"] == 10
    assert m["b"] == 20


def test_empty_items_next_back():
    m = LinkedHashMap()
    with pytest.raises(StopIteration):
        m.items().next_back()


def test_keys_values_iterators():
    m = LinkedHashMap([(1, "one"), (2, "two"), (3, "three")])
    assert list(m.keys()) == [1, 2, 3]
    assert list(m.values()) == ["one", "two", "three"]


def test_drain():
    m = LinkedHashMap((i, i) for i in range(5))
    assert list(m.drain()) == [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)]
    assert len(m) == 0


def test_drain_partial():
    m = LinkedHashMap((i, i) for i in range(5))
    with m.drain() as d:
        assert next(d) == (0, 0)
    assert len(m) == 0
    assert m.front() is None
    m.insert_back(9, 9)
    assert list(m.items()) == [(9, 9)]


def test_drain_len():
    m = LinkedHashMap((i, i) for i in range(3))
    d = m.drain()
    assert len(d) == 3
    next(d)
    assert d.size_hint() == (2, 2)


def test_entry_rehash_path():
    m = LinkedHashMap(capacity=1)
    for i in range(256):
        m[i] = m.entry(i).or_insert(i * 10) + 1
    for i in range(256):
        m[i] = m.entry(i).or_insert(i * 10) + 1
    assert len(m) == 256
    assert m.get(0) == 2
    assert m.get(255) == 2552


def test_retain():
    m = LinkedHashMap((i, i) for i in range(10))
    m.retain(lambda k, v: k % 2 == 0)
    assert list(m.keys()) == [0, 2, 4, 6, 8]
    assert 1 not in m


def test_clear():
    m = LinkedHashMap([(1, 2), (3, 4)])
    m.clear()
    assert len(m) == 0
    assert m.front() is None
    assert m.back() is None
    m.insert_back(5, 6)
    assert len(m) == 1
    assert m.front() == (5, 6)


def test_copy():
    m = LinkedHashMap([("a", 1), ("b", 2)])
    m2 = m.copy()
    assert m == m2
    m2["c"] = 3
    assert "c" not in m
    assert copy.copy(m) == m


def test_eq_len_mismatch():
    a = LinkedHashMap([(1, 1)])
    b = LinkedHashMap([(1, 1), (2, 2)])
    assert a != b


def test_eq_order_matters():
    m1 = LinkedHashMap([(1, "a"), (2, "b")])
    m2 = LinkedHashMap([(2, "b"), (1, "a")])
    assert m1 != m2


def test_eq_value_mismatch():
    a = LinkedHashMap([(1, 10)])
    b = LinkedHashMap([(1, 10)])
    assert a == b
    c = LinkedHashMap([(1, 11)])
    assert a != c
    b.insert_back(2, 20)
    assert a != b


def test_eq_with_strings():
    a = LinkedHashMap([(1, "a")])
    b = LinkedHashMap([(1, "a")])
    assert a == b
    assert a != LinkedHashMap([(1, "z")])


def test_repr():
    m = LinkedHashMap([("a", 1), ("b", 2)])
    assert repr(m) == "{'a': 1, 'b': 2}"


def test_from_iterable():
    m = LinkedHashMap([(1, "one"), (2, "two"), (3, "three")])
    assert len(m) == 3
    assert list(m.keys()) == [1, 2, 3]


def test_from_mapping():
    m = LinkedHashMap({"x": 1, "y": 2})
    assert list(m.items()) == [("x", 1), ("y", 2)]


def test_extend():
    m = LinkedHashMap([(0, 0)])
    m.extend([(1, 1), (2, 2)])
    assert len(m) == 3
    assert list(m.keys()) == [0, 1, 2]


def test_single_element():
    m = LinkedHashMap()
    m.insert_back(42, "hello")
    assert m.front() == (42, "hello")
    assert m.back() == (42, "hello")
    assert m.pop_front() == (42, "hello")
    assert len(m) == 0


def test_large_insert_pop():
    n = 10_000
    m = LinkedHashMap()
    for i in range(n):
        m.insert_back(i, i * i)
    for i in range(n):
        assert m.pop_front() == (i, i * i)
    assert len(m) == 0


def test_insert_front_then_pop_back():
    m = LinkedHashMap()
    for i in range(5):
        m.insert_front(i, i)
    assert m.pop_back() == (0, 0)
    assert m.pop_back() == (1, 1)
    assert list(m.keys()) == [4, 3, 2]


def test_get_key_value():
    m = LinkedHashMap()
    m.insert_back("foo", 99)
    assert m.get_key_value("foo") == ("foo", 99)
    assert m.get_key_value("bar") is None


def test_mixed_insert_front_back_ordering():
    m = LinkedHashMap()
    m.insert_back("b", 2)
    m.insert_front("a", 1)
    m.insert_back("c", 3)
    m.insert_front("z", 26)
    assert list(m.keys()) == ["z", "a", "b", "c"]


def test_exact_size_iterator():
    m = LinkedHashMap((i, i) for i in range(7))
    it = m.items()
    assert len(it) == 7
    next(it)
    assert len(it) == 6


def test_string_keys_update_in_place():
    m = LinkedHashMap()
    m.insert_back("hello", 1)
    m.insert_back("world", 2)
    m.insert_back("hello", 99)
    assert m.get("hello") == 99
    assert m.get("world") == 2
    assert len(m) == 2
    assert list(m.keys()) == ["hello", "world"]


def test_iter_and_reversed_yield_keys():
    m = abc_map()
    assert list(m) == ["a", "b", "c"]
    assert list(reversed(m)) == ["c", "b", "a"]


def test_mutable_mapping_mixins_follow_order():
    m = abc_map()
    assert m.popitem() == ("a", 1)
    assert m.pop("c") == 3
    assert m.setdefault("d", 4) == 4
    assert list(m.keys()) == ["b", "d"]