import random

import pytest

from ticketdesk.maps import Map, MapPair, MultiMap, Set


def _eq(a, b):
    return a == b


def _lt(a, b):
    return a < b


def test_map_requires_a_comparator():
    with pytest.raises(ValueError):
        Map()


def test_insert_and_search():
    m = Map(is_equal=_eq)
    m.insert("ana", 30)
    m.insert("luis", 41)
    assert m.search("luis") == MapPair("luis", 41)
    assert m.search("nadie") is None
    assert len(m) == 2


def test_duplicate_key_is_ignored():
    m = Map(is_equal=_eq)
    m.insert("k", 1)
    m.insert("k", 2)
    assert len(m) == 1
    assert m.search("k").value == 1


def test_remove_returns_pair():
    m = Map(is_equal=_eq)
    for key in ["a", "b", "c"]:
        m.insert(key, key * 2)
    removed = m.remove("b")
    assert removed == MapPair("b", "bb")
    assert [p.key for p in m] == ["a", "c"]
    assert m.remove("b") is None


def test_unsorted_map_keeps_insertion_order():
    m = Map(is_equal=_eq)
    keys = [5, 1, 4]
    for k in keys:
        m.insert(k, None)
    assert [p.key for p in m] == keys


def test_sorted_map_orders_keys():
    rng = random.Random(5)
    keys = rng.sample(range(100), 25)
    m = Map(lower_than=_lt)
    for k in keys:
        m.insert(k, str(k))
    assert [p.key for p in m] == sorted(keys)
    assert m.search(keys[0]).value == str(keys[0])


def test_sorted_map_rejects_equivalent_key():
    m = Map(lower_than=lambda a, b: a.lower() < b.lower())
    m.insert("Hola", 1)
    m.insert("hola", 2)
    assert len(m) == 1
    assert m.search("HOLA").value == 1


def test_first_next_traversal():
    m = Map(is_equal=_eq)
    for k in ["x", "y"]:
        m.insert(k, k)
    seen = []
    pair = m.first()
    while pair is not None:
        seen.append(pair.key)
        pair = m.next()
    assert seen == ["x", "y"]


def test_clean_map():
    m = Map(is_equal=_eq)
    m.insert(1, 1)
    m.clean()
    assert len(m) == 0
    assert m.first() is None


def test_multimap_keeps_duplicates():
    mm = MultiMap(is_equal=_eq)
    mm.insert("k", 1)
    mm.insert("k", 2)
    assert len(mm) == 2
    assert mm.search("k").value == 1
    assert mm.remove("k").value == 1
    assert mm.search("k").value == 2


def test_sorted_multimap_groups_equal_keys_in_order():
    mm = MultiMap(lower_than=_lt)
    for key, value in [(2, "a"), (1, "b"), (2, "c")]:
        mm.insert(key, value)
    assert [(p.key, p.value) for p in mm] == [(1, "b"), (2, "a"), (2, "c")]


def test_set_insert_search_remove():
    s = Set(is_equal=_eq)
    s.insert("a")
    s.insert("a")
    s.insert("b")
    assert len(s) == 2
    assert s.search("a") == "a"
    assert s.remove("a") == "a"
    assert s.search("a") is None
    assert s.remove("a") is None


def test_sorted_set_and_clean():
    s = Set(lower_than=_lt)
    for v in [3, 1, 3, 2]:
        s.insert(v)
    assert len(s) == 3
    s.clean()
    assert len(s) == 0
    assert s.search(1) is None