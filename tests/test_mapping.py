import pytest

from lotools.mapping import (
    assign,
    chunk_entries,
    entries,
    from_entries,
    from_pairs,
    has_key,
    invert,
    keys,
    map_entries,
    map_keys,
    map_to_slice,
    map_values,
    omit_by,
    omit_by_keys,
    omit_by_values,
    pick_by,
    pick_by_keys,
    pick_by_values,
    to_pairs,
    uniq_keys,
    uniq_values,
    value_or,
    values,
)


class MyMap(dict):
    pass


def test_keys():
    assert sorted(keys({"foo": 1, "bar": 2})) == ["bar", "foo"]
    assert keys({}) == []
    assert sorted(keys({"foo": 1, "bar": 2}, {"baz": 3})) == ["bar", "baz", "foo"]
    assert keys() == []
    assert sorted(keys({"foo": 1, "bar": 2}, {"bar": 3})) == ["bar", "bar", "foo"]


def test_uniq_keys():
    assert sorted(uniq_keys({"foo": 1, "bar": 2})) == ["bar", "foo"]
    assert uniq_keys({}) == []
    assert sorted(uniq_keys({"foo": 1, "bar": 2}, {"baz": 3})) == ["bar", "baz", "foo"]
    assert uniq_keys() == []
    assert sorted(uniq_keys({"foo": 1, "bar": 2}, {"foo": 1, "bar": 3})) == ["bar", "foo"]
    assert uniq_keys({"foo": 1}, {"bar": 3}) == ["foo", "bar"]


def test_has_key():
    assert has_key({"foo": 1}, "bar") is False
    assert has_key({"foo": 1}, "foo") is True


def test_values():
    assert sorted(values({"foo": 1, "bar": 2})) == [1, 2]
    assert values({}) == []
    assert sorted(values({"foo": 1, "bar": 2}, {"baz": 3})) == [1, 2, 3]
    assert values() == []
    assert sorted(values({"foo": 1, "bar": 2}, {"foo": 1, "bar": 3})) == [1, 1, 2, 3]


def test_uniq_values():
    assert sorted(uniq_values({"foo": 1, "bar": 2})) == [1, 2]
    assert uniq_values({}) == []
    assert sorted(uniq_values({"foo": 1, "bar": 2}, {"baz": 3})) == [1, 2, 3]
    assert uniq_values() == []
    assert sorted(uniq_values({"foo": 1, "bar": 2}, {"foo": 1, "bar": 3})) == [1, 2, 3]
    assert sorted(uniq_values({"foo": 1, "bar": 1}, {"foo": 1, "bar": 3})) == [1, 3]
    assert uniq_values({"foo": 1}, {"bar": 3}) == [1, 3]


def test_value_or():
    assert value_or({"foo": 1}, "bar", 2) == 2
    assert value_or({"foo": 1}, "foo", 2) == 1


def test_pick_by():
    result = pick_by({"foo": 1, "bar": 2, "baz": 3}, lambda k, v: v % 2 == 1)
    assert result == {"foo": 1, "baz": 3}


def test_pick_by_preserves_type():
    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = pick_by(before, lambda k, v: True)
    assert type(after) is MyMap
    assert after == before


def test_pick_by_keys():
    result = pick_by_keys({"foo": 1, "bar": 2, "baz": 3}, ["foo", "baz", "qux"])
    assert result == {"foo": 1, "baz": 3}
    after = pick_by_keys(MyMap({"": 0, "foobar": 6, "baz": 3}), ["foobar", "baz"])
    assert type(after) is MyMap
    assert after == {"foobar": 6, "baz": 3}


def test_pick_by_values():
    result = pick_by_values({"foo": 1, "bar": 2, "baz": 3}, [1, 3])
    assert result == {"foo": 1, "baz": 3}
    after = pick_by_values(MyMap({"": 0, "foobar": 6, "baz": 3}), [0, 3])
    assert type(after) is MyMap
    assert after == {"": 0, "baz": 3}


def test_omit_by():
    result = omit_by({"foo": 1, "bar": 2, "baz": 3}, lambda k, v: v % 2 == 1)
    assert result == {"bar": 2}


def test_omit_by_keys():
    result = omit_by_keys({"foo": 1, "bar": 2, "baz": 3}, ["foo", "baz", "qux"])
    assert result == {"bar": 2}
    after = omit_by_keys(MyMap({"": 0, "foobar": 6, "baz": 3}), ["foobar", "baz"])
    assert type(after) is MyMap
    assert after == {"": 0}


def test_omit_by_values():
    result = omit_by_values({"foo": 1, "bar": 2, "baz": 3}, [1, 3])
    assert result == {"bar": 2}
    after = omit_by_values(MyMap({"": 0, "foobar": 6, "baz": 3}), [0, 3])
    assert type(after) is MyMap
    assert after == {"foobar": 6}


def test_entries():
    result = sorted(entries({"foo": 1, "bar": 2}), key=lambda e: e[1])
    assert result == [("foo", 1), ("bar", 2)]


def test_to_pairs():
    result = sorted(to_pairs({"baz": 3, "qux": 4}), key=lambda e: e[1])
    assert result == [("baz", 3), ("qux", 4)]


def test_from_entries():
    result = from_entries([("foo", 1), ("bar", 2)])
    assert len(result) == 2
    assert result["foo"] == 1
    assert result["bar"] == 2


def test_from_pairs():
    result = from_pairs([("baz", 3), ("qux", 4)])
    assert len(result) == 2
    assert result["baz"] == 3
    assert result["qux"] == 4


def test_entries_round_trip():
    original = {"a": 1, "b": 2, "c": 3}
    assert from_entries(entries(original)) == original


def test_invert():
    assert invert({"a": 1, "b": 2}) == {1: "a", 2: "b"}
    assert len(invert({"a": 1, "b": 2, "c": 1})) == 2


def test_assign():
    result = assign({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert len(result) == 3
    assert result == {"a": 1, "b": 3, "c": 4}


def test_assign_preserves_type():
    before = MyMap({"": 0, "foobar": 6, "baz": 3})
    after = assign(before, before)
    assert type(after) is MyMap
    assert after == before


def test_chunk_entries():
    five = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    assert len(chunk_entries(five, 2)) == 3
    assert len(chunk_entries(five, 3)) == 2
    assert len(chunk_entries({}, 2)) == 0
    assert len(chunk_entries({"a": 1}, 2)) == 1
    assert len(chunk_entries({"a": 1, "b": 2}, 1)) == 2


def test_chunk_entries_covers_all_entries():
    five = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    chunks = chunk_entries(five, 2)
    merged = {}
    for chunk in chunks:
        assert len(chunk) <= 2
        merged.update(chunk)
    assert merged == five


@pytest.mark.parametrize("size", [0, -1])
def test_chunk_entries_invalid_size(size):
    with pytest.raises(ValueError, match="The chunk size must be greater than 0"):
        chunk_entries({"a": 1}, size)


def test_chunk_entries_does_not_mutate_original():
    structs = {"a": ("one", 1), "b": ("two", 2), "c": ("three", 3)}
    assert len(chunk_entries(structs, 2)) == 2

    original = {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
    chunks = chunk_entries(original, 2)
    for key in chunks[0]:
        chunks[0][key] = 10
    assert original == {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}


def test_map_keys():
    source = {1: 1, 2: 2, 3: 3, 4: 4}
    assert len(map_keys(source, lambda v, k: "Hello")) == 1
    result = map_keys(source, lambda v, k: str(v))
    assert result == {"1": 1, "2": 2, "3": 3, "4": 4}


def test_map_values():
    source = {1: 1, 2: 2, 3: 3, 4: 4}
    assert map_values(source, lambda v, k: "Hello") == {
        1: "Hello",
        2: "Hello",
        3: "Hello",
        4: "Hello",
    }
    assert map_values(source, lambda v, k: str(v)) == {1: "1", 2: "2", 3: "3", 4: "4"}


@pytest.mark.parametrize(
    "source, iteratee, expected",
    [
        ({"foo": 1, "bar": 2}, lambda k, v: (k, v + 1), {"foo": 2, "bar": 3}),
        ({"foo": 1, "bar": 2}, lambda k, v: (k, k + str(v)), {"foo": "foo1", "bar": "bar2"}),
        ({"foo": 1, "bar": 2}, lambda k, v: (k, str(v) + k), {"foo": "1foo", "bar": "2bar"}),
        ({}, lambda k, v: (k, str(v) + "!!"), {}),
        ({"foo": 1, "bar": 2}, lambda k, v: (k, v), {"foo": 1, "bar": 2}),
        (
            {"foo": 1, "bar": "2", "ccc": True},
            lambda k, v: (k, v),
            {"foo": 1, "bar": "2", "ccc": True},
        ),
        ({"foo": 1, "bar": "2", "ccc": True}, lambda k, v: ("key", "value"), {"key": "value"}),
        ({"foo": 1, "bar": "2", "ccc": True}, lambda k, v: ("b", 5), {"b": 5}),
        (
            {"foo": "1", "foo2": "2", "Foo": "2", "Foo2": "2", "bar": "2", "ccc": "true"},
            lambda k, v: (k, k + v),
            {
                "Foo": "Foo2",
                "Foo2": "Foo22",
                "bar": "bar2",
                "ccc": "ccctrue",
                "foo": "foo1",
                "foo2": "foo22",
            },
        ),
        (
            {"1-11-1": ("foo", 1), "2-22-2": ("bar", 2)},
            lambda k, v: (v[0], k),
            {"bar": "2-22-2", "foo": "1-11-1"},
        ),
    ],
)
def test_map_entries(source, iteratee, expected):
    assert map_entries(source, iteratee) == expected


def test_map_entries_no_mutation():
    source = {"foo": 1, "bar": 2}
    map_entries(source, lambda k, v: (k, str(v) + "!!"))
    assert source == {"foo": 1, "bar": 2}


def test_map_to_slice():
    source = {1: 5, 2: 6, 3: 7, 4: 8}
    result1 = map_to_slice(source, lambda k, v: f"{k}_{v}")
    result2 = map_to_slice(source, lambda k, v: str(k))
    assert sorted(result1) == ["1_5", "2_6", "3_7", "4_8"]
    assert sorted(result2) == ["1", "2", "3", "4"]