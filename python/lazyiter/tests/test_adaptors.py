# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import numpy as np
import pytest

from lazyiter import (
    CapabilityError,
    Enumerate,
    Filter,
    FilterCursor,
    Iota,
    Map,
    MapCursor,
    Pair,
    Repeat,
    Reverse,
    SortedBufferCursor,
    Zip,
    fill,
    to_cursor,
)


def is_even(x):
    return x % 2 == 0


# Map


def test_map_projects_items():
    assert [x for x in [1, 2, 3] | Map(lambda x: x * 2)] == [2, 4, 6]


def test_map_is_lazy(recorder):
    m = [1, 2, 3] | Map(recorder)
    assert isinstance(m, MapCursor)
    assert recorder.seen == []
    assert m.item == 1
    assert recorder.seen == [1]


def test_map_with_mapping_projection():
    assert [x for x in ["a", "b"] | Map({"a": 1, "b": 2})] == [1, 2]


def test_map_with_sequence_projection():
    assert [x for x in [2, 0] | Map("xyz")] == ["z", "x"]


def test_map_preserves_random_access_but_not_sortedness():
    m = Iota(5) | Map(lambda x: x * x)
    assert m.is_random_access
    assert m.is_bidirectional
    assert not m.is_sorted
    assert m[3] == 9
    assert len(m) == 5
    m += 2
    assert m.item == 4
    m -= 1
    assert m.item == 1


def test_map_over_forward_only_source():
    m = (x for x in range(3)) | Map(lambda x: -x)
    assert not m.is_random_access
    with pytest.raises(CapabilityError, match="random access"):
        m[0]


def test_map_item_type():
    def halve(x) -> float:
        return x / 2

    assert (Iota(3) | Map(halve)).item_type is float
    assert (Iota(3) | Map(str)).item_type is str
    assert (Iota(3) | Map(lambda x: x)).item_type is object
    assert (Iota(3) | Map(lambda x: x, item_type=int)).item_type is int


def test_map_end_and_equality():
    data = [1, 2, 3]
    double = lambda x: x * 2  # noqa: E731
    m = data | Map(double)
    assert m == data | Map(double)
    assert m != data | Map(lambda x: x * 2)

    end = m.end()
    while m:
        m.advance()
    assert m == end


def test_map_rejects_invalid_projection():
    with pytest.raises(TypeError, match="Projection"):
        Map(5)


def test_map_does_not_move_source():
    src = to_cursor([1, 2, 3])
    m = src | Map(lambda x: x)
    m.advance()
    assert src.item == 1


def test_map_called_directly_on_cursor():
    src = to_cursor([1, 2])
    assert [x for x in Map(lambda x: x + 1)(src)] == [2, 3]
    with pytest.raises(CapabilityError, match="Map requires a cursor"):
        Map(lambda x: x)([1, 2])


def test_numpy_array_on_the_left():
    arr = np.arange(4)
    m = arr | Map(lambda x: int(x) * 3)
    assert isinstance(m, MapCursor)
    assert [x for x in m] == [0, 3, 6, 9]


# Filter


def test_filter_keeps_passing_items():
    assert [x for x in range(10) | Filter(is_even)] == [0, 2, 4, 6, 8]


def test_filter_default_predicate_is_truthiness():
    assert [x for x in [0, 1, "", "a", None] | Filter()] == [1, "a"]


def test_filter_with_container_predicate():
    assert [x for x in [1, 2, 3, 4] | Filter({1, 3})] == [1, 3]


def test_filter_with_projection():
    words = ["apple", "kiwi", "banana"]
    assert [w for w in words | Filter(lambda n: n > 4, len)] == ["apple", "banana"]


def test_filter_skips_on_construction():
    f = [1, 3, 4, 5] | Filter(is_even)
    assert isinstance(f, FilterCursor)
    assert f.item == 4


def test_filter_tests_each_item_once():
    calls = []

    def pred(x):
        calls.append(x)
        return is_even(x)

    f = [1, 2, 3, 4, 5] | Filter(pred)
    assert [x for x in f] == [2, 4]
    assert calls == [1, 2, 3, 4, 5]


def test_filter_capabilities():
    f = SortedBufferCursor([1, 2, 3, 4]) | Filter(is_even)
    assert f.is_sorted
    assert not f.is_random_access
    assert not f.is_bidirectional
    with pytest.raises(CapabilityError, match="random access"):
        f[0]
    with pytest.raises(CapabilityError, match="bidirectional"):
        f.retreat()


def test_filter_end():
    f = [1, 2, 3, 4] | Filter(is_even)
    end = f.end()
    assert not end
    while f:
        f.advance()
    assert f == end


def test_filter_writes_through():
    data = [1, 2, 3, 4]
    fill(data | Filter(is_even), 0)
    assert data == [1, 0, 3, 0]


def test_filter_over_read_only_source():
    f = (1, 2) | Filter()
    assert not f.is_writable
    with pytest.raises(CapabilityError, match="writable"):
        f.item = 0


def test_filter_rejects_plain_value_predicate():
    with pytest.raises(TypeError, match="Predicate"):
        Filter(3)


def test_filter_then_map():
    result = [x for x in range(6) | Filter(is_even) | Map(lambda x: x + 1)]
    assert result == [1, 3, 5]


# Zip


def test_zip_stops_at_shorter_side():
    z = Zip([1, 2, 3], ["a", "b"])
    assert [p for p in z] == [(1, "a"), (2, "b")]
    assert len(z) == 2
    assert z.item == Pair(1, "a")
    assert z.item.first == 1


def test_zip_never_visits_the_longer_tail(recorder):
    z = Zip([1, 2, 3] | Map(recorder), ["a", "b"])
    assert [p for p in z] == [(1, "a"), (2, "b")]
    assert recorder.seen == [1, 2]


def test_zip_generator_side_reads_one_item_ahead():
    produced = []

    def numbers():
        for x in (1, 2, 3):
            produced.append(x)
            yield x

    assert [p for p in Zip(["a", "b"], numbers())] == [("a", 1), ("b", 2)]
    assert produced == [1, 2]

    produced.clear()
    assert [p for p in Zip(numbers(), ["a", "b"])] == [(1, "a"), (2, "b")]
    # the lookahead pulls the third item; it is never dereferenced
    assert produced == [1, 2, 3]


def test_zip_capabilities():
    z = Zip(Iota(3), SortedBufferCursor([5, 6, 7]))
    assert z.is_random_access
    assert z.is_sorted
    assert z.is_bidirectional
    assert z[2] == (2, 7)
    assert z.component_types == (int, object)

    z = Zip(Iota(3), (x for x in "abc"))
    assert not z.is_random_access
    assert not z.is_sorted
    assert [p for p in z] == [(0, "a"), (1, "b"), (2, "c")]


def test_zip_end():
    z = Zip([1, 2, 3], [4, 5])
    end = z.end()
    assert not end
    assert end == z + 2
    while z:
        z.advance()
    assert z == end


# Enumerate


def test_enumerate_pairs_index_and_item():
    e = Enumerate("abc")
    assert [p for p in e] == [(0, "a"), (1, "b"), (2, "c")]
    assert e.is_sorted
    assert e.is_random_access
    assert e[2] == Pair(2, "c")
    e.advance()
    assert e[0] == (1, "b")
    assert e.item.first == 1


def test_enumerate_is_sorted_over_unsorted_items():
    e = Enumerate([3, 1, 2])
    assert e.is_sorted
    assert [p.first for p in e] == [0, 1, 2]


def test_enumerate_forward_only_source():
    e = Enumerate(x * 2 for x in range(3))
    assert not e.is_random_access
    assert [p for p in e] == [(0, 0), (1, 2), (2, 4)]


# Iota


@pytest.mark.parametrize(
    "args, expected",
    [
        ((5,), [0, 1, 2, 3, 4]),
        ((3, 10, 2), [3, 5, 7, 9]),
        ((3, 9, 2), [3, 5, 7]),
        ((10, 3, -2), [10, 8, 6, 4]),
        ((2, 2), []),
        ((0, 5, -1), []),
        ((5, 0), []),
        ((0,), []),
    ],
)
def test_iota_values(args, expected):
    it = Iota(*args)
    assert [x for x in it] == expected
    assert len(it) == len(expected)


def test_iota_is_random_access_and_sorted():
    it = Iota(3, 10, 2)
    assert it.is_random_access
    assert it.is_sorted
    assert it.is_bidirectional
    assert it[3] == 9
    assert it[-1] == 9
    assert (it + 2).item == 7
    assert Iota(10, 0, -1).is_sorted


def test_iota_end():
    it = Iota(3, 10, 2)
    end = it.end()
    assert end == it + 4
    assert not end
    while it:
        it.advance()
    assert it == end


def test_iota_stepping_is_clamped():
    it = Iota(3, 10, 2)
    it += 10
    assert not it
    assert len(it) == 0
    assert it == it.end()
    it.advance()
    assert len(it) == 0

    it -= 10
    assert it.item == 3
    assert len(it) == 4
    it.retreat()
    assert it.item == 3

    down = Iota(5, 0, -2)
    down += 7
    assert not down
    down -= 1
    assert down.item == 1


def test_iota_keeps_numpy_scalar_type():
    it = Iota(np.int32(1), 4)
    assert it.item_type is np.int32
    assert type(it.item) is np.int32
    assert [int(x) for x in it] == [1, 2, 3]


def test_iota_rejects_zero_step():
    with pytest.raises(ValueError, match="zero"):
        Iota(0, 10, 0)


@pytest.mark.parametrize("args", [(1.5,), (0, 2.0), (0, 5, 0.5), (True,)])
def test_iota_rejects_non_integers(args):
    with pytest.raises(TypeError, match="integer"):
        Iota(*args)


def test_iota_arity():
    with pytest.raises(TypeError, match="1 to 3 arguments"):
        Iota()


# Reverse


def test_reverse():
    r = Reverse([1, 2, 3])
    assert [x for x in r] == [3, 2, 1]
    assert r.is_random_access
    assert not r.is_sorted
    assert r[0] == 3
    assert r[-1] == 1
    r.advance()
    assert r.item == 2
    r.retreat()
    assert r.item == 3


def test_reverse_writes_through():
    data = [1, 2, 3]
    r = Reverse(data)
    r << 30 << 20
    assert data == [1, 20, 30]


def test_reverse_of_reverse():
    assert [x for x in Reverse(Reverse("abc"))] == ["a", "b", "c"]


def test_reverse_requires_random_access():
    with pytest.raises(CapabilityError, match="Reverse requires a random-access"):
        Reverse(x for x in range(3))


# Repeat


def test_repeat():
    r = Repeat("x", 3)
    assert [x for x in r] == ["x", "x", "x"]
    assert len(r) == 3
    assert r[2] == "x"
    assert r.is_sorted
    assert r.item_type is str
    assert [x for x in Repeat(1, 0)] == []


def test_repeat_rejects_negative_count():
    with pytest.raises(ValueError, match="non-negative"):
        Repeat(1, -1)
