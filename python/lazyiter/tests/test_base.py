# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import pytest

from lazyiter import CapabilityError, CursorBase, to_cursor
from lazyiter.iterators._base import implemented_primitives


class CountDown(CursorBase):
    """Forward-only cursor implementing only _more, _item and _next."""

    __slots__ = ["_n"]

    def __init__(self, n):
        self._n = n

    def _more(self):
        return self._n > 0

    def _item(self):
        return self._n

    def _next(self):
        self._n -= 1


class Squares(CursorBase):
    """Random-access cursor implementing only _len, _item_at, _forward and _rewind."""

    __slots__ = ["_i", "_n"]

    is_random_access = True

    def __init__(self, n):
        self._i = 0
        self._n = n

    def _len(self):
        return self._n - self._i

    def _item_at(self, j):
        return (self._i + j) ** 2

    def _forward(self, n):
        self._i = min(self._i + n, self._n)

    def _rewind(self, n):
        self._i = max(self._i - n, 0)

    def _position(self):
        return (self._i, self._n)


def test_implemented_primitives():
    assert implemented_primitives(CountDown) == {"_more", "_item", "_next"}
    assert implemented_primitives(Squares) == {
        "_len",
        "_item_at",
        "_forward",
        "_rewind",
        "_position",
    }


def test_derived_flags():
    assert CountDown.is_iterator
    assert not CountDown.is_random_access
    assert not CountDown.is_bidirectional
    assert not CountDown.is_writable

    assert Squares.is_random_access
    assert Squares.is_bidirectional
    assert not Squares.is_writable


def test_forward_only_fallbacks():
    it = CountDown(3)
    assert bool(it)
    assert len(it) == 3
    assert it.item == 3
    assert [x for x in it] == [3, 2, 1]
    # ranged iteration works on a copy
    assert it.item == 3

    it += 2
    assert it.item == 1
    it.advance()
    assert not it
    assert len(it) == 0


def test_random_access_fallbacks():
    sq = Squares(4)
    assert [x for x in sq] == [0, 1, 4, 9]
    assert sq.item == 0
    assert bool(sq)
    assert sq[2] == 4
    assert sq[-1] == 9

    sq.advance()
    assert sq.item == 1
    assert len(sq) == 3
    assert sq[0] == 1

    sq.retreat()
    assert sq.item == 0


def test_end_of_random_access_cursor():
    sq = Squares(4)
    end = sq.end()
    assert not end
    assert end == sq + 4

    it = sq.iter()
    while it:
        it.advance()
    assert it == end


def test_end_of_forward_cursor_walks_a_copy():
    it = CountDown(3)
    end = it.end()
    assert not end
    assert it.item == 3


def test_arithmetic_returns_new_cursors():
    sq = Squares(5)
    moved = sq + 2
    assert moved.item == 4
    assert sq.item == 0
    assert (2 + sq).item == 4
    assert (moved - 1).item == 1

    sq += 3
    assert sq.item == 9
    sq += -1
    assert sq.item == 4
    sq -= -2
    assert sq.item == 16


def test_post_increment_and_decrement():
    sq = Squares(3)
    before = sq.post_advance()
    assert before.item == 0
    assert sq.item == 1

    before = sq.post_retreat()
    assert before.item == 1
    assert sq.item == 0


def test_pull_and_copies():
    sq = Squares(3)
    twin = +sq
    assert sq.pull() == 0
    assert sq.pull() == 1
    assert twin.item == 0
    assert sq.copy() == sq
    assert sq.begin() == sq
    assert sq.iter() is not sq


def test_forward_only_rejects_capabilities_it_lacks():
    it = CountDown(3)
    with pytest.raises(CapabilityError, match="index"):
        it[0]
    with pytest.raises(CapabilityError, match="bidirectional"):
        it.retreat()
    with pytest.raises(CapabilityError, match="bidirectional"):
        it -= 1
    with pytest.raises(CapabilityError, match="writable"):
        it.item = 5


def test_equality_without_position_is_identity():
    it = CountDown(2)
    assert it == it
    assert it != it.copy()
    assert it != Squares(2)


def test_equality_by_position():
    assert Squares(3) == Squares(3)
    assert Squares(3) != Squares(4)
    assert Squares(3) + 1 != Squares(3)


def test_cursors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Squares(1))


def test_arithmetic_rejects_non_integers():
    with pytest.raises(TypeError):
        Squares(3) + 1.5


def test_missing_primitive_raises_at_class_definition():
    with pytest.raises(CapabilityError, match="termination"):

        class NoTermination(CursorBase):
            def _item(self):
                return 0

            def _next(self):
                pass

    with pytest.raises(CapabilityError, match="access"):

        class NoAccess(CursorBase):
            def _more(self):
                return False

            def _next(self):
                pass


def test_random_access_requires_len():
    with pytest.raises(CapabilityError, match="_len"):

        class Unsized(CursorBase):
            is_random_access = True

            def _more(self):
                return False

            def _item_at(self, i):
                return i

            def _forward(self, n):
                pass


def test_abstract_base_skips_checks():
    class Intermediate(CursorBase, abstract=True):
        def _more(self):
            return False

    class Concrete(Intermediate):
        def _item(self):
            return None

        def _next(self):
            pass

    assert not Concrete()


def test_shift_operators_push_and_overwrite():
    data = [1, 2, 3]
    out = []
    it = to_cursor(data)
    it >> out >> out
    assert out == [1, 2]
    assert it.item == 3

    dest = to_cursor([0, 0, 0])
    it = to_cursor(data)
    it >> dest
    assert dest.buffer == [1, 0, 0]
    assert dest.item == 0  # dest advanced past the written slot

    writer = to_cursor(data)
    writer << 10 << 20
    assert data == [10, 20, 3]


def test_repr_mentions_class():
    assert "CountDown" in repr(CountDown(1))
