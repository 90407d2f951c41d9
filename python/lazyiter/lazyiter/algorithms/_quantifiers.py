# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Quantifier consumers.

Each quantifier tests ``match(pred, proj(item))``: the predicate may be a
callable, a container, or a plain value compared by equality. All and Any
stop at the first item deciding the answer.
"""

from __future__ import annotations

from .._pipeline import PipelineFactory
from ..iterators._convert import to_cursor
from ..iterators._predicates import require_iterable
from ..op import identity, make_predicate, make_projection


class _Quantifier(PipelineFactory):
    __slots__ = ["pred", "proj", "_test"]

    def __init__(self, pred=identity, proj=identity):
        predicate = make_predicate(pred, allow_equality=True)
        if proj is identity:
            self._test = predicate
        else:
            projection = make_projection(proj)
            self._test = lambda value: predicate(projection(value))
        self.pred = pred
        self.proj = proj

    def _first_match(self, cursor, wanted: bool) -> bool:
        """Return True as soon as an item tests `wanted`, else False."""
        test = self._test
        for item in cursor:
            if bool(test(item)) is wanted:
                return True
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pred!r}, {self.proj!r})"


class All(_Quantifier):
    """True if every item matches; True for an empty source."""

    __slots__ = ()

    name = "All"

    def _apply(self, cursor) -> bool:
        return not self._first_match(cursor, False)


class Any(_Quantifier):
    """True if some item matches; False for an empty source."""

    __slots__ = ()

    name = "Any"

    def _apply(self, cursor) -> bool:
        return self._first_match(cursor, True)


class NoneOf(_Quantifier):
    """True if no item matches; True for an empty source."""

    __slots__ = ()

    name = "NoneOf"

    def _apply(self, cursor) -> bool:
        return not self._first_match(cursor, True)


def _quantify(factory: _Quantifier, iterable) -> bool:
    require_iterable(iterable, factory.name)
    return factory._apply(to_cursor(iterable))


def all_of(iterable, pred=identity, proj=identity) -> bool:
    """Return True if every item of `iterable` matches `pred` after `proj`."""
    return _quantify(All(pred, proj), iterable)


def any_of(iterable, pred=identity, proj=identity) -> bool:
    """Return True if some item of `iterable` matches `pred` after `proj`."""
    return _quantify(Any(pred, proj), iterable)


def none_of(iterable, pred=identity, proj=identity) -> bool:
    """Return True if no item of `iterable` matches `pred` after `proj`."""
    return _quantify(NoneOf(pred, proj), iterable)
