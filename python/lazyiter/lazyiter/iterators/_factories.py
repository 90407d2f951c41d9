# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Factory functions for cursors.

These provide the user-facing API. Map and Filter are pipeline factories
bound with ``|``; the others take their sources directly and accept any
iterable, converting it with `to_cursor`.
"""

from __future__ import annotations

from typing import Callable

from .._pipeline import PipelineFactory
from ..op import identity, make_predicate, make_projection
from ._base import CursorBase
from ._constant import ConstantCursor
from ._convert import to_cursor
from ._counting import IotaCursor
from ._enumerate import EnumerateCursor
from ._filter import FilterCursor
from ._reverse import ReverseCursor
from ._transform import MapCursor
from ._zip import ZipCursor


class Map(PipelineFactory):
    """
    Lazily project every item: ``source | Map(proj)``.

    Args:
        proj: Callable, mapping or sequence applied to each item
        item_type: Type of the projected items, if the projection's return
            annotation does not say
    """

    __slots__ = ["proj", "item_type"]

    name = "Map"

    def __init__(self, proj: Callable | object, item_type: type | None = None):
        make_projection(proj)  # validate eagerly
        self.proj = proj
        self.item_type = item_type

    def _apply(self, cursor: CursorBase) -> MapCursor:
        return MapCursor(cursor, self.proj, self.item_type)

    def __repr__(self) -> str:
        return f"Map({self.proj!r})"


class Filter(PipelineFactory):
    """
    Lazily keep the items passing a predicate: ``source | Filter(pred, proj)``.

    Args:
        pred: Callable or container; defaults to truthiness
        proj: Applied to each item before testing; defaults to identity
    """

    __slots__ = ["pred", "proj"]

    name = "Filter"

    def __init__(self, pred=identity, proj=identity):
        make_predicate(pred)
        make_projection(proj)
        self.pred = pred
        self.proj = proj

    def _apply(self, cursor: CursorBase) -> FilterCursor:
        return FilterCursor(cursor, self.pred, self.proj)

    def __repr__(self) -> str:
        return f"Filter({self.pred!r}, {self.proj!r})"


def Zip(a, b) -> ZipCursor:
    """
    Create a cursor over ``Pair(a_item, b_item)`` that stops at the shorter input.

    Args:
        a: First iterable or cursor
        b: Second iterable or cursor

    Returns:
        ZipCursor
    """
    return ZipCursor(to_cursor(a), to_cursor(b))


def Enumerate(iterable) -> EnumerateCursor:
    """
    Create a cursor over ``Pair(index, item)``, counting from 0.

    Args:
        iterable: Iterable or cursor to number

    Returns:
        EnumerateCursor
    """
    return EnumerateCursor(to_cursor(iterable))


def Iota(*args) -> IotaCursor:
    """
    Create a cursor over an arithmetic progression.

    ``Iota(end)`` counts 0, 1, ..., end - 1. ``Iota(start, end, step=1)``
    counts from `start` by `step`, stopping before the first value that
    reaches `end` in the direction of `step`.

    Returns:
        IotaCursor
    """
    if len(args) == 1:
        return IotaCursor(0, args[0], 1)
    if len(args) in (2, 3):
        return IotaCursor(*args)
    raise TypeError(f"Iota expects 1 to 3 arguments, got {len(args)}")


def Reverse(iterable) -> ReverseCursor:
    """
    Create a cursor over the items of a random-access iterable in reverse order.

    Args:
        iterable: A flat buffer or random-access cursor

    Returns:
        ReverseCursor
    """
    return ReverseCursor(to_cursor(iterable))


def Repeat(value, count: int) -> ConstantCursor:
    """
    Create a cursor yielding `value` `count` times.

    Returns:
        ConstantCursor
    """
    return ConstantCursor(value, count)
