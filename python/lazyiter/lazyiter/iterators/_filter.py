# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""FilterCursor implementation."""

from __future__ import annotations

from ..op import identity, make_predicate, make_projection
from ._base import CursorBase
from ._predicates import require_iterator


class FilterCursor(CursorBase):
    """
    Cursor that skips items of an underlying cursor failing a predicate.

    The predicate is tested on ``proj(item)`` when a projection is given. The
    cursor moves to the first passing item on construction and after every
    advance. It is forward-only and never random access; sortedness and
    writability follow the underlying cursor.
    """

    __slots__ = ["_source", "_pred", "_proj", "_test"]

    is_random_access = False

    def __init__(self, source: CursorBase, pred=identity, proj=identity):
        """
        Create a filter cursor.

        Args:
            source: The underlying cursor (copied)
            pred: Callable or container; items whose projection passes are kept
            proj: Callable, mapping or sequence applied before testing
        """
        require_iterator(source, "Filter")
        self._source = source.iter()
        self._pred = pred
        self._proj = proj

        predicate = make_predicate(pred)
        if proj is identity:
            self._test = predicate
        else:
            projection = make_projection(proj)
            self._test = lambda value: predicate(projection(value))

        self._skip()

    def _skip(self) -> None:
        source = self._source
        test = self._test
        while source and not test(source.item):
            source.advance()

    @property
    def is_sorted(self) -> bool:
        return self._source.is_sorted

    @property
    def is_writable(self) -> bool:
        return self._source.is_writable

    @property
    def item_type(self) -> type:
        return self._source.item_type

    def _item(self):
        return self._source.item

    def _more(self) -> bool:
        return bool(self._source)

    def _next(self) -> None:
        self._source.advance()
        self._skip()

    def _assign(self, value) -> None:
        self._source.item = value

    def _end(self) -> "FilterCursor":
        c = self.copy()
        c._source = self._source.end()
        return c

    def _position(self):
        return (self._source, id(self._pred), id(self._proj))
