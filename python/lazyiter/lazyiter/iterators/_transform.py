# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""MapCursor implementation."""

from __future__ import annotations

from .._types import item_type_of_callable
from ..op import make_projection
from ._base import CursorBase
from ._predicates import require_iterator


class MapCursor(CursorBase):
    """
    Cursor that applies a projection to items from an underlying cursor.

    Random access and bidirectionality follow the underlying cursor. The
    result is never flagged sorted: an arbitrary projection does not preserve
    order. Two map cursors are equal when their underlying cursors are equal
    and they share the same projection object.
    """

    __slots__ = ["_source", "_proj", "_func", "_item_type"]

    is_sorted = False

    def __init__(self, source: CursorBase, proj, item_type: type | None = None):
        """
        Create a map cursor.

        Args:
            source: The underlying cursor (copied)
            proj: Callable, mapping or sequence applied to each item
            item_type: Type of the projected items; inferred from the
                projection's return annotation when omitted
        """
        require_iterator(source, "Map")
        self._source = source.iter()
        self._proj = proj
        self._func = make_projection(proj)
        if item_type is None:
            item_type = item_type_of_callable(self._func)
        self._item_type = item_type

    @property
    def is_random_access(self) -> bool:
        return self._source.is_random_access

    @property
    def is_bidirectional(self) -> bool:
        return self._source.is_bidirectional

    @property
    def item_type(self) -> type:
        return self._item_type

    def _item(self):
        return self._func(self._source.item)

    def _item_at(self, i: int):
        return self._func(self._source[i])

    def _more(self) -> bool:
        return bool(self._source)

    def _len(self) -> int:
        return len(self._source)

    def _next(self) -> None:
        self._source.advance()

    def _forward(self, n: int) -> None:
        self._source += n

    def _prev(self) -> None:
        self._source.retreat()

    def _rewind(self, n: int) -> None:
        self._source -= n

    def _end(self) -> "MapCursor":
        c = self.copy()
        c._source = self._source.end()
        return c

    def _position(self):
        return (self._source, id(self._proj))
