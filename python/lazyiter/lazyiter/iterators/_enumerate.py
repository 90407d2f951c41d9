# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""EnumerateCursor implementation."""

from __future__ import annotations

from ..op import Pair
from ._base import CursorBase
from ._predicates import require_iterator


class EnumerateCursor(CursorBase):
    """
    Cursor yielding ``Pair(index, item)`` with a 0-based index.

    Always flagged sorted: the index alone orders the pairs, whatever the
    underlying items are.
    """

    __slots__ = ["_source", "_index"]

    is_sorted = True
    item_type = Pair

    def __init__(self, source: CursorBase):
        require_iterator(source, "Enumerate")
        self._source = source.iter()
        self._index = 0

    @property
    def is_random_access(self) -> bool:
        return self._source.is_random_access

    @property
    def is_bidirectional(self) -> bool:
        return self._source.is_bidirectional

    def _item(self):
        return Pair(self._index, self._source.item)

    def _item_at(self, j: int):
        return Pair(self._index + j, self._source[j])

    def _more(self) -> bool:
        return bool(self._source)

    def _len(self) -> int:
        return len(self._source)

    def _next(self) -> None:
        self._index += 1
        self._source.advance()

    def _forward(self, n: int) -> None:
        self._index += n
        self._source += n

    def _prev(self) -> None:
        self._index -= 1
        self._source.retreat()

    def _rewind(self, n: int) -> None:
        self._index -= n
        self._source -= n

    def _position(self):
        return (self._index, self._source)
