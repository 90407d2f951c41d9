# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ReverseCursor implementation."""

from __future__ import annotations

from ._base import CursorBase
from ._predicates import require_random_access


class ReverseCursor(CursorBase):
    """
    Cursor that walks a random-access cursor from its last item to its first.

    Advancing the reverse cursor moves backward over the underlying items.
    Writes go through to the underlying cursor when it is writable. The
    result is not flagged sorted.
    """

    __slots__ = ["_source", "_index", "_count"]

    is_random_access = True
    is_sorted = False

    def __init__(self, source: CursorBase):
        """
        Create a reverse cursor.

        Args:
            source: The underlying random-access cursor (copied)
        """
        require_random_access(source, "Reverse")
        self._source = source.iter()
        self._count = len(self._source)
        self._index = 0

    @property
    def is_writable(self) -> bool:
        return self._source.is_writable

    @property
    def item_type(self) -> type:
        return self._source.item_type

    def _underlying_index(self, i: int = 0) -> int:
        return self._count - 1 - self._index - i

    def _item(self):
        return self._source[self._underlying_index()]

    def _item_at(self, i: int):
        return self._source[self._underlying_index(i)]

    def _len(self) -> int:
        return self._count - self._index

    def _forward(self, n: int) -> None:
        self._index = min(self._index + n, self._count)

    def _rewind(self, n: int) -> None:
        self._index = max(self._index - n, 0)

    def _assign(self, value) -> None:
        self._source[self._underlying_index()] = value

    def _position(self):
        return (self._source, self._index)
