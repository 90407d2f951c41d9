# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ZipCursor implementation."""

from __future__ import annotations

from ..op import Pair
from ._base import CursorBase
from ._predicates import require_iterator


class ZipCursor(CursorBase):
    """
    Cursor that zips two cursors together.

    At each position, yields ``Pair(a_item, b_item)``. Iteration stops at the
    shorter side: the zip has more items only while both sides do, and its
    length is the smaller of the two lengths.

    Past the shorter side, items of the longer one are never read. The one
    exception is a longer first side wrapping a plain iterator: it is tested
    first, and IterableCursor fetches one item ahead to answer.

    Random access, sortedness and bidirectionality require both sides to have
    them. The sorted flag is the conjunction of the sides' flags and is not
    re-verified against the pairs.
    """

    __slots__ = ["_a", "_b"]

    item_type = Pair

    def __init__(self, a: CursorBase, b: CursorBase):
        """
        Create a zip cursor.

        Args:
            a: First cursor (copied)
            b: Second cursor (copied)
        """
        require_iterator(a, "Zip")
        require_iterator(b, "Zip")
        self._a = a.iter()
        self._b = b.iter()

    @property
    def is_random_access(self) -> bool:
        return self._a.is_random_access and self._b.is_random_access

    @property
    def is_sorted(self) -> bool:
        return self._a.is_sorted and self._b.is_sorted

    @property
    def is_bidirectional(self) -> bool:
        return self._a.is_bidirectional and self._b.is_bidirectional

    @property
    def component_types(self) -> tuple[type, type]:
        """Item types of the two sides."""
        return (self._a.item_type, self._b.item_type)

    def _item(self):
        return Pair(self._a.item, self._b.item)

    def _item_at(self, i: int):
        return Pair(self._a[i], self._b[i])

    def _more(self) -> bool:
        return bool(self._a) and bool(self._b)

    def _len(self) -> int:
        return min(len(self._a), len(self._b))

    def _next(self) -> None:
        self._a.advance()
        self._b.advance()

    def _forward(self, n: int) -> None:
        self._a += n
        self._b += n

    def _prev(self) -> None:
        self._a.retreat()
        self._b.retreat()

    def _rewind(self, n: int) -> None:
        self._a -= n
        self._b -= n

    def _position(self):
        return (self._a, self._b)
