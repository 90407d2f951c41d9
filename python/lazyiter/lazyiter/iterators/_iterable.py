# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""IterableCursor implementation - forward-only cursor over any Python iterable."""

from __future__ import annotations

import itertools

from ._base import CursorBase


class IterableCursor(CursorBase):
    """
    Forward-only cursor over a Python iterable (generators, sets, dict views...).

    The cursor holds one item of lookahead, fetched on first use. Copies share
    the underlying iterator through ``itertools.tee``, so items consumed by one
    copy are buffered until every copy has moved past them.

    Testing for more items fetches the next one, so the wrapped iterator runs
    one item ahead of the cursor. A generator paired by Zip with a shorter
    partner produces one item that is never used.
    """

    __slots__ = ["_source", "_it", "_fetched", "_has_value", "_value", "_count", "_item_type"]

    def __init__(self, iterable, item_type: type = object):
        """
        Create an iterable cursor.

        Args:
            iterable: Any object supporting iter()
            item_type: Type of the items, if known
        """
        self._source = iterable
        self._it = iter(iterable)
        self._fetched = False
        self._has_value = False
        self._value = None
        self._count = 0
        self._item_type = item_type

    @property
    def item_type(self) -> type:
        return self._item_type

    def _fetch(self) -> None:
        if self._fetched:
            return
        try:
            self._value = next(self._it)
            self._has_value = True
        except StopIteration:
            self._value = None
            self._has_value = False
        self._fetched = True

    def _more(self) -> bool:
        self._fetch()
        return self._has_value

    def _item(self):
        self._fetch()
        return self._value

    def _next(self) -> None:
        self._fetch()
        if self._has_value:
            self._count += 1
            self._fetched = False
            self._value = None

    def _position(self):
        # exhausted copies share a position with end()
        return (id(self._source), self._count if self._more() else None)

    def copy(self) -> "IterableCursor":
        clone = super().copy()
        self._it, clone._it = itertools.tee(self._it)
        return clone
