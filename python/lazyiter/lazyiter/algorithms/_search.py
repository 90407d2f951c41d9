# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

from __future__ import annotations

import bisect

from .._pipeline import PipelineFactory
from ..iterators._predicates import require_random_access, require_sorted
from ..op import Pair, identity, make_projection


class BSearch(PipelineFactory):
    """
    Binary search over a sorted, random-access source: ``source | BSearch(value)``.

    Items are compared after applying `proj`, so ``Enumerate(...)`` pairs can
    be searched by index with ``proj=lambda p: p.first``.

    Returns:
        ``Pair(found, index)``. When `found` is True, `index` is the position
        of the first matching item; otherwise it is the position where
        `value` would be inserted to keep the source sorted.
    """

    __slots__ = ["value", "proj", "_key"]

    name = "BSearch"

    def __init__(self, value, proj=identity):
        self._key = make_projection(proj)
        self.value = value
        self.proj = proj

    def _apply(self, cursor) -> Pair:
        require_random_access(cursor, self.name)
        require_sorted(cursor, self.name)

        n = len(cursor)
        index = bisect.bisect_left(cursor, self.value, 0, n, key=self._key)
        found = index < n and self._key(cursor[index]) == self.value
        return Pair(bool(found), index)

    def __repr__(self) -> str:
        return f"BSearch({self.value!r})"
