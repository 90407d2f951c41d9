# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""ConstantCursor implementation."""

from __future__ import annotations

import numbers

from ._base import CursorBase


class ConstantCursor(CursorBase):
    """
    Cursor representing `count` repetitions of the same value.

    Every dereference returns the same value object. A run of equal values is
    trivially sorted.
    """

    __slots__ = ["_value", "_index", "_count"]

    is_random_access = True
    is_sorted = True

    def __init__(self, value, count: int):
        """
        Create a constant cursor.

        Args:
            value: The value to repeat
            count: Number of repetitions (non-negative)
        """
        if not isinstance(count, numbers.Integral):
            raise TypeError(f"Repeat count must be an integer, got {type(count).__name__}")
        if count < 0:
            raise ValueError(f"Repeat count must be non-negative, got {count}")
        self._value = value
        self._index = 0
        self._count = int(count)

    @property
    def item_type(self) -> type:
        return type(self._value)

    def _item(self):
        return self._value

    def _item_at(self, i: int):
        return self._value

    def _len(self) -> int:
        return self._count - self._index

    def _forward(self, n: int) -> None:
        self._index = min(self._index + n, self._count)

    def _rewind(self, n: int) -> None:
        self._index = max(self._index - n, 0)

    def _position(self):
        return (id(self._value), self._index, self._count)
