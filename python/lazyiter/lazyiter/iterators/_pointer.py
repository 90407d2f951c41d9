# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""BufferCursor implementation - random-access cursor over a flat buffer."""

from __future__ import annotations

import array
from collections.abc import Sequence

import numpy as np

from .._types import item_type_of_buffer
from ._base import CursorBase


def is_buffer(obj) -> bool:
    """Check if `obj` is a flat buffer supporting O(1) len() and indexing."""
    if isinstance(obj, (Sequence, np.ndarray, array.array, memoryview)):
        return True
    return hasattr(obj, "__array_interface__")


def _is_mutable_buffer(buffer) -> bool:
    if isinstance(buffer, np.ndarray):
        return bool(buffer.flags.writeable)
    if isinstance(buffer, memoryview):
        return not buffer.readonly
    return hasattr(type(buffer), "__setitem__")


def _as_buffer(obj):
    """Return `obj` itself, or a numpy view for foreign array-interface objects."""
    if isinstance(obj, (Sequence, np.ndarray, array.array, memoryview)):
        return obj
    if hasattr(obj, "__array_interface__"):
        # no copy: the view shares memory with `obj`
        return np.asarray(obj)
    raise TypeError(f"{type(obj).__name__} is not a flat buffer")


class BufferCursor(CursorBase):
    """
    Random-access, bidirectional cursor over the first `length` items of a buffer.

    The buffer is referenced, not copied. If it supports item assignment the
    cursor is writable and ``cursor.item = v`` / ``cursor << v`` overwrite the
    buffer in place.

    Stepping is clamped to the view: advancing past the end stops at the end,
    rewinding past the beginning stops at the beginning.
    """

    __slots__ = ["_buffer", "_index", "_stop", "_item_type", "_writable"]

    is_random_access = True

    def __init__(self, buffer, length: int | None = None):
        """
        Create a buffer cursor.

        Args:
            buffer: A sequence, numpy array, or object exposing __array_interface__
            length: Number of leading items to expose; defaults to len(buffer)
        """
        buffer = _as_buffer(buffer)
        if isinstance(buffer, np.ndarray) and buffer.ndim == 0:
            raise ValueError("BufferCursor requires an array with at least one dimension")

        available = len(buffer)
        if length is None:
            length = available
        elif not 0 <= length <= available:
            raise ValueError(
                f"length {length} is out of range for a buffer of {available} items"
            )

        self._buffer = buffer
        self._index = 0
        self._stop = int(length)
        if isinstance(buffer, np.ndarray) and buffer.ndim > 1:
            self._item_type = np.ndarray
        else:
            self._item_type = item_type_of_buffer(buffer)
        self._writable = _is_mutable_buffer(buffer)

    @property
    def buffer(self):
        """The underlying buffer."""
        return self._buffer

    @property
    def item_type(self) -> type:
        return self._item_type

    @property
    def is_writable(self) -> bool:
        return self._writable

    def _item(self):
        return self._buffer[self._index]

    def _item_at(self, i: int):
        return self._buffer[self._index + i]

    def _more(self) -> bool:
        return self._index < self._stop

    def _len(self) -> int:
        return self._stop - self._index

    def _next(self) -> None:
        if self._index < self._stop:
            self._index += 1

    def _forward(self, n: int) -> None:
        self._index = min(self._index + n, self._stop)

    def _prev(self) -> None:
        if self._index > 0:
            self._index -= 1

    def _rewind(self, n: int) -> None:
        self._index = max(self._index - n, 0)

    def _assign(self, value) -> None:
        self._buffer[self._index] = value

    def _position(self):
        return (id(self._buffer), self._index, self._stop)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} of {type(self._buffer).__name__} "
            f"[{self._index}:{self._stop}]>"
        )


class SortedBufferCursor(BufferCursor):
    """
    BufferCursor over a buffer the caller guarantees is sorted (non-decreasing).

    Enables sortedness-dependent consumers such as BSearch.
    """

    __slots__ = ()

    is_sorted = True
