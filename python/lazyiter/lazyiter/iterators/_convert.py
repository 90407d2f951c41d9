# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Conversion of iterables to cursors."""

from __future__ import annotations

from collections.abc import Iterable

from .._errors import CapabilityError
from ._base import CursorBase
from ._iterable import IterableCursor
from ._pointer import BufferCursor, is_buffer


def to_cursor(obj, length: int | None = None) -> CursorBase:
    """
    Convert an iterable to a cursor.

    Args:
        obj: A cursor (copied), an object with ``__cursor__()``, a flat buffer,
             or any Python iterable
        length: With a buffer, expose only its first `length` items

    Returns:
        A cursor positioned at the first item. Buffers produce a random-access
        BufferCursor; other iterables a forward-only IterableCursor.
    """
    if length is not None:
        if not is_buffer(obj):
            raise CapabilityError(
                f"A (buffer, length) pair requires a flat buffer, got {type(obj).__name__}"
            )
        return BufferCursor(obj, length)

    if isinstance(obj, CursorBase):
        return obj.iter()

    method = getattr(type(obj), "__cursor__", None)
    if method is not None:
        cursor = method(obj)
        if not isinstance(cursor, CursorBase):
            raise TypeError(
                f"{type(obj).__name__}.__cursor__() returned {type(cursor).__name__}, "
                f"expected a cursor"
            )
        return cursor

    if is_buffer(obj):
        return BufferCursor(obj)
    if isinstance(obj, Iterable):
        return IterableCursor(obj)
    raise CapabilityError(f"{type(obj).__name__} is not iterable")
