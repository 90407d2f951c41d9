# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Bulk writes through writable cursors."""

from __future__ import annotations

from ..iterators._convert import to_cursor
from ..iterators._predicates import require_writable
from ._sink import Sink


def fill(dest, value) -> None:
    """
    Assign `value` to every position of `dest`.

    Args:
        dest: Writable iterable, e.g. a list, bytearray or numpy array

    Raises:
        CapabilityError: If `dest` is not writable
    """
    cursor = to_cursor(dest)
    require_writable(cursor, "fill")
    while cursor:
        cursor << value


def copy(source, dest):
    """
    Overwrite `dest` element-wise with the items of `source`.

    `dest` must have room for every item of `source`; extra positions in
    `dest` keep their values.

    Args:
        source: Any iterable
        dest: Writable iterable

    Returns:
        `dest`
    """
    cursor = to_cursor(dest)
    require_writable(cursor, "copy")
    to_cursor(source) | Sink(cursor)
    return dest
