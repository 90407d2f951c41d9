# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Cursor implementations.

This package provides the cursor base class, the cursors over buffers and
plain iterables, the lazy adaptors, and the capability predicates used to
gate them.
"""

from ._base import CursorBase
from ._constant import ConstantCursor
from ._convert import to_cursor
from ._counting import IotaCursor
from ._enumerate import EnumerateCursor
from ._factories import Enumerate, Filter, Iota, Map, Repeat, Reverse, Zip
from ._filter import FilterCursor
from ._iterable import IterableCursor
from ._pointer import BufferCursor, SortedBufferCursor, is_buffer
from ._predicates import (
    is_iterable,
    is_iterator,
    is_iterator_of,
    is_random_access,
    is_sorted,
    require_bidirectional,
    require_iterable,
    require_iterator,
    require_random_access,
    require_sorted,
    require_writable,
)
from ._protocol import CursorProtocol
from ._reverse import ReverseCursor
from ._transform import MapCursor
from ._zip import ZipCursor

__all__ = [
    "BufferCursor",
    "ConstantCursor",
    "CursorBase",
    "CursorProtocol",
    "Enumerate",
    "EnumerateCursor",
    "Filter",
    "FilterCursor",
    "Iota",
    "IotaCursor",
    "IterableCursor",
    "Map",
    "MapCursor",
    "Repeat",
    "Reverse",
    "ReverseCursor",
    "SortedBufferCursor",
    "Zip",
    "ZipCursor",
    "is_buffer",
    "is_iterable",
    "is_iterator",
    "is_iterator_of",
    "is_random_access",
    "is_sorted",
    "require_bidirectional",
    "require_iterable",
    "require_iterator",
    "require_random_access",
    "require_sorted",
    "require_writable",
    "to_cursor",
]
