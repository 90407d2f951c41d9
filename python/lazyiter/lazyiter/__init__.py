# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Lazy cursors over sequences, composable with ``|``.

    >>> from operator import add
    >>> from lazyiter import Filter, Map, Reduce
    >>> [1, 2, 3, 4, 5] | Filter(lambda x: x % 2 == 0) | Map(lambda x: x * 10) | Reduce(add, 0)
    60
"""

from ._config import checked, checked_access, set_checked_access
from ._errors import CapabilityError, ExhaustedCursorError
from ._pipeline import PipelineFactory
from .algorithms import (
    All,
    Any,
    Apply,
    BSearch,
    Drain,
    NoneOf,
    Reduce,
    Sink,
    Unzip,
    all_of,
    any_of,
    copy,
    fill,
    none_of,
)
from .iterators import (
    BufferCursor,
    ConstantCursor,
    CursorBase,
    CursorProtocol,
    Enumerate,
    EnumerateCursor,
    Filter,
    FilterCursor,
    Iota,
    IotaCursor,
    IterableCursor,
    Map,
    MapCursor,
    Repeat,
    Reverse,
    ReverseCursor,
    SortedBufferCursor,
    Zip,
    ZipCursor,
    is_iterable,
    is_iterator,
    is_iterator_of,
    is_random_access,
    is_sorted,
    to_cursor,
)
from .op import Pair, get, has, identity, match

__all__ = [
    "All",
    "Any",
    "Apply",
    "BSearch",
    "BufferCursor",
    "CapabilityError",
    "ConstantCursor",
    "CursorBase",
    "CursorProtocol",
    "Drain",
    "Enumerate",
    "EnumerateCursor",
    "ExhaustedCursorError",
    "Filter",
    "FilterCursor",
    "Iota",
    "IotaCursor",
    "IterableCursor",
    "Map",
    "MapCursor",
    "NoneOf",
    "Pair",
    "PipelineFactory",
    "Reduce",
    "Repeat",
    "Reverse",
    "ReverseCursor",
    "Sink",
    "SortedBufferCursor",
    "Unzip",
    "Zip",
    "ZipCursor",
    "all_of",
    "any_of",
    "checked",
    "checked_access",
    "copy",
    "fill",
    "get",
    "has",
    "identity",
    "is_iterable",
    "is_iterator",
    "is_iterator_of",
    "is_random_access",
    "is_sorted",
    "match",
    "none_of",
    "set_checked_access",
    "to_cursor",
]
