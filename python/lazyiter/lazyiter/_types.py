# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Item type helpers for lazyiter.

Cursors report the type of the items they produce as a plain Python class
(`int`, `float`, a numpy scalar type such as `np.int32`, `Pair`, or `object`
when nothing better is known). This module maps buffers and numpy dtypes to
item types and decides whether one item type converts to another.

This is an internal module.
"""

from __future__ import annotations

import array
import functools
import typing

import numpy as np

# Python scalar a numpy scalar kind narrows to
_NUMPY_KIND_TO_PYTHON = {
    "b": bool,
    "i": int,
    "u": int,
    "f": float,
    "c": complex,
}

# array.array typecodes holding characters rather than numbers
_CHARACTER_TYPECODES = frozenset({"u", "w"})


@functools.lru_cache(maxsize=256)
def from_numpy_dtype(dtype: np.dtype) -> type:
    """
    Return the item type produced when indexing an array of `dtype`.

    Structured and object dtypes produce `object`.
    """
    dtype = np.dtype(dtype)  # Ensure it's a dtype object
    if dtype.fields is not None or dtype.kind == "O":
        return object
    return dtype.type


def get_dtype(buffer) -> np.dtype | None:
    """Return the numpy dtype of `buffer`, or None if it has none."""
    if isinstance(buffer, np.ndarray):
        return buffer.dtype
    if isinstance(buffer, array.array):
        if buffer.typecode in _CHARACTER_TYPECODES:
            return None
        # numeric typecodes are valid numpy character codes
        return np.dtype(buffer.typecode)
    if hasattr(buffer, "__array_interface__"):
        return np.dtype(buffer.__array_interface__["typestr"])
    return None


def item_type_of_buffer(buffer) -> type:
    """Infer the item type of a flat buffer."""
    if isinstance(buffer, (bytes, bytearray)):
        return int
    if isinstance(buffer, str):
        return str
    if isinstance(buffer, range):
        return int
    dtype = get_dtype(buffer)
    if dtype is None:
        return object
    if isinstance(buffer, array.array):
        return _NUMPY_KIND_TO_PYTHON.get(dtype.kind, object)
    return from_numpy_dtype(dtype)


def item_type_of_callable(func, default: type = object) -> type:
    """
    Infer the result type of `func` from its return annotation.

    Only plain classes are used; generic aliases, strings that cannot be
    resolved and missing annotations all produce `default`. A class used as
    a projection produces instances of itself.
    """
    if isinstance(func, type):
        return func
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError):
        return default
    result = hints.get("return")
    if isinstance(result, type):
        return result
    return default


def is_convertible(src: type, dst: type) -> bool:
    """
    Return True if items of type `src` can be used where `dst` is expected.

    Subclasses convert to their bases, numpy scalars narrow to the matching
    Python scalar (`np.int32` -> `int`), and everything converts to `object`.
    """
    if dst is object or src is dst:
        return True
    if not isinstance(src, type) or not isinstance(dst, type):
        return False
    if issubclass(src, dst):
        return True
    if issubclass(src, np.generic):
        narrowed = _NUMPY_KIND_TO_PYTHON.get(np.dtype(src).kind)
        if narrowed is None:
            return False
        if narrowed is bool:
            return issubclass(dst, (bool, np.bool_))
        return issubclass(narrowed, dst) or (
            issubclass(dst, np.generic) and np.can_cast(src, dst, "same_kind")
        )
    return False
