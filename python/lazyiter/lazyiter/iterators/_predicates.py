# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Capability predicates.

The `is_*` functions answer whether an object has a capability; the
`require_*` functions raise CapabilityError when it does not. Adaptors and
consumers call the `require_*` gates once, at construction, so misuse fails
before any item is produced.
"""

from __future__ import annotations

from collections.abc import Iterable

from .._errors import CapabilityError
from .._types import is_convertible
from ._base import CursorBase
from ._pointer import is_buffer


def is_iterable(obj) -> bool:
    """Return True if `obj` can be converted to a cursor."""
    if isinstance(obj, CursorBase) or is_buffer(obj):
        return True
    if getattr(type(obj), "__cursor__", None) is not None:
        return True
    return isinstance(obj, Iterable)


def _is_cursor(obj) -> bool:
    # structural look-alikes go through to_cursor(), never straight to an adaptor
    return isinstance(obj, CursorBase)


def is_iterator_of(obj, item_type: type = object) -> bool:
    """
    Return True if `obj` is a cursor whose items convert to `item_type`.

    Writable cursors qualify for read-only item requirements; numpy scalar
    items qualify for the matching Python scalar type.
    """
    if not _is_cursor(obj):
        return False
    return is_convertible(obj.item_type, item_type)


def is_iterator(obj) -> bool:
    """Return True if `obj` is a cursor."""
    return is_iterator_of(obj)


def is_random_access(obj, item_type: type = object) -> bool:
    """Return True if `obj` is a random-access cursor of `item_type`."""
    return is_iterator_of(obj, item_type) and bool(obj.is_random_access)


def is_sorted(obj, item_type: type = object) -> bool:
    """Return True if `obj` is a sorted cursor of `item_type`."""
    return is_iterator_of(obj, item_type) and bool(obj.is_sorted)


def _name(obj) -> str:
    return type(obj).__name__


def require_iterable(obj, operation: str) -> None:
    if not is_iterable(obj):
        raise CapabilityError(f"{operation} requires an iterable, got {_name(obj)}")


def require_iterator(obj, operation: str) -> None:
    if not is_iterator(obj):
        raise CapabilityError(f"{operation} requires a cursor, got {_name(obj)}")


def require_random_access(obj, operation: str) -> None:
    require_iterator(obj, operation)
    if not obj.is_random_access:
        raise CapabilityError(
            f"{operation} requires a random-access cursor, got {_name(obj)}"
        )


def require_sorted(obj, operation: str) -> None:
    require_iterator(obj, operation)
    if not obj.is_sorted:
        raise CapabilityError(f"{operation} requires a sorted cursor, got {_name(obj)}")


def require_bidirectional(obj, operation: str) -> None:
    require_iterator(obj, operation)
    if not getattr(obj, "is_bidirectional", False):
        raise CapabilityError(
            f"{operation} requires a bidirectional cursor, got {_name(obj)}"
        )


def require_writable(obj, operation: str) -> None:
    require_iterator(obj, operation)
    if not getattr(obj, "is_writable", False):
        raise CapabilityError(f"{operation} requires a writable cursor, got {_name(obj)}")
