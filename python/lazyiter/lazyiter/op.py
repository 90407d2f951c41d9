# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Functor adapters used by adaptors and consumers.

Projections, predicates and sink destinations may be given in several forms.
The helpers here validate the form once, when a factory is built, and return
a plain callable used on every item afterwards.

Projections (`get`):
    - a callable: ``proj(item)``
    - a mapping or sequence: ``proj[item]``

Predicates (`has`):
    - a callable: ``bool(pred(item))``
    - a container: ``item in pred``

Matchers (`match`) accept everything `has` does and fall back to
``pred == item`` for plain values.

Sink destinations (`make_pusher`):
    - a cursor: written through with ``dest << item``
    - an object with ``append`` or ``add``
    - a callable: ``dest(item)``
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple


class Pair(NamedTuple):
    """Item produced by Zip and Enumerate."""

    first: Any
    second: Any


def identity(value):
    """Return `value` unchanged. Default projection and predicate."""
    return value


def _is_cursor(obj) -> bool:
    """Check if an object is a cursor (exposes the cursor capability flag)."""
    return getattr(obj, "is_iterator", False) is True and hasattr(obj, "__lshift__")


def make_projection(proj) -> Callable[[Any], Any]:
    """Normalize a projection to a unary callable."""
    if callable(proj):
        return proj
    if hasattr(proj, "__getitem__"):
        return proj.__getitem__
    raise TypeError(
        f"Projection must be callable or support indexing, got {type(proj).__name__}"
    )


def make_predicate(pred, allow_equality: bool = False) -> Callable[[Any], bool]:
    """
    Normalize a predicate to a unary callable returning bool.

    Args:
        pred: Callable, container, or (with allow_equality) a plain value
        allow_equality: Compare plain values with ``==`` instead of rejecting them
    """
    if pred is identity:
        return bool
    if callable(pred):
        return lambda value: bool(pred(value))
    if hasattr(pred, "__contains__"):
        return pred.__contains__
    if allow_equality:
        return lambda value: pred == value
    raise TypeError(
        f"Predicate must be callable or a container, got {type(pred).__name__}"
    )


def get(proj, value):
    """Apply a projection in any supported form to `value`."""
    return make_projection(proj)(value)


def has(pred, value) -> bool:
    """Test `value` against a predicate given as a callable or container."""
    return make_predicate(pred)(value)


def match(pred, value) -> bool:
    """Like `has`, but plain values match by equality."""
    return make_predicate(pred, allow_equality=True)(value)


def make_pusher(dest) -> Callable[[Any], None]:
    """
    Normalize a sink destination to a unary callable.

    Cursor destinations are copied so that pushing advances the copy, not
    the caller's cursor.
    """
    if _is_cursor(dest):
        target = dest.iter()

        def push(value):
            target << value

        return push
    for method in ("append", "add"):
        bound = getattr(dest, method, None)
        if callable(bound):
            return bound
    if callable(dest):
        return dest
    raise TypeError(
        f"Sink destination must be a cursor, support append/add, or be callable, "
        f"got {type(dest).__name__}"
    )


__all__ = [
    "Pair",
    "get",
    "has",
    "identity",
    "make_predicate",
    "make_projection",
    "make_pusher",
    "match",
]
