# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Pipeline composition.

A pipeline factory holds the parameters of an adaptor or consumer (a
projection, a predicate, a destination) and is bound to a cursor in one of
two ways:

    source | factory     # source may be any iterable
    factory(cursor)      # cursor must already be a cursor

Binding never consumes the caller's object: the factory works on a copy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._errors import CapabilityError

if TYPE_CHECKING:
    from .iterators._base import CursorBase


class PipelineFactory:
    """
    Base class for objects placed on the right-hand side of ``|``.

    Subclasses implement `_apply(cursor)`, which receives a private copy of
    the bound cursor and returns the adapted cursor or the consumer's result.
    """

    __slots__ = ()

    # Make `ndarray | factory` defer to __ror__ instead of broadcasting.
    __array_ufunc__ = None

    #: name used in capability error messages
    name = "pipeline"

    def _apply(self, cursor: "CursorBase"):
        raise NotImplementedError

    def __call__(self, cursor: "CursorBase"):
        from .iterators._predicates import require_iterator

        require_iterator(cursor, self.name)
        return self._apply(cursor.iter())

    def __ror__(self, source):
        from .iterators._convert import to_cursor
        from .iterators._predicates import is_iterable

        if not is_iterable(source):
            raise CapabilityError(
                f"{self.name} requires an iterable on the left of '|', "
                f"got {type(source).__name__}"
            )
        return self._apply(to_cursor(source))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
