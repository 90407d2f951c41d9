# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Base class for cursors.
"""

from __future__ import annotations

import copy as _copy
import inspect
import numbers
import operator
from typing import Any, Hashable, Iterator

from .. import _config
from .._caching import per_class
from .._errors import CapabilityError, ExhaustedCursorError
from ..op import make_pusher

# Each category is satisfied by overriding any one of its primitives.
_REQUIRED_CATEGORIES = {
    "termination": ("_more", "_len"),
    "access": ("_item", "_item_at"),
    "advance": ("_next", "_forward"),
}
_RETREAT_PRIMITIVES = ("_prev", "_rewind")
_PRIMITIVES = (
    "_more",
    "_len",
    "_item",
    "_item_at",
    "_next",
    "_forward",
    "_prev",
    "_rewind",
    "_assign",
    "_position",
    "_end",
)


@per_class
def implemented_primitives(cls) -> frozenset[str]:
    """Return the names of the primitives `cls` overrides."""
    return frozenset(
        name for name in _PRIMITIVES if getattr(cls, name) is not getattr(CursorBase, name)
    )


@per_class
def _slot_names(cls) -> tuple[str, ...]:
    """Return every slot declared along the MRO of `cls`."""
    names = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return tuple(names)


def _derive_flag(cls, flag: str, primitives: frozenset[str], names) -> None:
    """Set a class-level flag from the primitives unless a property or the class declares it."""
    if flag in cls.__dict__ or isinstance(inspect.getattr_static(cls, flag), property):
        return
    setattr(cls, flag, bool(primitives.intersection(names)))


class CursorBase:
    """
    Base class for cursors.

    Subclasses must implement at least one primitive per category:
    - termination: _more() -> bool, or _len() -> int
    - access: _item() -> item, or _item_at(i) -> item
    - advance: _next() -> None, or _forward(n) -> None

    Optionally override:
    - _prev() / _rewind(n) to make the cursor bidirectional
    - _assign(value) to make the cursor writable
    - _position() -> Hashable to compare cursors by position
    - _end() if the end cursor can be computed faster than the default

    Everything else (dereference, indexing, stepping, ranged iteration,
    push/pull chaining) is synthesized from the primitives. A class with a
    class-level `is_random_access = True` must also implement _len() and one
    of _item_at() / _forward(), all in O(1).

    The check runs when the class statement executes. Pass `abstract=True`
    in the class statement for intermediate base classes.
    """

    __slots__ = ()

    is_iterator = True
    is_random_access = False
    is_sorted = False
    # derived per class from the implemented primitives
    is_bidirectional = False
    is_writable = False
    item_type: Any = object

    def __init_subclass__(cls, abstract: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        primitives = implemented_primitives(cls)
        _derive_flag(cls, "is_bidirectional", primitives, _RETREAT_PRIMITIVES)
        _derive_flag(cls, "is_writable", primitives, ("_assign",))

        if abstract:
            return

        missing = [
            f"{category} ({' or '.join(names)})"
            for category, names in _REQUIRED_CATEGORIES.items()
            if not primitives.intersection(names)
        ]
        if missing:
            raise CapabilityError(
                f"{cls.__name__} must implement a primitive for: {', '.join(missing)}"
            )

        if inspect.getattr_static(cls, "is_random_access") is True and (
            "_len" not in primitives
            or not primitives.intersection(("_item_at", "_forward"))
        ):
            raise CapabilityError(
                f"{cls.__name__} is random access and must implement _len() "
                f"and one of _item_at() / _forward()"
            )

    # Fallback primitives. Each is only reached when the subclass overrides
    # its counterpart, so they never recurse into one another.

    def _item(self):
        return self._item_at(0)

    def _item_at(self, i: int):
        c = self.copy()
        c._forward(i)
        return c._item()

    def _more(self) -> bool:
        return self._len() > 0

    def _len(self) -> int:
        c = self.copy()
        n = 0
        while c._more():
            c._next()
            n += 1
        return n

    def _next(self) -> None:
        self._forward(1)

    def _forward(self, n: int) -> None:
        for _ in range(n):
            self._next()

    def _prev(self) -> None:
        self._require("bidirectional", self.is_bidirectional, "retreat")
        self._rewind(1)

    def _rewind(self, n: int) -> None:
        self._require("bidirectional", self.is_bidirectional, "retreat")
        for _ in range(n):
            self._prev()

    def _assign(self, value) -> None:
        raise CapabilityError(f"{type(self).__name__} is read-only")

    def _position(self) -> Hashable | None:
        return None

    def _end(self) -> "CursorBase":
        if self.is_random_access:
            return self + self._len()
        # single pass over a copy
        c = self.copy()
        while c._more():
            c._next()
        return c

    # Helpers

    def _require(self, capability: str, enabled: bool, operation: str) -> None:
        if not enabled:
            raise CapabilityError(
                f"Cannot {operation}: {type(self).__name__} is not {capability}"
            )

    def _check_more(self, operation: str) -> None:
        if _config.checked_access() and not self._more():
            raise ExhaustedCursorError(
                f"Cannot {operation} an exhausted {type(self).__name__}"
            )

    # Copying

    def copy(self) -> "CursorBase":
        """Return a copy at the same position; wrapped cursors are copied too."""
        clone = _copy.copy(self)
        for name in _slot_names(type(self)):
            value = getattr(clone, name, None)
            if isinstance(value, CursorBase):
                setattr(clone, name, value.copy())
        state = getattr(clone, "__dict__", None)
        if state:
            for name, value in list(state.items()):
                if isinstance(value, CursorBase):
                    state[name] = value.copy()
        return clone

    def iter(self) -> "CursorBase":
        return self.copy()

    def begin(self) -> "CursorBase":
        return self.copy()

    def end(self) -> "CursorBase":
        """Return the cursor past the last item."""
        return self._end()

    def __pos__(self) -> "CursorBase":
        return self.copy()

    # Termination

    def __bool__(self) -> bool:
        return bool(self._more())

    def __len__(self) -> int:
        return self._len()

    # Access

    @property
    def item(self):
        """The current item. Assigning to it writes through writable cursors."""
        self._check_more("dereference")
        return self._item()

    @item.setter
    def item(self, value) -> None:
        self._require("writable", self.is_writable, "assign")
        self._check_more("assign to")
        self._assign(value)

    def _normalize_index(self, index) -> int:
        self._require("random access", self.is_random_access, "index")
        index = operator.index(index)
        length = self._len() if index < 0 or _config.checked_access() else None
        if index < 0:
            index += length
        if length is not None and not 0 <= index < length:
            raise ExhaustedCursorError(
                f"Index out of range for {type(self).__name__} of length {length}"
            )
        return index

    def __getitem__(self, index):
        return self._item_at(self._normalize_index(index))

    def __setitem__(self, index, value) -> None:
        index = self._normalize_index(index)
        c = self + index
        c.item = value

    # Stepping

    def advance(self) -> "CursorBase":
        """Move to the next item (pre-increment) and return self."""
        self._check_more("advance")
        self._next()
        return self

    def retreat(self) -> "CursorBase":
        """Move to the previous item (pre-decrement) and return self."""
        self._require("bidirectional", self.is_bidirectional, "retreat")
        self._prev()
        return self

    def post_advance(self) -> "CursorBase":
        """Move to the next item (post-increment) and return the prior position."""
        c = self.copy()
        self.advance()
        return c

    def post_retreat(self) -> "CursorBase":
        """Move to the previous item (post-decrement) and return the prior position."""
        c = self.copy()
        self.retreat()
        return c

    def __iadd__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        if n < 0:
            return self.__isub__(-n)
        self._forward(int(n))
        return self

    def __isub__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        if n < 0:
            return self.__iadd__(-n)
        self._require("bidirectional", self.is_bidirectional, "retreat")
        self._rewind(int(n))
        return self

    def __add__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        c = self.copy()
        c += n
        return c

    __radd__ = __add__

    def __sub__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        c = self.copy()
        c -= n
        return c

    # Pull / push chaining

    def pull(self):
        """Return the current item and advance."""
        value = self.item
        self._next()
        return value

    def __rshift__(self, dest) -> "CursorBase":
        """Push the current item into `dest` and advance."""
        value = self.pull()
        if isinstance(dest, CursorBase):
            dest << value
        else:
            make_pusher(dest)(value)
        return self

    def __lshift__(self, value) -> "CursorBase":
        """Overwrite the current item with `value` and advance."""
        self.item = value
        self._next()
        return self

    # Ranged iteration

    def __iter__(self) -> Iterator:
        it = self.copy()
        while it._more():
            yield it._item()
            it._next()

    # Equality

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        key = self._position()
        if key is None:
            return self is other
        return key == other._position()

    __hash__ = None  # cursors are mutable

    def __repr__(self) -> str:
        item_type = getattr(self.item_type, "__name__", repr(self.item_type))
        return f"<{type(self).__name__} item_type={item_type}>"
