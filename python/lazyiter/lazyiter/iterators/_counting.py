# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""IotaCursor implementation."""

from __future__ import annotations

import numbers

import numpy as np

from ._base import CursorBase


def _check_integer(name: str, value) -> None:
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (numbers.Integral, np.integer)
    ):
        raise TypeError(f"Iota {name} must be an integer, got {type(value).__name__}")


def _end_for(start: int, end: int, step: int) -> int:
    """Return the first value of the progression at or past `end`."""
    if (end - start) * step <= 0:
        # empty range: end is behind start for this step direction
        return start
    res = (end - start) % step
    if not res:
        return end
    return end + step - res


class IotaCursor(CursorBase):
    """
    Cursor representing the arithmetic progression start, start+step, ...

    The progression stops before the first value reaching `end` in the
    direction of `step`. Items keep the type of `start`, so a numpy scalar
    start produces numpy scalars.

    Always random access and always flagged sorted, including for negative
    steps.

    Stepping is clamped to the progression: advancing past the end stops at
    the end, rewinding past `start` stops at `start`.
    """

    __slots__ = ["_start", "_value", "_stop", "_step", "_cast"]

    is_random_access = True
    is_sorted = True

    def __init__(self, start, end, step=1):
        """
        Create an iota cursor.

        Args:
            start: First value
            end: Exclusive bound
            step: Non-zero increment; negative steps count down

        Raises:
            TypeError: If an argument is not an integer
            ValueError: If `step` is zero
        """
        _check_integer("start", start)
        _check_integer("end", end)
        _check_integer("step", step)
        if step == 0:
            raise ValueError("Iota step must not be zero")

        self._cast = type(start) if isinstance(start, np.integer) else None
        start, end, step = int(start), int(end), int(step)
        self._start = start
        self._value = start
        self._step = step
        self._stop = _end_for(start, end, step)

    @property
    def item_type(self) -> type:
        return self._cast or int

    @property
    def step(self) -> int:
        return self._step

    def _clamp(self, value: int) -> int:
        low, high = sorted((self._start, self._stop))
        return min(max(value, low), high)

    def _wrap(self, value: int):
        return value if self._cast is None else self._cast(value)

    def _item(self):
        return self._wrap(self._value)

    def _item_at(self, j: int):
        return self._wrap(self._value + j * self._step)

    def _more(self) -> bool:
        return self._value != self._stop

    def _len(self) -> int:
        return (self._stop - self._value) // self._step

    def _next(self) -> None:
        self._value = self._clamp(self._value + self._step)

    def _forward(self, n: int) -> None:
        self._value = self._clamp(self._value + n * self._step)

    def _prev(self) -> None:
        self._value = self._clamp(self._value - self._step)

    def _rewind(self, n: int) -> None:
        self._value = self._clamp(self._value - n * self._step)

    def _position(self):
        return (self._value, self._stop, self._step)

    def __repr__(self) -> str:
        return f"IotaCursor(value={self._value}, end={self._stop}, step={self._step})"
