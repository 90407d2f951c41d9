# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

from __future__ import annotations

from typing import Any, Callable

from .._pipeline import PipelineFactory


class Reduce(PipelineFactory):
    """
    Left fold: ``source | Reduce(combine, init)``.

    Computes ``combine(...combine(combine(init, x0), x1)..., xn)`` over the
    items of the source and returns the result. An empty source returns
    `init`.

    Args:
        combine: Binary callable taking the accumulator and an item
        init: Initial accumulator value
    """

    __slots__ = ["combine", "init"]

    name = "Reduce"

    def __init__(self, combine: Callable[[Any, Any], Any], init: Any):
        if not callable(combine):
            raise TypeError(
                f"Reduce combine must be callable, got {type(combine).__name__}"
            )
        self.combine = combine
        self.init = init

    def _apply(self, cursor):
        value = self.init
        combine = self.combine
        for item in cursor:
            value = combine(value, item)
        return value

    def __repr__(self) -> str:
        return f"Reduce({self.combine!r}, {self.init!r})"
