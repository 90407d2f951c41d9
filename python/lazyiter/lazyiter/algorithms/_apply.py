# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

from __future__ import annotations

from typing import Any, Callable

from .._pipeline import PipelineFactory


class Apply(PipelineFactory):
    """Call `func` on every item for its side effects: ``source | Apply(func)``."""

    __slots__ = ["func"]

    name = "Apply"

    def __init__(self, func: Callable[[Any], Any]):
        if not callable(func):
            raise TypeError(f"Apply requires a callable, got {type(func).__name__}")
        self.func = func

    def _apply(self, cursor) -> None:
        func = self.func
        for item in cursor:
            func(item)
