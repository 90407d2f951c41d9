# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Consumers that push items into destinations."""

from __future__ import annotations

from .._pipeline import PipelineFactory
from ..op import make_pusher


class Sink(PipelineFactory):
    """
    Push every item into a destination: ``source | Sink(dest)``.

    The destination may be a writable cursor (written through and advanced,
    starting from a copy of `dest`), an object with ``append`` or ``add``, or
    a callable. A cursor destination must have room for every item.

    Returns:
        The destination
    """

    __slots__ = ["dest"]

    name = "Sink"

    def __init__(self, dest):
        make_pusher(dest)  # validate eagerly
        self.dest = dest

    def _apply(self, cursor):
        push = make_pusher(self.dest)
        for item in cursor:
            push(item)
        return self.dest


class Drain(PipelineFactory):
    """Consume every item and discard it: ``source | Drain()``."""

    __slots__ = ()

    name = "Drain"

    def _apply(self, cursor) -> None:
        for _ in cursor:
            pass


class Unzip(PipelineFactory):
    """
    Split pairs into two destinations: ``pairs | Unzip(firsts, seconds)``.

    Each item must unpack into two values; the first goes to `first_dest`,
    the second to `second_dest`. Destinations take the same forms as for
    Sink.

    Returns:
        ``(first_dest, second_dest)``
    """

    __slots__ = ["first_dest", "second_dest"]

    name = "Unzip"

    def __init__(self, first_dest, second_dest):
        make_pusher(first_dest)
        make_pusher(second_dest)
        self.first_dest = first_dest
        self.second_dest = second_dest

    def _apply(self, cursor):
        push_first = make_pusher(self.first_dest)
        push_second = make_pusher(self.second_dest)
        for first, second in cursor:
            push_first(first)
            push_second(second)
        return (self.first_dest, self.second_dest)
