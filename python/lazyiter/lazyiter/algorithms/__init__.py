# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Terminal consumers and bulk helpers."""

from ._apply import Apply
from ._bulk import copy, fill
from ._quantifiers import All, Any, NoneOf, all_of, any_of, none_of
from ._reduce import Reduce
from ._search import BSearch
from ._sink import Drain, Sink, Unzip

__all__ = [
    "All",
    "Any",
    "Apply",
    "BSearch",
    "Drain",
    "NoneOf",
    "Reduce",
    "Sink",
    "Unzip",
    "all_of",
    "any_of",
    "copy",
    "fill",
    "none_of",
]
