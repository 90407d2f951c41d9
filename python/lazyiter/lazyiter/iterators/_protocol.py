# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Cursor protocol for lazyiter.

Describes the cursor surface for type annotations. Every CursorBase subclass
satisfies it. Adaptors and consumers accept only CursorBase instances: an
object that merely has these members is converted with to_cursor() instead.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, runtime_checkable


@runtime_checkable
class CursorProtocol(Protocol):
    """
    Protocol defining the interface for cursors in lazyiter.

    Used for annotations and isinstance() checks; the capability predicates
    require a CursorBase.
    """

    @property
    def is_iterator(self) -> bool:
        """Always True for cursors."""
        ...

    @property
    def is_random_access(self) -> bool:
        """Return True if indexing and len() are O(1)."""
        ...

    @property
    def is_sorted(self) -> bool:
        """Return True if items are produced in non-decreasing order."""
        ...

    @property
    def item(self) -> Any:
        """Return the current item."""
        ...

    @property
    def item_type(self) -> type:
        """Return the type of the items produced."""
        ...

    def pull(self) -> Any:
        """Return the current item and advance."""
        ...

    def iter(self) -> "CursorProtocol":
        """Return a copy positioned at the same item."""
        ...

    def advance(self) -> "CursorProtocol":
        """Move to the next item and return self."""
        ...

    def __bool__(self) -> bool:
        """Return True if there are more items."""
        ...

    def __len__(self) -> int:
        """Return the number of remaining items."""
        ...

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the remaining items of a copy."""
        ...
