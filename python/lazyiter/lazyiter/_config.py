# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""
Runtime configuration for lazyiter.

Checked mode guards every dereference and advance with a "has more" test and
raises ExhaustedCursorError on violation. It is off by default; enable it with
the LAZYITER_CHECKED environment variable or at runtime.
"""

from __future__ import annotations

import contextlib
import os
import warnings
from typing import Iterator, Optional

ENV_CHECKED = "LAZYITER_CHECKED"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def read_flag(name: str, environ: Optional[dict] = None) -> bool:
    """
    Read a boolean flag from the environment.

    Unrecognized values emit a RuntimeWarning and read as False.
    """
    if environ is None:
        environ = os.environ
    raw = environ.get(name)
    if raw is None:
        return False

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value not in _FALSE_VALUES:
        warnings.warn(
            f"Ignoring unrecognized value {raw!r} for {name}; "
            f"expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES - {''})}",
            RuntimeWarning,
            stacklevel=2,
        )
    return False


# this global variable controls whether cursor accesses are checked against
# exhaustion. Meant for debugging and testing; the unchecked path is faster.
_checked: bool = read_flag(ENV_CHECKED)


def checked_access() -> bool:
    """Return True if checked mode is enabled."""
    return _checked


def set_checked_access(enabled: bool) -> None:
    """Enable or disable checked mode for the whole process."""
    global _checked
    _checked = bool(enabled)


@contextlib.contextmanager
def checked(enabled: bool = True) -> Iterator[None]:
    """Temporarily enable (or disable) checked mode."""
    global _checked
    previous = _checked
    _checked = bool(enabled)
    try:
        yield
    finally:
        _checked = previous
