# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

"""Exception types raised by lazyiter."""


class CapabilityError(TypeError):
    """
    A cursor lacks a capability the requested operation needs.

    Raised when a cursor class is defined without a required primitive, and
    when an adaptor or consumer is applied to a cursor that is not random
    access, sorted, bidirectional or writable as required.
    """


class ExhaustedCursorError(IndexError):
    """An exhausted cursor was dereferenced or advanced (checked mode only)."""
