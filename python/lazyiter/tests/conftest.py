# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import pytest

from lazyiter import checked


@pytest.fixture(autouse=True)
def unchecked_mode():
    # tests opt in to checked mode explicitly, whatever LAZYITER_CHECKED says
    with checked(False):
        yield


@pytest.fixture
def checked_mode():
    with checked(True):
        yield


@pytest.fixture
def recorder():
    """A projection that records every item it is called with."""
    seen = []

    def record(x):
        seen.append(x)
        return x

    record.seen = seen
    return record
