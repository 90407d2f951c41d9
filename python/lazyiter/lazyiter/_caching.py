# Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. ALL RIGHTS RESERVED.
#
# SPDX-License-Identifier: Apache-2.0 WITH LLVM-exception

import functools


def cache_with_key(key):
    """
    Cache the result of `func`, using the function `key` to compute
    the key for cache lookup. `key` receives all arguments passed to
    `func`.

    Used to resolve per-class cursor metadata (implemented primitives,
    copyable fields) exactly once per class.
    """

    def deco(func):
        cache = {}

        @functools.wraps(func)
        def inner(*args, **kwargs):
            cache_key = key(*args, **kwargs)
            if cache_key not in cache:
                result = func(*args, **kwargs)
                cache[cache_key] = result
            # `cache_key` *must* be in `cache`, use `.get()`
            # as it is faster:
            return cache.get(cache_key)

        inner.cache_clear = cache.clear
        return inner

    return deco


def per_class(func):
    """Cache `func(cls)` keyed on the class object itself."""
    return cache_with_key(lambda cls: cls)(func)
