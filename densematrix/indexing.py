# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Index range normalization.

Every accessor on `Matrix` funnels its row and column keys through
`normalize_indices` before touching storage, so reads and writes agree
on which cells a key selects.

Accepted keys
-------------
- ``int``                 a single index
- ``[i, j, ...]``         an explicit ordered list (kept as given)
- ``range(a, b)``         a bounded, possibly stepped, range
- ``slice(a, b)``         ``a:b``, ``a:``, ``:b`` or ``:``
"""

import numbers
from typing import List, Sequence, Union

import numpy as np

IndexKey = Union[int, slice, range, Sequence[int], np.ndarray]


def as_index(value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"matrix indices must be integers, got {type(value).__name__}")
    index = int(value)
    if index < 0:
        raise IndexError(f"negative matrix index {index} is not supported")
    return index


def is_scalar_index(key) -> bool:
    return isinstance(key, numbers.Integral) and not isinstance(key, bool)


def normalize_indices(key: IndexKey, bound: int) -> List[int]:
    """
    Turn any index key into a list of concrete indices.

    Parameters
    ----------
    key : int | slice | range | sequence of int
        The row or column selection.
    bound : int
        Current extent of the axis. Only used to close open slice ends,
        an explicit stop is allowed to run past it.

    Returns
    -------
    list[int]
    """
    if is_scalar_index(key):
        return [as_index(key)]

    if isinstance(key, slice):
        step = 1 if key.step is None else key.step
        if not is_scalar_index(step) or step <= 0:
            raise ValueError("slice step must be positive")
        start = 0 if key.start is None else as_index(key.start)
        stop = bound if key.stop is None else as_index(key.stop)
        return list(range(start, stop, step))

    if isinstance(key, range):
        if key.step < 0:
            raise ValueError("descending ranges are not supported")
        return [as_index(i) for i in key]

    if isinstance(key, np.ndarray):
        if key.ndim != 1:
            raise TypeError("index arrays must be one dimensional")
        return [as_index(i) for i in key.tolist()]

    if isinstance(key, (list, tuple)):
        return [as_index(i) for i in key]

    raise TypeError(f"unsupported index key of type {type(key).__name__}")
