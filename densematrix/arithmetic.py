# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementwise and matrix-product arithmetic.

All functions are pure, operands are never modified. Shape mismatches
raise ValueError, numeric degeneracy (x/0, inf-inf, ...) is returned as
inf/NaN without numpy warnings.
"""

import numbers

import numpy as np


def _check_same_shape(lhs, rhs, operation: str) -> None:
    if lhs.shape != rhs.shape:
        raise ValueError(
            f"cannot {operation} matrices of shape {lhs.shape} and {rhs.shape}"
        )


def _check_scalar(scalar) -> np.float64:
    if not isinstance(scalar, numbers.Real):
        raise TypeError(f"expected a real scalar, got {type(scalar).__name__}")
    return np.float64(scalar)


def add(lhs, rhs):
    """Cellwise sum of two matrices of identical shape."""
    _check_same_shape(lhs, rhs, "add")
    with np.errstate(invalid="ignore", over="ignore"):
        return type(lhs)(lhs.to_numpy() + rhs.to_numpy())


def negate(m):
    return type(m)(np.negative(m.to_numpy()))


def subtract(lhs, rhs):
    """lhs + (-rhs)"""
    _check_same_shape(lhs, rhs, "subtract")
    return add(lhs, negate(rhs))


def scale(m, scalar):
    """Multiply every cell by `scalar`."""
    factor = _check_scalar(scalar)
    with np.errstate(invalid="ignore", over="ignore"):
        return type(m)(m.to_numpy() * factor)


def divide(m, scalar):
    """
    scale(m, 1 / scalar)

    Dividing by zero is not an error, the cells become +-inf (or NaN for
    zero cells) as IEEE arithmetic dictates.
    """
    divisor = _check_scalar(scalar)
    with np.errstate(divide="ignore"):
        inverse = np.float64(1.0) / divisor
    return scale(m, inverse)


def hadamard(lhs, rhs):
    """Cellwise product of two matrices of identical shape."""
    _check_same_shape(lhs, rhs, "multiply elementwise")
    with np.errstate(invalid="ignore", over="ignore"):
        return type(lhs)(lhs.to_numpy() * rhs.to_numpy())


def multiply(lhs, rhs):
    """
    Matrix product lhs @ rhs.

    Parameters
    ----------
    lhs : Matrix   (m, n)
    rhs : Matrix   (n, p)

    Returns
    -------
    Matrix (m, p)
        Cell (i, j) is sum_k lhs[i, k] * rhs[k, j], accumulated in
        increasing k so results do not depend on BLAS blocking.
    """
    if lhs.columns != rhs.rows:
        raise ValueError(
            f"cannot multiply {lhs.shape} by {rhs.shape}: "
            f"lhs columns ({lhs.columns}) must equal rhs rows ({rhs.rows})"
        )
    A = lhs.to_numpy()
    B = rhs.to_numpy()
    C = np.zeros((lhs.rows, rhs.columns))
    with np.errstate(invalid="ignore", over="ignore"):
        for k in range(lhs.columns):
            C += np.outer(A[:, k], B[k, :])
    return type(lhs)(C)
