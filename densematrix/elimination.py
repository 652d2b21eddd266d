# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Optional, Tuple

import numpy as np

from .matrix import Matrix
from .row_ops import subtract_scaled_row_into, swap_rows
from .utils import scale_tol

logger = logging.getLogger(__name__)

# "none"    never exchange rows, a zero pivot yields inf/nan
# "nonzero" exchange only when the pivot is exactly zero
# "partial" always move the largest magnitude candidate onto the diagonal
PIVOTING_STRATEGIES = ("none", "nonzero", "partial")
DEFAULT_PIVOTING = "nonzero"


def _choose_pivot_row(U: Matrix, col: int, pivoting: str) -> Optional[int]:
    """
    Row that should hold the pivot of column `col`, or None when the
    column is zero on and below the diagonal.
    """
    if pivoting == "none":
        return col

    candidates = U.get_block(range(col, U.rows), [col]).to_numpy()[:, 0]
    if pivoting == "nonzero" and candidates[0] != 0:
        return col

    # The computation is more stable with the largest possible pivot,
    # argmax keeps the current row on ties.
    magnitudes = np.abs(candidates)
    max_idx = int(magnitudes.argmax())
    if magnitudes[max_idx] == 0:
        return None
    return col + max_idx


def gaussian_elimination(
    coefficients: Matrix,
    rhs: Matrix,
    pivoting: str = DEFAULT_PIVOTING,
) -> Tuple[Matrix, Matrix]:
    """
    Reduce the augmented system [coefficients | rhs] to upper-triangular
    form. No back substitution is done.

    Parameters
    ----------
    coefficients : Matrix        (m, n), m >= n
    rhs          : Matrix        (m, k)
        Right-hand side(s); receives the same row operations.
    pivoting : str
        One of PIVOTING_STRATEGIES.

    Returns
    -------
    upper       : Matrix          (m, n)
        Zero below the main diagonal.
    transformed : Matrix          (m, k)
        rhs after identical row operations.

    Raises
    ------
    ValueError : on an unknown strategy, fewer rows than columns, or a
        rhs whose row count differs from the coefficients'.
    """
    if pivoting not in PIVOTING_STRATEGIES:
        raise ValueError(
            f"unknown pivoting strategy {pivoting!r}, expected one of {PIVOTING_STRATEGIES}"
        )
    m, n = coefficients.shape
    if m < n:
        raise ValueError(
            f"system has fewer equations ({m}) than unknowns ({n}); rows must be >= columns"
        )
    if rhs.rows != m:
        raise ValueError(
            f"rhs has {rhs.rows} rows but the coefficient matrix has {m}"
        )

    # private copies, every row operation below updates them in place
    U = coefficients.copy()
    c = rhs.copy()

    # Entering iteration `col`, columns [0, col) are zero below the diagonal.
    for col in range(min(m - 1, n)):
        pivot_row = _choose_pivot_row(U, col, pivoting)
        if pivot_row is None:
            logger.debug(f"column {col} is zero on and below the diagonal, skipping")
            continue

        # If the pivot row is not our current row, the same
        # exchange must be applied to the rhs as well
        if pivot_row != col:
            logger.debug(f"swapping rows {col} and {pivot_row} for pivot in column {col}")
            swap_rows(U, col, pivot_row, in_place=True)
            swap_rows(c, col, pivot_row, in_place=True)

        pivot = np.float64(U.get(col, col))
        if pivot == 0:
            logger.warning(
                f"zero pivot in column {col} with pivoting={pivoting!r}; "
                "result will contain inf/nan"
            )
        exact_zero = bool(np.isfinite(pivot)) and pivot != 0

        # Eliminate entries below the pivot
        for row in range(col + 1, m):
            with np.errstate(divide="ignore", invalid="ignore"):
                factor = np.float64(U.get(row, col)) / pivot
            subtract_scaled_row_into(U, row, col, factor, in_place=True)
            subtract_scaled_row_into(c, row, col, factor, in_place=True)
            if exact_zero:
                U.set(row, col, 0.0)

    return U, c


def back_substitute(upper: Matrix, rhs: Matrix) -> Matrix:
    """
    Parameters
    ----------
    upper : (m, n) Matrix, m >= n
        Upper-triangular matrix (output of gaussian_elimination).
    rhs : (m, k) Matrix
        RHS after identical row operations.
    Returns
    -------
    x : (n, k) Matrix
        Solution(s) of upper @ x = rhs.
    Raises
    ------
    ValueError : if the system is inconsistent or rank-deficient.
    """
    m, n = upper.shape
    if m < n:
        raise ValueError(f"upper must have at least as many rows as columns, got {upper.shape}")
    if rhs.rows != m:
        raise ValueError(f"rhs has {rhs.rows} rows but upper has {m}")

    U = upper.to_numpy()
    c = rhs.to_numpy()
    k = rhs.columns
    x = np.zeros((n, k), dtype=float)
    tol = scale_tol(upper)

    # rows below the square part must already be satisfied
    for i in range(n, m):
        if np.any(np.abs(c[i]) > tol):
            raise ValueError("inconsistent system (no solution)")

    for i in reversed(range(n)):
        pivot = U[i, i]
        s = c[i] - U[i, i + 1 : n] @ x[i + 1 :]
        if abs(pivot) <= tol:
            if np.any(np.abs(s) > tol):
                raise ValueError("inconsistent system (no solution)")
            else:
                raise ValueError("rank deficient (infinitely many solutions)")
        x[i] = s / pivot

    return Matrix(x)


def gaussian_solve(
    coefficients: Matrix, rhs: Matrix, pivoting: str = DEFAULT_PIVOTING
) -> Matrix:
    """Solve coefficients @ x = rhs by elimination and back substitution."""
    U, c = gaussian_elimination(coefficients, rhs, pivoting=pivoting)
    logger.debug(f"\nUpper triangle:\n{U}\nTransformed rhs:\n{c}")
    return back_substitute(U, c)
