# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

EPS: float = 1e-12


def scale_tol(A) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    cells = A.to_numpy() if hasattr(A, "to_numpy") else np.asarray(A, dtype=float)
    if cells.size == 0:
        return EPS
    return EPS * max(1.0, float(np.linalg.norm(cells, ord=np.inf)))


def random_matrix(rows: int, columns: int, seed=None):
    """Matrix of standard normal entries."""
    from .matrix import Matrix

    rng = np.random.default_rng(seed)
    return Matrix(rng.standard_normal((rows, columns)))


def random_nonsingular_upper(n, low=-100, high=100, seed=None):
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix of shape (n, n)
    """
    from .matrix import Matrix

    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    # enforce upper-triangular
    U = np.triu(U)
    # replace any accidental zeros on the diagonal
    diag = rng.uniform(low if low != 0 else 1, high, size=n)
    diag[diag == 0] = 1.0
    U[np.diag_indices(n)] = diag
    return Matrix(U)
