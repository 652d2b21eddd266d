# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densematrix
===========

A small dense matrix type with flexible addressing, auto-growth on
write, elementary row/column algebra and Gaussian elimination.

Public API
~~~~~~~~~~
- The `Matrix` type
    - constructors `Matrix(rows)`, `full`, `zeros`, `identity`,
      `diagonal`, `row_vector`, `column_vector`
    - cell / block / row / column / diagonal accessors
- Arithmetic
    - `add`, `subtract`, `negate`, `scale`, `divide`, `multiply`,
      `hadamard`
- Row / column operations
    - `swap_rows`, `add_row_into`, `scale_row`, ... and their column
      counterparts
- Linear systems
    - `gaussian_elimination`, `back_substitute`, `gaussian_solve`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import densematrix as dm
>>> A = dm.Matrix([[1, 2, 1], [2, 6, 1], [1, 1, 4]])
>>> b = dm.Matrix([[2], [7], [3]])
>>> U, c = dm.gaussian_elimination(A, b)
>>> U
Matrix([[1.0, 2.0, 1.0], [0.0, 2.0, -1.0], [0.0, 0.0, 2.5]])
"""

from importlib.metadata import version as _pkg_version

from .arithmetic import (
    add,
    divide,
    hadamard,
    multiply,
    negate,
    scale,
    subtract,
)
from .elimination import (
    PIVOTING_STRATEGIES,
    back_substitute,
    gaussian_elimination,
    gaussian_solve,
)
from .indexing import normalize_indices

# ---------------------------------------------------------------------
# Re-export the high-level names users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .matrix import Matrix
from .row_ops import (
    add_column_into,
    add_row_into,
    multiply_column_pairwise,
    multiply_row_pairwise,
    scale_column,
    scale_row,
    subtract_column_into,
    subtract_row_into,
    subtract_scaled_row_into,
    swap_columns,
    swap_rows,
)
from .utils import EPS, random_matrix, random_nonsingular_upper, scale_tol

__all__ = [
    "Matrix",
    "normalize_indices",
    "add",
    "subtract",
    "negate",
    "scale",
    "divide",
    "multiply",
    "hadamard",
    "swap_rows",
    "swap_columns",
    "add_row_into",
    "subtract_row_into",
    "add_column_into",
    "subtract_column_into",
    "scale_row",
    "scale_column",
    "multiply_row_pairwise",
    "multiply_column_pairwise",
    "subtract_scaled_row_into",
    "gaussian_elimination",
    "back_substitute",
    "gaussian_solve",
    "PIVOTING_STRATEGIES",
    "EPS",
    "scale_tol",
    "random_matrix",
    "random_nonsingular_upper",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densematrix”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
