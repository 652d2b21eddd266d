# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense, auto-growing matrix of float64 cells.

Reading outside the populated area returns 0.0, writing outside it grows
the matrix with zero filled rows and columns. Every range form is turned
into an explicit index list by `normalize_indices` before any cell is
touched.
"""

import logging
import numbers
from typing import List, Optional, Sequence, Tuple

import numpy as np

from . import arithmetic
from .indexing import as_index, is_scalar_index, normalize_indices
from .utils import EPS

logger = logging.getLogger(__name__)


def _as_cells(data) -> np.ndarray:
    if isinstance(data, Matrix):
        return data.to_numpy()
    try:
        cells = np.array(data, dtype=float)
    except (TypeError, ValueError) as e:
        raise ValueError(
            "matrix data must be a rectangular sequence of rows of numbers"
        ) from e
    if cells.ndim == 1 and cells.size == 0:
        cells = cells.reshape(0, 0)
    if cells.ndim != 2:
        raise ValueError(f"matrix data must be 2-D, got {cells.ndim}-D")
    return cells


def _check_unique(indices: List[int], axis: str) -> None:
    # a repeated target would be written twice and read back inconsistently
    if len(set(indices)) != len(indices):
        raise ValueError(f"cannot write through repeated {axis} indices {indices}")


class Matrix:
    """
    A dense matrix with value semantics.

    Parameters
    ----------
    data : nested sequence | np.ndarray | Matrix | None
        Rows of the matrix, copied on construction. ``None`` gives the
        empty 0x0 matrix.

    Example
    -------
    >>> m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    >>> m[1:3, 1]
    Matrix([[5.0], [8.0]])
    >>> m[5, 5] = 9
    >>> m.shape
    (6, 6)
    """

    # Keeps numpy scalars on the left of an operator from broadcasting
    # over the matrix, Python then falls back to our reflected methods.
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, data=None):
        if data is None:
            self._set_cells(np.zeros((0, 0)))
        else:
            self._set_cells(_as_cells(data))

    def _set_cells(self, cells: np.ndarray) -> None:
        # columns are derived from the first row, no rows means no columns
        if cells.shape[0] == 0:
            cells = np.zeros((0, 0))
        self._cells = cells

    @classmethod
    def _from_cells(cls, cells: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m._set_cells(cells)
        return m

    # -----------------------------------------------------------------
    # Constructors
    # -----------------------------------------------------------------
    @classmethod
    def full(cls, rows: int, columns: int, fill: float = 0.0) -> "Matrix":
        """rows x columns matrix with every cell set to `fill`."""
        if rows < 0 or columns < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{columns}")
        return cls._from_cells(np.full((rows, columns), float(fill)))

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        return cls.full(rows, columns, 0.0)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        if n < 0:
            raise ValueError(f"identity size must be non-negative, got {n}")
        return cls._from_cells(np.eye(n))

    @classmethod
    def diagonal(cls, values: Sequence[float]) -> "Matrix":
        """Square matrix with `values` on the main diagonal."""
        return cls._from_cells(np.diag(np.asarray(list(values), dtype=float)))

    @classmethod
    def row_vector(cls, values: Sequence[float]) -> "Matrix":
        return cls._from_cells(np.asarray(list(values), dtype=float).reshape(1, -1))

    @classmethod
    def column_vector(cls, values: Sequence[float]) -> "Matrix":
        return cls._from_cells(np.asarray(list(values), dtype=float).reshape(-1, 1))

    # -----------------------------------------------------------------
    # Storage & shape
    # -----------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def columns(self) -> int:
        return self._cells.shape[1] if self.rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def grow_row(self) -> None:
        """Append a zero filled row of the current column width."""
        self._grow_to(self.rows + 1, self.columns)

    def grow_column(self) -> None:
        """Append a zero to every existing row."""
        self._grow_to(self.rows, self.columns + 1)

    def _grow_to(self, rows: int, columns: int) -> None:
        # One pad instead of repeated appends, same result as calling
        # grow_row / grow_column until the target is reached.
        extra_rows = max(0, rows - self.rows)
        extra_columns = max(0, columns - self.columns)
        if not extra_rows and not extra_columns:
            return
        if self.rows + extra_rows == 0:
            return
        logger.debug(
            "growing matrix from %s to %s",
            self.shape,
            (self.rows + extra_rows, self.columns + extra_columns),
        )
        self._cells = np.pad(self._cells, ((0, extra_rows), (0, extra_columns)))

    # -----------------------------------------------------------------
    # Addressing
    # -----------------------------------------------------------------
    def get(self, row: int, column: int) -> float:
        """Cell value, 0.0 when (row, column) lies outside the matrix."""
        row, column = as_index(row), as_index(column)
        if row < self.rows and column < self.columns:
            return float(self._cells[row, column])
        return 0.0

    def set(self, row: int, column: int, value: float) -> None:
        """Write a cell, growing the matrix first if needed."""
        row, column = as_index(row), as_index(column)
        if not isinstance(value, numbers.Real):
            raise TypeError(f"matrix cells must be real numbers, got {type(value).__name__}")
        self._grow_to(row + 1, column + 1)
        self._cells[row, column] = value

    def get_block(self, row_indices, column_indices) -> "Matrix":
        """
        Sub-matrix whose cell (i, j) is ``get(rows[i], columns[j])``.

        Both selections may be any index key understood by
        `normalize_indices`, open ends close at the current shape.
        """
        rows = np.asarray(normalize_indices(row_indices, self.rows), dtype=np.intp)
        columns = np.asarray(
            normalize_indices(column_indices, self.columns), dtype=np.intp
        )
        block = np.zeros((len(rows), len(columns)))
        row_mask = rows < self.rows
        column_mask = columns < self.columns
        if row_mask.any() and column_mask.any():
            block[np.ix_(row_mask, column_mask)] = self._cells[
                np.ix_(rows[row_mask], columns[column_mask])
            ]
        return Matrix._from_cells(block)

    def set_block(self, row_indices, column_indices, value) -> None:
        """
        Write `value` so that ``value[i, j]`` lands on
        ``(rows[i], columns[j])``.

        Raises
        ------
        ValueError : if the shape of `value` differs from the selection, or
            the selection names the same row or column twice.
        """
        rows = normalize_indices(row_indices, self.rows)
        columns = normalize_indices(column_indices, self.columns)
        _check_unique(rows, "row")
        _check_unique(columns, "column")
        value = value if isinstance(value, Matrix) else Matrix(value)

        expected = (len(rows), len(columns) if rows else 0)
        if value.shape != expected:
            raise ValueError(
                f"value of shape {value.shape} does not fit a selection of shape {expected}"
            )
        if not rows or not columns:
            return

        # snapshot before growing, `value` may be this matrix
        cells = value.to_numpy()
        self._grow_to(max(rows) + 1, max(columns) + 1)
        self._cells[np.ix_(rows, columns)] = cells

    def get_row(self, row: int) -> "Matrix":
        return self.get_block([row], slice(None))

    def set_row(self, row: int, value) -> None:
        self.set_block([row], slice(None), value)

    def get_column(self, column: int) -> "Matrix":
        return self.get_block(slice(None), [column])

    def set_column(self, column: int, value) -> None:
        self.set_block(slice(None), [column], value)

    def get_diagonal(self, key=slice(None)) -> List[float]:
        """Values at (i, i) for every i selected by `key`."""
        bound = min(self.rows, self.columns)
        return [self.get(i, i) for i in normalize_indices(key, bound)]

    def set_diagonal(self, key, values: Sequence[float]) -> None:
        indices = normalize_indices(key, min(self.rows, self.columns))
        _check_unique(indices, "diagonal")
        values = list(values)
        if len(values) != len(indices):
            raise ValueError(
                f"got {len(values)} values for {len(indices)} diagonal entries"
            )
        for i, value in zip(indices, values):
            self.set(i, i, value)

    @staticmethod
    def _split_key(key):
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"matrices take 2 indices, got {len(key)}")
            return key
        return key, slice(None)

    def __getitem__(self, key):
        row_key, column_key = self._split_key(key)
        if is_scalar_index(row_key) and is_scalar_index(column_key):
            return self.get(row_key, column_key)
        return self.get_block(row_key, column_key)

    def __setitem__(self, key, value):
        row_key, column_key = self._split_key(key)
        if is_scalar_index(row_key) and is_scalar_index(column_key):
            self.set(row_key, column_key, value)
        else:
            self.set_block(row_key, column_key, value)

    def __iter__(self):
        for row in range(self.rows):
            yield self.get_row(row)

    # -----------------------------------------------------------------
    # Copies & conversion
    # -----------------------------------------------------------------
    def copy(self) -> "Matrix":
        return Matrix._from_cells(self._cells.copy())

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def to_numpy(self) -> np.ndarray:
        """Copy of the cells as a (rows, columns) float64 array."""
        return self._cells.copy()

    def tolist(self) -> List[List[float]]:
        return self._cells.tolist()

    def transpose(self) -> "Matrix":
        return Matrix._from_cells(self._cells.T.copy())

    def negate(self) -> None:
        """Replace every cell with its additive inverse, in place."""
        np.negative(self._cells, out=self._cells)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.tolist()})"

    # -----------------------------------------------------------------
    # Comparison
    # -----------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def allclose(
        self, other: "Matrix", rtol: float = 1e-8, atol: Optional[float] = None
    ) -> bool:
        """Same shape and equal cells within tolerance."""
        if self.shape != other.shape:
            return False
        atol = EPS if atol is None else atol
        return bool(np.allclose(self._cells, other._cells, rtol=rtol, atol=atol))

    # -----------------------------------------------------------------
    # Arithmetic operators, see arithmetic.py
    # -----------------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.subtract(self, other)

    def __neg__(self):
        return arithmetic.negate(self)

    def __pos__(self):
        return self.copy()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return arithmetic.multiply(self, other)
        if isinstance(other, numbers.Real):
            return arithmetic.scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return arithmetic.scale(self, other)
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.multiply(self, other)

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return arithmetic.divide(self, other)
        return NotImplemented
