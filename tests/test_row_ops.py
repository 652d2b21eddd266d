# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np

from densematrix.matrix import Matrix
from densematrix.row_ops import (
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
from densematrix.utils import random_matrix


def _square():
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def test_swap_rows():
    assert swap_rows(_square(), 0, 2) == Matrix([[7, 8, 9], [4, 5, 6], [1, 2, 3]])
    assert swap_rows(_square(), 1, 1) == _square()


def test_swap_columns():
    assert swap_columns(_square(), 0, 1) == Matrix([[2, 1, 3], [5, 4, 6], [8, 7, 9]])


def test_swap_past_edge_grows():
    m = swap_rows(Matrix([[1, 2], [3, 4]]), 0, 3)
    assert m == Matrix([[0, 0], [3, 4], [0, 0], [1, 2]])


def test_add_and_subtract_rows():
    assert add_row_into(_square(), 0, 2) == Matrix([[8, 10, 12], [4, 5, 6], [7, 8, 9]])
    assert subtract_row_into(_square(), 2, 1) == Matrix([[1, 2, 3], [4, 5, 6], [3, 3, 3]])


def test_add_and_subtract_columns():
    assert add_column_into(_square(), 1, 0) == Matrix([[1, 3, 3], [4, 9, 6], [7, 15, 9]])
    assert subtract_column_into(_square(), 2, 0) == Matrix(
        [[1, 2, 2], [4, 5, 2], [7, 8, 2]]
    )


def test_scale_row_and_column():
    assert scale_row(_square(), 1, 2) == Matrix([[1, 2, 3], [8, 10, 12], [7, 8, 9]])
    assert scale_column(_square(), 2, -1) == Matrix([[1, 2, -3], [4, 5, -6], [7, 8, -9]])


def test_pairwise_products():
    assert multiply_row_pairwise(_square(), 0, 1) == Matrix(
        [[4, 10, 18], [4, 5, 6], [7, 8, 9]]
    )
    assert multiply_column_pairwise(_square(), 0, 2) == Matrix(
        [[3, 2, 3], [24, 5, 6], [63, 8, 9]]
    )


def test_subtract_scaled_row_into():
    m = Matrix([[1, 2, 1], [2, 6, 1], [1, 1, 4]])
    result = subtract_scaled_row_into(m, 1, 0, 2.0)
    assert result == Matrix([[1, 2, 1], [0, 2, -1], [1, 1, 4]])


def test_row_operations_are_pure():
    m = _square()
    operations = [
        lambda: swap_rows(m, 0, 1),
        lambda: swap_columns(m, 0, 1),
        lambda: add_row_into(m, 0, 1),
        lambda: subtract_row_into(m, 0, 1),
        lambda: add_column_into(m, 0, 1),
        lambda: subtract_column_into(m, 0, 1),
        lambda: scale_row(m, 0, 3),
        lambda: scale_column(m, 0, 3),
        lambda: multiply_row_pairwise(m, 0, 1),
        lambda: multiply_column_pairwise(m, 0, 1),
        lambda: subtract_scaled_row_into(m, 0, 1, 0.5),
    ]
    for op in operations:
        op()
        assert m == _square()


def test_row_operations_keep_shape():
    A = random_matrix(4, 5, seed=2)
    for result in (
        swap_rows(A, 0, 3),
        add_row_into(A, 1, 2),
        scale_column(A, 4, 0.5),
        subtract_scaled_row_into(A, 3, 0, np.float64(1.5)),
    ):
        assert result.shape == A.shape
        assert all(len(row) == A.columns for row in result.tolist())


def test_in_place_row_operations():
    m = _square()
    result = swap_rows(m, 0, 2, in_place=True)
    assert result is m
    assert m == Matrix([[7, 8, 9], [4, 5, 6], [1, 2, 3]])

    result = subtract_scaled_row_into(m, 1, 2, 4.0, in_place=True)
    assert result is m
    assert m == Matrix([[7, 8, 9], [0, -3, -6], [1, 2, 3]])
