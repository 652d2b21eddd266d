# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Elementary row and column operations.

Every operation returns a new matrix and leaves its input untouched,
unless it is called with in_place=True.
Rows/columns are read and written through the matrix accessors, so an
index past the edge reads as zeros and writing to it grows the result.
"""

from .arithmetic import add, hadamard, scale, subtract


def swap_rows(m, a: int, b: int, in_place: bool = False):
    result = m if in_place else m.copy()
    row_a, row_b = m.get_row(a), m.get_row(b)
    result.set_row(a, row_b)
    result.set_row(b, row_a)
    return result


def swap_columns(m, a: int, b: int):
    result = m.copy()
    column_a, column_b = m.get_column(a), m.get_column(b)
    result.set_column(a, column_b)
    result.set_column(b, column_a)
    return result


def add_row_into(m, target: int, source: int):
    """row[target] += row[source]"""
    result = m.copy()
    result.set_row(target, add(m.get_row(target), m.get_row(source)))
    return result


def subtract_row_into(m, target: int, source: int):
    """row[target] -= row[source]"""
    result = m.copy()
    result.set_row(target, subtract(m.get_row(target), m.get_row(source)))
    return result


def add_column_into(m, target: int, source: int):
    """column[target] += column[source]"""
    result = m.copy()
    result.set_column(target, add(m.get_column(target), m.get_column(source)))
    return result


def subtract_column_into(m, target: int, source: int):
    """column[target] -= column[source]"""
    result = m.copy()
    result.set_column(target, subtract(m.get_column(target), m.get_column(source)))
    return result


def scale_row(m, row: int, scalar: float):
    result = m.copy()
    result.set_row(row, scale(m.get_row(row), scalar))
    return result


def scale_column(m, column: int, scalar: float):
    result = m.copy()
    result.set_column(column, scale(m.get_column(column), scalar))
    return result


def multiply_row_pairwise(m, target: int, source: int):
    """row[target] = row[target] * row[source], cell by cell."""
    result = m.copy()
    result.set_row(target, hadamard(m.get_row(target), m.get_row(source)))
    return result


def multiply_column_pairwise(m, target: int, source: int):
    """column[target] = column[target] * column[source], cell by cell."""
    result = m.copy()
    result.set_column(target, hadamard(m.get_column(target), m.get_column(source)))
    return result


def subtract_scaled_row_into(
    m, target: int, source: int, factor: float, in_place: bool = False
):
    """
    row[target] -= factor * row[source]

    The source row is read once into a temporary, so the source row is
    never rescaled. With in_place=True `m` itself is updated and returned
    instead of a copy.
    """
    pivot_row = m.get_row(source)
    result = m if in_place else m.copy()
    result.set_row(target, subtract(m.get_row(target), scale(pivot_row, factor)))
    return result
