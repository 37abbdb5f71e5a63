"""
Useful general functions.
"""

from __future__ import annotations

import operator
from collections import abc

from ._typing import Scalar, Vector


def flatten_rows(
    elements: abc.Iterable[abc.Iterable[Scalar]],
) -> tuple[int, int, list[Scalar]]:
    """Flatten nested rows into (rows, columns, row-major values).

    The number of columns is taken from the first row only.
    """

    nested = [list(row) for row in elements]
    rows = len(nested)
    columns = len(nested[0]) if nested else 0
    return rows, columns, [value for row in nested for value in row]


def format_vector(values: Vector | abc.Sequence[Scalar]) -> str:
    return str([float(value) for value in values])


def check_dimensions(rows: int, columns: int) -> tuple[int, int]:
    """Validate a matrix shape, returning it as plain integers."""

    rows = operator.index(rows)
    columns = operator.index(columns)
    if rows < 0 or columns < 0:
        raise ValueError(
            f"Matrix dimensions must be non-negative (got {rows}x{columns})"
        )
    return rows, columns
