"""
Highlevel objects to hold and operate on dense matrices.
"""

from __future__ import annotations

import logging
import numbers
import operator
from collections import abc
from dataclasses import dataclass
from typing import Any, Self

import numpy as np
import pandas as pd

from . import arithmetic
from ._typing import DTYPE, Array, Scalar, Vector
from .util import check_dimensions, flatten_rows, format_vector

logger = logging.getLogger(__name__)

# bool, signed and unsigned integers, floating point
_NUMERIC_KINDS = "biuf"


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """Dense matrix of floating point values stored in row-major order.

    The shape is fixed at construction, but the content of each cell can be
    overwritten with indexed assignment (``m[row, column] = value``).
    Arithmetic operators always return new matrices, and in-place operators
    rebind the name on the left to the new result.

    Parameters
    ----------
    rows: int
        Number of rows.
    columns: int
        Number of columns.
    values: sequence of float (len=rows * columns)
        Cell values in row-major order, the value at (r, c)
        is found at index ``r * columns + c``. The sequence is copied.
    """

    rows: int
    columns: int
    values: Vector

    # Keep numpy scalars from broadcasting over a Matrix in binary operations.
    __array_ufunc__ = None

    def __post_init__(self):
        rows, columns = check_dimensions(self.rows, self.columns)

        values = np.asarray(self.values)
        if values.ndim != 1:
            raise ValueError(
                f"Matrix values must be a flat sequence (got {values.ndim} dimensions)"
            )
        if values.dtype.kind not in _NUMERIC_KINDS:
            raise TypeError(f"Matrix values must be real numbers (got {values.dtype})")
        if len(values) != rows * columns:
            raise ValueError(
                f"Mismatch size: the number of values and rows * columns do not match ({len(values)} vs {rows * columns})"
            )

        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "values", np.array(values, dtype=DTYPE))

    @classmethod
    def from_rows(cls, elements: abc.Iterable[abc.Iterable[Scalar]]) -> Self:
        """Create a matrix from a sequence of rows.

        The number of columns is given by the first row and the rows are
        flattened in order. Only the total number of values is checked
        against rows * columns, so rows of unequal length are accepted
        as long as the total matches.
        """
        rows, columns, values = flatten_rows(elements)
        return cls(rows, columns, values)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Self:
        rows, columns = check_dimensions(rows, columns)
        return cls(rows, columns, np.zeros(rows * columns, dtype=DTYPE))

    @classmethod
    def identity(cls, size: int) -> Self:
        size, _ = check_dimensions(size, size)
        return cls.from_numpy(np.eye(size, dtype=DTYPE))

    @classmethod
    def from_numpy(cls, array: Array) -> Self:
        """Create a matrix from a 2-D numpy array."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(
                f"Only 2-D arrays can be converted to a matrix (got {array.ndim} dimensions)"
            )
        return cls(array.shape[0], array.shape[1], array.ravel())

    @classmethod
    def from_dataframe(cls, dataframe: pd.DataFrame) -> Self:
        """Create a matrix from the cells of a pandas dataframe.

        Row and column labels are discarded.
        """
        return cls.from_numpy(dataframe.to_numpy())

    def to_numpy(self) -> Array:
        """Copy of the values as a 2-D numpy array."""
        return self._grid().copy()

    def to_dataframe(
        self,
        index: abc.Sequence[Any] | None = None,
        columns: abc.Sequence[Any] | None = None,
    ) -> pd.DataFrame:
        """Convert matrix to a pandas dataframe, one row per matrix row."""
        return pd.DataFrame(self.to_numpy(), index=index, columns=columns)

    def _grid(self) -> Array:
        return self.values.reshape(self.rows, self.columns)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    @property
    def T(self) -> Matrix:
        """Transposed matrix."""
        return self.transpose()

    def transpose(self) -> Matrix:
        return self.__class__(self.columns, self.rows, self._grid().T.ravel())

    def copy(self) -> Matrix:
        """An independent matrix with the same shape and values."""
        return self.__class__(self.rows, self.columns, self.values)

    __copy__ = copy

    ############
    # Access
    ############

    def _linear_index(self, row: int, column: int) -> int:
        row = operator.index(row)
        column = operator.index(column)
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"Invalid index ({row}, {column}) for a {self.rows}x{self.columns} matrix"
            )
        return row * self.columns + column

    def get(self, row: int, column: int) -> float:
        return float(self.values[self._linear_index(row, column)])

    def set(self, row: int, column: int, value: Scalar):
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"Matrix values must be real numbers (got {type(value).__name__})"
            )
        self.values[self._linear_index(row, column)] = value

    def __getitem__(self, index: tuple[int, int], /) -> float:
        row, column = index
        return self.get(row, column)

    def __setitem__(self, index: tuple[int, int], value: Scalar, /):
        row, column = index
        self.set(row, column, value)

    def row_vector(self, row: int) -> Vector:
        """Values of a row, in ascending column order."""
        row = operator.index(row)
        if not 0 <= row < self.rows:
            raise IndexError(f"Invalid row {row} for a matrix with {self.rows} rows")
        start = row * self.columns
        return self.values[start : start + self.columns].copy()

    def column_vector(self, column: int) -> Vector:
        """Values of a column, in ascending row order."""
        column = operator.index(column)
        if not 0 <= column < self.columns:
            raise IndexError(
                f"Invalid column {column} for a matrix with {self.columns} columns"
            )
        return self.values[column :: self.columns].copy()

    ############
    # Arithmetic
    ############

    def _check_same_shape(self, other: Matrix, operation: str):
        if self.shape != other.shape:
            raise ValueError(
                f"Mismatch size: cannot {operation} a {self.rows}x{self.columns} and a {other.rows}x{other.columns} matrix"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "add")
        return self.__class__(
            self.rows,
            self.columns,
            arithmetic.elementwise_sum(self.values, other.values),
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, "subtract")
        return self.__class__(
            self.rows,
            self.columns,
            arithmetic.elementwise_difference(self.values, other.values),
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise ValueError(
                f"Mismatch size: the number of columns of lhs and rows of rhs do not match ({self.columns} vs {other.rows})"
            )

        logger.debug(
            f"Multiplying {self.rows}x{self.columns} by {other.rows}x{other.columns} matrix"
        )
        product = arithmetic.matrix_product(self._grid(), other._grid())
        return self.__class__(self.rows, other.columns, product.ravel())

    def __mul__(self, other: Matrix | Scalar) -> Matrix:
        if isinstance(other, Matrix):
            return self @ other
        if isinstance(other, numbers.Real):
            return self.__class__(
                self.rows, self.columns, arithmetic.scale(other, self.values)
            )
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Matrix:
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    # In-place operators return a new matrix, so other
    # references to the left operand keep their values.

    def __iadd__(self, other: Matrix) -> Matrix:
        return self + other

    def __isub__(self, other: Matrix) -> Matrix:
        return self - other

    def __imul__(self, other: Matrix | Scalar) -> Matrix:
        return self * other

    def __imatmul__(self, other: Matrix) -> Matrix:
        return self @ other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.values, other.values)
        )

    def allclose(self, other: Matrix, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """True if both matrices have the same shape and values within tolerance."""
        if not isinstance(other, Matrix):
            raise TypeError(
                f"Cannot compare a matrix with {type(other).__name__}"
            )
        return self.shape == other.shape and bool(
            np.allclose(self.values, other.values, rtol=rtol, atol=atol)
        )

    ############
    # Display
    ############

    def __str__(self):
        return "".join(format_vector(self.row_vector(row)) for row in range(self.rows))

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(rows={self.rows}, columns={self.columns}, "
            f"values={format_vector(self.values)})"
        )


ZERO = Matrix(0, 0, ())
