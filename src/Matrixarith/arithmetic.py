"""
Low-level arithmetic kernels.

Functions in this module work on plain numpy arrays holding matrix values in
row-major order. Shape bookkeeping is left to the caller (see `highlevel`),
they only check what they need to compute a well defined result.
"""

from __future__ import annotations

import numpy as np

from ._typing import DTYPE, Array, Scalar, Vector


def _check_same_length(lhs: Vector, rhs: Vector, operation: str):
    if len(lhs) != len(rhs):
        raise ValueError(
            f"Cannot compute the {operation} of vectors with different lengths ({len(lhs)} vs {len(rhs)})"
        )


def elementwise_sum(lhs: Vector, rhs: Vector) -> Vector:
    """Sum of corresponding elements, in linear order."""
    _check_same_length(lhs, rhs, "sum")
    return np.add(lhs, rhs, dtype=DTYPE)


def elementwise_difference(lhs: Vector, rhs: Vector) -> Vector:
    """Difference `lhs[i] - rhs[i]` of corresponding elements."""
    _check_same_length(lhs, rhs, "difference")
    return np.subtract(lhs, rhs, dtype=DTYPE)


def scale(scalar: Scalar, values: Vector) -> Vector:
    return np.multiply(scalar, values, dtype=DTYPE)


def dot(lhs: Vector, rhs: Vector) -> float:
    """Calculate the dot product of two vectors.

    Products are accumulated left to right starting from zero, so the
    result for an empty pair of vectors is ``0.0``.

    Parameters
    ----------
    lhs: numpy array (shape=(N, ))
        Left vector, typically a matrix row.
    rhs: numpy array (shape=(N, ))
        Right vector, typically a matrix column.

    Returns
    -------
    float
        Sum of pairwise products.
    """
    _check_same_length(lhs, rhs, "dot product")

    acc = 0.0
    for a, b in zip(lhs, rhs):
        acc += a * b
    return float(acc)


def matrix_product(lhs: Array, rhs: Array) -> Array:
    """Calculate the product of two 2-D arrays with a naive triple loop.

    Parameters
    ----------
    lhs: numpy array (shape=(N, K))
    rhs: numpy array (shape=(K, M))

    Returns
    -------
    numpy array (shape=(N, M))
        Element (i, j) is the dot product of row i of `lhs`
        and column j of `rhs`.
    """
    n, k = lhs.shape
    k_rhs, m = rhs.shape
    if k != k_rhs:
        raise ValueError(
            f"The number of columns of lhs and the number of rows of rhs do not match ({k} vs {k_rhs})"
        )

    out = np.zeros((n, m), dtype=DTYPE)
    for i in range(n):
        for j in range(m):
            out[i, j] = dot(lhs[i, :], rhs[:, j])
    return out
