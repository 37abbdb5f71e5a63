"""
Functions to simulate matrices.
"""

from __future__ import annotations

import logging

import numpy as np

from ._typing import DTYPE, Scalar
from .highlevel import Matrix
from .util import check_dimensions

logger = logging.getLogger(__name__)


def random_matrix(
    rows: int,
    columns: int,
    low: Scalar = 0.0,
    high: Scalar = 1.0,
    generator: np.random.Generator | None = None,
) -> Matrix:
    """Matrix with values drawn uniformly from [low, high).

    Parameters
    ----------
    rows: int
        Number of rows.
    columns: int
        Number of columns.
    low: float, optional (default=0.0)
        Lower boundary of the output interval.
    high: float, optional (default=1.0)
        Upper boundary of the output interval.
    generator: numpy Generator, optional
        If `None`, a new default generator will be used.
    """
    rows, columns = check_dimensions(rows, columns)
    if generator is None:
        generator = np.random.default_rng()

    logger.debug(f"Drawing a {rows}x{columns} uniform matrix in [{low}, {high})")
    return Matrix(rows, columns, generator.uniform(low, high, rows * columns))


def random_integer_matrix(
    rows: int,
    columns: int,
    low: int = -9,
    high: int = 10,
    generator: np.random.Generator | None = None,
) -> Matrix:
    """Matrix with integer values drawn uniformly from [low, high).

    Integer valued entries keep sums and products exact,
    which is convenient for examples and tests.
    """
    rows, columns = check_dimensions(rows, columns)
    if generator is None:
        generator = np.random.default_rng()

    logger.debug(f"Drawing a {rows}x{columns} integer matrix in [{low}, {high})")
    values = generator.integers(low, high, rows * columns).astype(DTYPE)
    return Matrix(rows, columns, values)
