"""
Example matrices.

A curated set of matrices used in tests, examples, and documentation.

Available matrices:
- example_a: [[1, 2], [3, 4]]
- example_b: [[5, 6], [7, 8]]
- rectangular: [[1, 2, 3], [4, 5, 6]]

Each call returns a new matrix, so the result can be modified freely.
"""

from __future__ import annotations

from .highlevel import Matrix


def example_a() -> Matrix:
    return Matrix.from_rows([[1, 2], [3, 4]])


def example_b() -> Matrix:
    return Matrix.from_rows([[5, 6], [7, 8]])


def rectangular() -> Matrix:
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]])


__all__ = ["example_a", "example_b", "rectangular"]
