"""
Functions to visualize matrices.
"""

from __future__ import annotations

import numpy as np
from matplotlib import figure
from matplotlib import pyplot as plt

from .highlevel import Matrix

SIZE_SCALING = 2
CMAP = "viridis"


def plot_matrix_values(
    ax: figure.Axes, matrix: Matrix, annotate: bool = True
) -> figure.Colorbar:
    """Plot matrix cells as a heat map."""

    if matrix.rows == 0 or matrix.columns == 0:
        raise ValueError(
            f"Cannot plot an empty matrix ({matrix.rows}x{matrix.columns})"
        )

    grid = matrix.to_numpy()
    image = ax.imshow(grid, cmap=CMAP)
    cbar = plt.colorbar(image, ax=ax, orientation="vertical")

    ax.set_xticks(range(matrix.columns))
    ax.set_yticks(range(matrix.rows))
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")

    if annotate:
        for (row, column), value in np.ndenumerate(grid):
            ax.text(column, row, f"{value:g}", ha="center", va="center", color="w")

    return cbar


def plot_matrix(matrix: Matrix, title: str = "", annotate: bool = True):
    """Plot a single matrix."""

    fig, ax = plt.subplots(
        layout="tight",
        figsize=(8.27 / SIZE_SCALING, 8.27 / SIZE_SCALING),
    )

    plot_matrix_values(ax, matrix, annotate=annotate)
    if title:
        fig.suptitle(title)

    return fig


def plot_product(lhs: Matrix, rhs: Matrix, annotate: bool = True):
    """Plot both operands of a matrix product next to the result."""

    product = lhs @ rhs

    fig, axs = plt.subplots(
        1,
        3,
        layout="tight",
        figsize=(3 * 8.27 / SIZE_SCALING, 8.27 / SIZE_SCALING),
    )

    for ax, matrix, title in zip(axs, (lhs, rhs, product), ("lhs", "rhs", "lhs @ rhs")):
        plot_matrix_values(ax, matrix, annotate=annotate)
        ax.set_title(f"{title} ({matrix.rows}x{matrix.columns})")

    return fig
