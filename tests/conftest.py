import matplotlib

matplotlib.use("Agg")

import pytest
from matplotlib import pyplot as plt

from Matrixarith import data


@pytest.fixture
def a():
    return data.example_a()


@pytest.fixture
def b():
    return data.example_b()


@pytest.fixture
def rect():
    return data.rectangular()


@pytest.fixture
def close_figures():
    yield
    plt.close("all")
