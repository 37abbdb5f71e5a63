import numpy as np
import pytest

from Matrixarith import Matrix, simulation


def test_random_matrix_shape_and_bounds():
    m = simulation.random_matrix(3, 4, low=-1.0, high=2.0)

    assert isinstance(m, Matrix)
    assert m.shape == (3, 4)
    assert np.all(m.values >= -1.0)
    assert np.all(m.values < 2.0)


def test_random_matrix_is_reproducible():
    first = simulation.random_matrix(2, 3, generator=np.random.default_rng(42))
    second = simulation.random_matrix(2, 3, generator=np.random.default_rng(42))

    assert first == second


def test_random_integer_matrix():
    m = simulation.random_integer_matrix(
        4, 2, low=0, high=5, generator=np.random.default_rng(0)
    )

    assert m.shape == (4, 2)
    assert m.values.dtype == np.float64
    assert np.array_equal(m.values, np.round(m.values))
    assert np.all((m.values >= 0) & (m.values < 5))


def test_random_integer_products_are_exact():
    generator = np.random.default_rng(7)
    lhs = simulation.random_integer_matrix(3, 4, generator=generator)
    rhs = simulation.random_integer_matrix(4, 2, generator=generator)

    product = lhs @ rhs
    assert product.shape == (3, 2)
    assert np.array_equal(product.to_numpy(), lhs.to_numpy() @ rhs.to_numpy())


def test_random_empty_matrix():
    assert simulation.random_matrix(0, 3).shape == (0, 3)


def test_random_invalid_shape():
    with pytest.raises(ValueError):
        simulation.random_matrix(-1, 3)
    with pytest.raises(ValueError):
        simulation.random_integer_matrix(2, -3)
