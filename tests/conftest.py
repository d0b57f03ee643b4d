"""
pytest configuration and shared fixtures.

The fixture system is the 2 x 2 symmetric positive definite
A = [[1, 3], [3, 10]] with right-hand sides b = [3, 5] and
b = [[3, 5, 8], [1, -2, -3]], in real, dual and symbolic form.
"""

import numpy as np
import pytest
import sympy

from pylinsolve.scalars import make_dual_matrix


@pytest.fixture
def A_val():
    return np.array([[1.0, 3.0], [3.0, 10.0]])


@pytest.fixture
def b_vec_val():
    return np.array([3.0, 5.0])


@pytest.fixture
def b_mat_val():
    return np.array([[3.0, 5.0, 8.0], [1.0, -2.0, -3.0]])


@pytest.fixture
def A_dual(A_val):
    """Dual A with derivative vectors (1,2,3), (4,5,6), (7,8,9), (10,11,12)."""
    derivs = np.arange(1.0, 13.0).reshape(2, 2, 3)
    return make_dual_matrix(A_val, derivs)


@pytest.fixture
def b_vec_dual(b_vec_val):
    """Dual vector b with gradient [[1, 2, 3], [4, 5, 6]]."""
    return make_dual_matrix(b_vec_val, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.fixture
def b_mat_dual(b_mat_val):
    """Dual matrix b whose (i, j) entry has derivatives (i, j, i*j + 1)."""
    derivs = np.empty((2, 3, 3))
    for i in range(2):
        for j in range(3):
            derivs[i, j] = (i, j, i * j + 1)
    return make_dual_matrix(b_mat_val, derivs)


@pytest.fixture
def A_sym():
    return sympy.Matrix([[1, 3], [3, 10]])


@pytest.fixture
def b_sym():
    u, v = sympy.symbols('u v')
    return sympy.Matrix([[u, 1, v], [-u + v, 3, 2]])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spd_matrix(rng):
    """Random 5 x 5 symmetric positive definite matrix."""
    M = rng.standard_normal((5, 5))
    return M @ M.T + 5.0 * np.eye(5)
