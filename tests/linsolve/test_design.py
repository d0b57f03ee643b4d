"""
Tests for LinearSystemDesign.

Validates kind resolution, shape checks, value projection and the order
in which invalid inputs are reported.
"""

import numpy as np
import pytest
import sympy

from pylinsolve.core.exceptions import (
    DimensionError,
    UnsupportedCombinationError,
    ValidationError,
    VariableCountMismatchError,
)
from pylinsolve.linsolve import LinearSystemDesign
from pylinsolve.scalars import Dual, make_dual_matrix


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestBuildReal:

    def test_vector_rhs(self, A_val, b_vec_val):
        design = LinearSystemDesign.build(A_val, b_vec_val)
        assert design.kind == "real"
        assert design.kind_A == "real"
        assert design.kind_b == "real"
        assert design.m == 2
        assert design.k == 1
        assert design.is_vector
        assert design.n_derivatives == 0
        np.testing.assert_array_equal(design.A_value, A_val)

    def test_matrix_rhs(self, A_val, b_mat_val):
        design = LinearSystemDesign.build(A_val, b_mat_val)
        assert design.k == 3
        assert not design.is_vector

    def test_lists_of_ints(self):
        design = LinearSystemDesign.build([[1, 3], [3, 10]], [3, 5])
        assert design.A.dtype == np.float64
        assert design.b.dtype == np.float64

    def test_object_array_of_floats(self, b_vec_val):
        A = np.array([[1.0, 3.0], [3.0, 10.0]], dtype=object)
        design = LinearSystemDesign.build(A, b_vec_val)
        assert design.kind == "real"
        assert design.A.dtype == np.float64


class TestBuildDual:

    def test_dual_a_real_b(self, A_dual, b_vec_val, A_val):
        design = LinearSystemDesign.build(A_dual, b_vec_val)
        assert design.kind == "dual"
        assert design.kind_A == "dual"
        assert design.kind_b == "real"
        assert design.n_derivatives == 3
        np.testing.assert_array_equal(design.A_value, A_val)

    def test_derivative_slices(self, A_dual, b_mat_dual):
        design = LinearSystemDesign.build(A_dual, b_mat_dual)
        dA = design.A_derivatives()
        db = design.b_derivatives()
        assert dA.shape == (3, 2, 2)
        assert db.shape == (3, 2, 3)
        np.testing.assert_array_equal(db[2], [[1.0, 1.0, 1.0], [1.0, 2.0, 3.0]])

    def test_real_b_has_zero_derivatives(self, A_dual, b_vec_val):
        design = LinearSystemDesign.build(A_dual, b_vec_val)
        assert not design.b_derivatives().any()


class TestBuildSymbolic:

    def test_matrix_rhs(self, A_sym, b_sym):
        design = LinearSystemDesign.build(A_sym, b_sym)
        assert design.kind == "symbolic"
        assert design.A_value is None
        assert design.b_value is None
        assert design.k == 3
        assert not design.is_vector

    def test_list_rhs_is_vector(self, A_sym):
        u, v = sympy.symbols("u v")
        design = LinearSystemDesign.build(A_sym, [u, v])
        assert design.is_vector
        assert design.b.shape == (2, 1)

    def test_column_matrix_is_not_vector(self, A_sym):
        u, v = sympy.symbols("u v")
        design = LinearSystemDesign.build(A_sym, sympy.Matrix([u, v]))
        assert not design.is_vector

    def test_non_square(self, b_sym):
        with pytest.raises(DimensionError, match="square"):
            LinearSystemDesign.build(sympy.Matrix([[1, 2, 3], [4, 5, 6]]), b_sym)


# ═══════════════════════════════════════════════════════════════════════
# Validation failures
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_non_square(self, b_vec_val):
        with pytest.raises(DimensionError, match="square"):
            LinearSystemDesign.build(np.ones((2, 3)), b_vec_val)

    def test_empty_a(self):
        with pytest.raises(DimensionError, match="empty"):
            LinearSystemDesign.build(np.zeros((0, 0)), np.zeros(0))

    def test_row_mismatch(self, A_val):
        with pytest.raises(DimensionError, match="A=2, b=3"):
            LinearSystemDesign.build(A_val, np.ones(3))

    def test_b_three_dimensional(self, A_val):
        with pytest.raises(DimensionError, match="1D or 2D"):
            LinearSystemDesign.build(A_val, np.ones((2, 1, 1)))

    def test_b_without_columns(self, A_val):
        with pytest.raises(DimensionError, match="at least 1 columns"):
            LinearSystemDesign.build(A_val, np.ones((2, 0)))

    def test_nan_in_a(self, b_vec_val):
        with pytest.raises(ValidationError, match="A: contains non-finite"):
            LinearSystemDesign.build(np.array([[1.0, np.nan], [0.0, 1.0]]), b_vec_val)

    def test_inf_in_dual_b(self, A_val):
        b = np.array([Dual(np.inf, [1.0]), Dual(1.0, [1.0])], dtype=object)
        with pytest.raises(ValidationError, match="b: contains non-finite"):
            LinearSystemDesign.build(A_val, b)

    def test_mixed_kinds_in_one_matrix(self, b_vec_val):
        A = np.array([[Dual(1.0, [1.0]), 3.0], [3.0, 10.0]], dtype=object)
        with pytest.raises(ValidationError, match="mixes entries"):
            LinearSystemDesign.build(A, b_vec_val)

    def test_symbolic_with_dual(self, A_sym, b_vec_dual):
        with pytest.raises(UnsupportedCombinationError):
            LinearSystemDesign.build(A_sym, b_vec_dual)


class TestCheckOrder:
    """Kinds first, then shapes, then values, then derivative sizes."""

    def test_kind_before_shape(self, b_vec_dual):
        A = sympy.Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(UnsupportedCombinationError):
            LinearSystemDesign.build(A, b_vec_dual)

    def test_shape_before_finiteness(self):
        A = np.full((2, 3), np.nan)
        with pytest.raises(DimensionError):
            LinearSystemDesign.build(A, np.ones(2))

    def test_finiteness_before_derivative_sizes(self, A_dual):
        b = make_dual_matrix([np.nan, 1.0], np.ones((2, 4)))
        with pytest.raises(ValidationError, match="non-finite"):
            LinearSystemDesign.build(A_dual, b)

    def test_derivative_sizes_last(self, A_dual, b_vec_val):
        b = make_dual_matrix(b_vec_val, np.ones((2, 4)))
        with pytest.raises(VariableCountMismatchError):
            LinearSystemDesign.build(A_dual, b)
