"""
Tests for derivative-size consistency checks.
"""

import numpy as np
import pytest

from pylinsolve.core.exceptions import GradientSizeMismatchError, VariableCountMismatchError
from pylinsolve.linsolve._gradients import check_derivative_sizes, derivative_size
from pylinsolve.scalars import Dual, make_dual_matrix, to_dual


class TestDerivativeSize:

    def test_real_matrix_is_zero(self, A_val):
        assert derivative_size(A_val, "A") == 0

    def test_all_empty_is_zero(self, A_val):
        assert derivative_size(to_dual(A_val), "A") == 0

    def test_common_size(self, A_dual):
        assert derivative_size(A_dual, "A") == 3

    def test_empty_entries_ignored(self):
        b = np.array([Dual(1.0), Dual(2.0, [1.0, 2.0])], dtype=object)
        assert derivative_size(b, "b") == 2

    def test_mismatch_message_and_attributes(self, A_dual):
        A = A_dual.copy()
        A[1, 1] = Dual(10.0, [1.0, 2.0])
        with pytest.raises(
            GradientSizeMismatchError,
            match=r"A\(1, 1\) has size 2, while another entry has size 3",
        ) as exc_info:
            derivative_size(A, "A")
        err = exc_info.value
        assert err.matrix_name == "A"
        assert err.size == 2
        assert err.other_size == 3
        assert err.index == (1, 1)

    def test_vector_label(self):
        b = np.array([Dual(1.0, [1.0, 2.0, 3.0]), Dual(2.0, [1.0, 2.0])], dtype=object)
        with pytest.raises(GradientSizeMismatchError, match=r"b\(1\) has size 2"):
            derivative_size(b, "b")


class TestCheckDerivativeSizes:

    def test_same_count(self, A_dual, b_vec_dual):
        assert check_derivative_sizes(A_dual, b_vec_dual) == 3

    def test_only_a_has_derivatives(self, A_dual, b_vec_val):
        assert check_derivative_sizes(A_dual, b_vec_val) == 3

    def test_only_b_has_derivatives(self, A_val, b_vec_dual):
        assert check_derivative_sizes(A_val, b_vec_dual) == 3

    def test_empty_b_against_dual_a(self, A_dual, b_vec_val):
        assert check_derivative_sizes(A_dual, to_dual(b_vec_val)) == 3

    def test_no_derivatives(self, A_val, b_vec_val):
        assert check_derivative_sizes(to_dual(A_val), to_dual(b_vec_val)) == 0

    def test_count_mismatch(self, A_dual, b_vec_val):
        b = make_dual_matrix(b_vec_val, np.ones((2, 4)))
        with pytest.raises(
            VariableCountMismatchError,
            match="A contains derivatives for 3 variables, "
                  "while b contains derivatives for 4 variables",
        ) as exc_info:
            check_derivative_sizes(A_dual, b)
        assert exc_info.value.n_a == 3
        assert exc_info.value.n_b == 4
