"""
Tests for scalar kind classification and promotion.
"""

import numpy as np
import pytest
import sympy

from pylinsolve.core.exceptions import UnsupportedCombinationError, ValidationError
from pylinsolve.core.kinds import (
    ALL_KINDS,
    KIND_DUAL,
    KIND_REAL,
    KIND_SYMBOLIC,
    classify,
    resolve_output_kind,
)
from pylinsolve.scalars import Dual


# ═══════════════════════════════════════════════════════════════════════
# classify
# ═══════════════════════════════════════════════════════════════════════


class TestClassify:

    def test_float_array_is_real(self, A_val):
        assert classify(A_val, "A") == KIND_REAL

    def test_nested_int_list_is_real(self):
        assert classify([[1, 3], [3, 10]], "A") == KIND_REAL

    def test_object_array_of_floats_is_real(self):
        arr = np.array([1.0, 2.0], dtype=object)
        assert classify(arr, "b") == KIND_REAL

    def test_dual_array_is_dual(self, A_dual):
        assert classify(A_dual, "A") == KIND_DUAL

    def test_sympy_matrix_is_symbolic(self, A_sym):
        assert classify(A_sym, "A") == KIND_SYMBOLIC

    def test_list_of_symbols_is_symbolic(self):
        u, v = sympy.symbols("u v")
        assert classify([u, v], "b") == KIND_SYMBOLIC

    def test_numbers_among_symbols_are_symbolic(self):
        u, v = sympy.symbols("u v")
        assert classify([u, 1], "b") == KIND_SYMBOLIC
        assert classify([[u, 1, v], [-u + v, 3, 2.5]], "b") == KIND_SYMBOLIC

    def test_dual_and_symbol_rejected(self):
        u = sympy.Symbol("u")
        arr = np.array([Dual(1.0, [1.0]), u], dtype=object)
        with pytest.raises(ValidationError, match="mixes entries"):
            classify(arr, "b")

    def test_empty_array_is_real(self):
        assert classify(np.array([], dtype=object), "b") == KIND_REAL

    def test_mixed_dual_and_float_rejected(self):
        arr = np.array([Dual(1.0, [1.0]), 2.0], dtype=object)
        with pytest.raises(ValidationError, match="mixes entries"):
            classify(arr, "b")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            classify(np.array([1 + 2j, 3.0]), "b")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            classify(np.array(["a", "b"]), "b")

    def test_unsupported_entry_rejected(self):
        arr = np.array([None, 1.0], dtype=object)
        with pytest.raises(ValidationError, match="unsupported entry type NoneType"):
            classify(arr, "b")

    def test_bool_entry_rejected(self):
        arr = np.array([True, 1.0], dtype=object)
        with pytest.raises(ValidationError, match="bool"):
            classify(arr, "b")


# ═══════════════════════════════════════════════════════════════════════
# resolve_output_kind
# ═══════════════════════════════════════════════════════════════════════


class TestResolveOutputKind:

    @pytest.mark.parametrize("kind_a,kind_b,expected", [
        (KIND_REAL, KIND_REAL, KIND_REAL),
        (KIND_REAL, KIND_DUAL, KIND_DUAL),
        (KIND_DUAL, KIND_REAL, KIND_DUAL),
        (KIND_DUAL, KIND_DUAL, KIND_DUAL),
        (KIND_SYMBOLIC, KIND_SYMBOLIC, KIND_SYMBOLIC),
    ])
    def test_supported_pairs(self, kind_a, kind_b, expected):
        assert resolve_output_kind(kind_a, kind_b) == expected

    @pytest.mark.parametrize("kind_a,kind_b", [
        (KIND_SYMBOLIC, KIND_REAL),
        (KIND_SYMBOLIC, KIND_DUAL),
        (KIND_REAL, KIND_SYMBOLIC),
        (KIND_DUAL, KIND_SYMBOLIC),
    ])
    def test_symbolic_does_not_mix(self, kind_a, kind_b):
        with pytest.raises(UnsupportedCombinationError) as exc_info:
            resolve_output_kind(kind_a, kind_b)
        assert exc_info.value.kind_a == kind_a
        assert exc_info.value.kind_b == kind_b

    def test_unknown_kind_raises_value_error(self):
        with pytest.raises(ValueError, match="Unknown scalar kind"):
            resolve_output_kind("complex", KIND_REAL)

    def test_all_kinds(self):
        assert ALL_KINDS == {"real", "dual", "symbolic"}
