"""
Linear System Design.

Design takes the raw A and b, resolves their scalar kinds once, validates
shapes, values and derivative bookkeeping, and keeps everything a backend
needs: the original matrices, their value projections and the number of
derivative variables. Backends trust a Design and never re-check it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
import sympy

from pylinsolve.core.kinds import KIND_DUAL, KIND_REAL, KIND_SYMBOLIC, classify, resolve_output_kind
from pylinsolve.core.validation import (
    check_array,
    check_consistent_rows,
    check_finite,
    check_min_columns,
    check_ndim,
    check_square,
)
from pylinsolve.linsolve._gradients import check_derivative_sizes
from pylinsolve.scalars.conversion import derivative_matrix, value_matrix
from pylinsolve.scalars.symbolic import to_sympy_matrix


@dataclass(frozen=True, eq=False)
class LinearSystemDesign:
    """
    Validated linear system A x = b.

    Immutable after construction. Build with LinearSystemDesign.build(A, b).

    For real and dual systems, A and b are NumPy arrays (float64 or object
    of Dual) and A_value, b_value hold their value projections. For
    symbolic systems, A and b are sympy matrices and the value projections
    are None.
    """
    _A: Any
    _b: Any
    _A_value: NDArray[np.floating[Any]] | None
    _b_value: NDArray[np.floating[Any]] | None
    _kind_A: str
    _kind_b: str
    _kind: str
    _n_derivatives: int
    _is_vector: bool

    @classmethod
    def build(cls, A: Any, b: Any) -> LinearSystemDesign:
        """
        Build a design from A and b.

        Order of checks: scalar kinds, shapes, finiteness, derivative sizes.

        Raises:
            UnsupportedCombinationError: If A and b have no common kind
            DimensionError: If A is not square or b does not match A
            ValidationError: If values are non-finite or entries unsupported
            GradientSizeMismatchError: If A or b has inconsistent derivatives
            VariableCountMismatchError: If A and b disagree on the variable count
        """
        kind_A = classify(A, 'A')
        kind_b = classify(b, 'b')
        kind = resolve_output_kind(kind_A, kind_b)

        if kind == KIND_SYMBOLIC:
            return cls._build_symbolic(A, b, kind_A, kind_b)

        A_arr = cls._as_array(A, kind_A, 'A')
        b_arr = cls._as_array(b, kind_b, 'b')

        check_square(A_arr.shape, 'A')
        check_ndim(b_arr.shape, (1, 2), 'b')
        check_consistent_rows(A_arr.shape, b_arr.shape, names=('A', 'b'))
        check_min_columns(b_arr.shape, 1, 'b')

        A_value = value_matrix(A_arr)
        b_value = value_matrix(b_arr)
        check_finite(A_value, 'A')
        check_finite(b_value, 'b')

        n = check_derivative_sizes(A_arr, b_arr) if kind == KIND_DUAL else 0

        return cls(
            _A=A_arr,
            _b=b_arr,
            _A_value=A_value,
            _b_value=b_value,
            _kind_A=kind_A,
            _kind_b=kind_b,
            _kind=kind,
            _n_derivatives=n,
            _is_vector=b_arr.ndim == 1,
        )

    @staticmethod
    def _as_array(M: Any, kind: str, name: str) -> NDArray:
        if kind == KIND_REAL:
            arr = np.asarray(M)
            if arr.dtype == object:
                # Plain Python numbers in an object array
                arr = arr.astype(np.float64)
            return check_array(arr, name)
        return np.asarray(M, dtype=object)

    @classmethod
    def _build_symbolic(cls, A: Any, b: Any, kind_A: str, kind_b: str) -> LinearSystemDesign:
        is_vector = not isinstance(b, sympy.MatrixBase) and np.ndim(b) == 1
        A_sym = to_sympy_matrix(A)
        b_sym = to_sympy_matrix(b)

        check_square(A_sym.shape, 'A')
        check_consistent_rows(A_sym.shape, b_sym.shape, names=('A', 'b'))
        check_min_columns(b_sym.shape, 1, 'b')

        return cls(
            _A=A_sym,
            _b=b_sym,
            _A_value=None,
            _b_value=None,
            _kind_A=kind_A,
            _kind_b=kind_b,
            _kind=KIND_SYMBOLIC,
            _n_derivatives=0,
            _is_vector=is_vector,
        )

    # === Properties ===

    @property
    def A(self) -> Any:
        """System matrix (m x m) in its original kind."""
        return self._A

    @property
    def b(self) -> Any:
        """Right-hand side (m,) or (m x k) in its original kind."""
        return self._b

    @property
    def A_value(self) -> NDArray[np.floating[Any]] | None:
        """Value projection of A (None for symbolic systems)."""
        return self._A_value

    @property
    def b_value(self) -> NDArray[np.floating[Any]] | None:
        """Value projection of b (None for symbolic systems)."""
        return self._b_value

    @property
    def kind_A(self) -> str:
        return self._kind_A

    @property
    def kind_b(self) -> str:
        return self._kind_b

    @property
    def kind(self) -> str:
        """Scalar kind of the solution."""
        return self._kind

    @property
    def n_derivatives(self) -> int:
        """Number of derivative variables (0 unless kind is dual)."""
        return self._n_derivatives

    @property
    def is_vector(self) -> bool:
        """True if b was given as a 1-D vector."""
        return self._is_vector

    @property
    def m(self) -> int:
        """Order of A."""
        return self._A.shape[0]

    @property
    def k(self) -> int:
        """Number of right-hand sides."""
        shape = self._b.shape
        return shape[1] if len(shape) == 2 else 1

    def A_derivatives(self) -> NDArray[np.floating[Any]]:
        """dA/dz_k stacked along axis 0, shape (n, m, m)."""
        return derivative_matrix(self._A, self._n_derivatives)

    def b_derivatives(self) -> NDArray[np.floating[Any]]:
        """db/dz_k stacked along axis 0, shape (n, *b.shape)."""
        return derivative_matrix(self._b, self._n_derivatives)
