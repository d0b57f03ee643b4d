"""
Exact Cholesky factorization over SymPy expressions.

No floating point enters the computation. Results are left unexpanded;
compare them with pylinsolve.scalars.symbolic.expr_equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import sympy

from pylinsolve.core.exceptions import NotPositiveDefiniteError
from pylinsolve.core.kinds import KIND_SYMBOLIC
from pylinsolve.core.validation import check_consistent_rows, check_square
from pylinsolve.scalars.symbolic import to_sympy_matrix


@dataclass(frozen=True, repr=False, eq=False)
class SymbolicCholeskySolver:
    """
    Exact factorization A = L Lᵀ of a symmetric symbolic matrix.

    Attributes:
        L: Lower triangular sympy factor
        algorithm: 'cholesky'
    """
    _matrix: sympy.ImmutableMatrix
    L: sympy.ImmutableMatrix
    algorithm: str = 'cholesky'

    @classmethod
    def factor(cls, A: Any, name: str = 'A') -> SymbolicCholeskySolver:
        """
        Factor a symmetric symbolic matrix.

        Raises:
            NotPositiveDefiniteError: If A is not symmetric, or a pivot is
                provably non-positive
        """
        M = to_sympy_matrix(A)
        check_square(M.shape, name)
        try:
            L = M.cholesky(hermitian=False)
        except ValueError as e:
            # sympy raises NonPositiveDefiniteMatrixError (a ValueError) or
            # ValueError for a non-symmetric matrix
            raise NotPositiveDefiniteError(
                f"{name}: symbolic Cholesky factorization failed: {e}",
                matrix_name=name,
                algorithm='cholesky',
            ) from e
        return cls(_matrix=sympy.ImmutableMatrix(M), L=sympy.ImmutableMatrix(L))

    @property
    def kind(self) -> str:
        return KIND_SYMBOLIC

    @property
    def shape(self) -> tuple[int, int]:
        return self._matrix.shape

    @property
    def matrix(self) -> sympy.ImmutableMatrix:
        return self._matrix

    def solve(self, rhs: Any) -> sympy.Matrix:
        """
        Solve A x = rhs exactly.

        Args:
            rhs: sympy Matrix, or array-like of expressions (1-D becomes a
                column vector)

        Returns:
            sympy.Matrix with the shape of rhs as a column-stacked matrix
        """
        b = to_sympy_matrix(rhs)
        check_consistent_rows(self.shape, b.shape, names=('A', 'rhs'))
        y = self.L.lower_triangular_solve(b)
        return sympy.Matrix(self.L.T.upper_triangular_solve(y))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape})"
