"""
SymPy helpers for symbolic matrices.

Symbolic systems are solved exactly over SymPy expressions. Two results
are considered equal when their difference expands to zero, never by
string identity.
"""

from __future__ import annotations

from typing import Any
import numpy as np
import sympy


def to_sympy_matrix(M: Any) -> sympy.Matrix:
    """
    Convert a symbolic matrix-like to a mutable sympy.Matrix.

    1-D input becomes a column vector.
    """
    if isinstance(M, sympy.MatrixBase):
        return sympy.Matrix(M)
    arr = np.asarray(M, dtype=object)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    return sympy.Matrix(arr.tolist())


def expand(expr: Any) -> sympy.Expr:
    """Algebraically expanded form of an expression."""
    return sympy.expand(sympy.sympify(expr))


def expr_equal(a: Any, b: Any) -> bool:
    """True if a and b denote the same value after expansion."""
    return expand(sympy.sympify(a) - sympy.sympify(b)) == 0


def matrices_equal(A: Any, B: Any) -> bool:
    """Entrywise expr_equal for two symbolic matrices of the same shape."""
    A = to_sympy_matrix(A)
    B = to_sympy_matrix(B)
    if A.shape != B.shape:
        return False
    return all(expr_equal(a, b) for a, b in zip(A, B))
