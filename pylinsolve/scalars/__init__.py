"""
Scalar types consumed by the linear solver.

    dual: Dual number type and value/derivatives accessors
    conversion: Value projection and dual matrix construction
    symbolic: SymPy matrix conversion and expansion-based equality
"""

from pylinsolve.scalars.dual import Dual, value, derivatives, make_dual
from pylinsolve.scalars.conversion import (
    value_matrix,
    derivative_matrix,
    make_dual_matrix,
    to_dual,
    gradient_matrix,
)
from pylinsolve.scalars.symbolic import to_sympy_matrix, expr_equal, matrices_equal

__all__ = [
    "Dual",
    "value",
    "derivatives",
    "make_dual",
    "value_matrix",
    "derivative_matrix",
    "make_dual_matrix",
    "to_dual",
    "gradient_matrix",
    "to_sympy_matrix",
    "expr_equal",
    "matrices_equal",
]
