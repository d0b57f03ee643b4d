"""
PyLinSolve: linear solves that carry derivatives and symbols through.

Solves square systems A x = b where A and b hold real numbers, forward-mode
dual numbers, or SymPy expressions. Dual inputs give dual outputs whose
derivatives come from implicit differentiation, reusing one factorization.

Submodules:
    linsolve: solve, solve_with, get_solver
    scalars: Dual numbers and conversion helpers
    core: Exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from pylinsolve.scalars import Dual, make_dual_matrix, value_matrix
from pylinsolve.linsolve import ALGORITHMS, get_solver, solve, solve_with

__all__ = [
    "__version__",
    "solve",
    "solve_with",
    "get_solver",
    "ALGORITHMS",
    "Dual",
    "make_dual_matrix",
    "value_matrix",
]
