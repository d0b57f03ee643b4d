"""
Linear solves over real, dual and symbolic scalars.

Public API:
    solve(A, b, algorithm=...) -> LinearSolveSolution
    solve_with(solver, A, b) -> LinearSolveSolution
    get_solver(A, algorithm=...) -> DecompositionHandle

solve() handles:
    - Scalar kind resolution (real, dual, symbolic)
    - Input and derivative-size validation
    - Factorization and backend selection
    - Result wrapping

Example:
    >>> from pylinsolve.linsolve import solve
    >>> result = solve(A, b, algorithm='lu')
    >>> print(result.x)
    >>> print(result.summary())
"""

from pylinsolve.linsolve.design import LinearSystemDesign
from pylinsolve.linsolve.decomposition import ALGORITHMS, Algorithm, get_solver
from pylinsolve.linsolve.solution import LinearSolveSolution, LinearSolveParams
from pylinsolve.linsolve.solvers import solve, solve_with

__all__ = [
    "solve",
    "solve_with",
    "get_solver",
    "ALGORITHMS",
    "Algorithm",
    "LinearSystemDesign",
    "LinearSolveSolution",
    "LinearSolveParams",
]
