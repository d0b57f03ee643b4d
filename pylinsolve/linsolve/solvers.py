"""
Solver dispatch for linear systems.

This module provides the solve() and solve_with() functions (public API)
and backend selection. Backend selection is the single place where the
resolved scalar kind decides what happens next.
"""

from typing import Any
import numpy as np
import sympy

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.exceptions import (
    DimensionError,
    UnsupportedCombinationError,
    ValidationError,
)
from pylinsolve.core.kinds import KIND_DUAL, KIND_REAL, KIND_SYMBOLIC
from pylinsolve.core.protocols import DecompositionHandle
from pylinsolve.linsolve.backends import DualBackend, RealBackend, SymbolicBackend
from pylinsolve.linsolve.decomposition import Algorithm, check_algorithm, factor
from pylinsolve.linsolve.design import LinearSystemDesign
from pylinsolve.linsolve.solution import LinearSolveSolution


_BACKENDS = {
    KIND_REAL: RealBackend,
    KIND_DUAL: DualBackend,
    KIND_SYMBOLIC: SymbolicBackend,
}


def solve(
    A: Any,
    b: Any,
    *,
    algorithm: Algorithm = 'cholesky',
) -> LinearSolveSolution:
    """
    Solve the square linear system A x = b.

    The kind of x follows the kinds of A and b:
        - real A, real b: real x
        - dual A and/or b (the other real or dual): dual x, with
          derivatives from implicit differentiation of A x = b
        - symbolic A, symbolic b: exact symbolic x

    This is the primary public API. All input validation, factorization,
    backend selection, and result wrapping happens here.

    Args:
        A: Square matrix (m x m): float array-like, object array of Dual,
            or sympy Matrix
        b: Right-hand side (m,) or (m x k), same choices of kind
        algorithm: Decomposition to use:
            - 'cholesky': LLᵀ, A symmetric positive definite
            - 'ldlt': pivoted LDLᵀ, A symmetric
            - 'qr': column-pivoted Householder QR
            - 'lu': partially pivoted LU
            Symbolic systems support 'cholesky' only.

    Returns:
        LinearSolveSolution with x, its value and derivative parts, and
        diagnostics

    Raises:
        ValueError: If algorithm is unknown
        UnsupportedCombinationError: If A and b have no common kind
        DimensionError: If A is not square or b does not match A
        GradientSizeMismatchError: If A or b has inconsistent derivative sizes
        VariableCountMismatchError: If A and b disagree on the variable count
        NotPositiveDefiniteError: If a Cholesky-family algorithm fails
        SingularMatrixError: If A (or its value) is singular

    Example:
        >>> from pylinsolve import solve
        >>> result = solve([[1.0, 3.0], [3.0, 10.0]], [3.0, 5.0])
        >>> result.x
        array([15., -4.])
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    check_algorithm(algorithm)
    design = LinearSystemDesign.build(A, b)

    timer = Timer()
    timer.start()

    # === Factor ===
    with timer.section('decomposition'):
        matrix = design.A if design.kind == KIND_SYMBOLIC else design.A_value
        solver = factor(matrix, design.kind, algorithm)

    # === Solve ===
    backend = _get_backend(design.kind, algorithm)
    result = backend.solve(design, solver, timer)

    # === Wrap and Return ===
    return LinearSolveSolution(_result=result, _design=design)


def solve_with(
    solver: DecompositionHandle,
    A: Any,
    b: Any,
) -> LinearSolveSolution:
    """
    Solve A x = b reusing a factorization from get_solver(A).

    Useful when the same A (or the same value of a dual A) is solved
    against many right-hand sides: the factorization is computed once.

    Args:
        solver: Handle returned by get_solver for this A
        A: The matrix the handle was built from (its derivatives, if any,
            are still needed for propagation)
        b: Right-hand side (m,) or (m x k)

    Raises:
        UnsupportedCombinationError: If the handle kind does not match the
            kind of the system (e.g. a real handle for a symbolic system)
        DimensionError: If the handle shape does not match A
        ValidationError: If the handle was built from a different matrix
    """
    design = LinearSystemDesign.build(A, b)
    _check_solver_matches(solver, design)

    timer = Timer()
    timer.start()
    backend = _get_backend(design.kind, solver.algorithm)
    result = backend.solve(design, solver, timer)
    return LinearSolveSolution(_result=result, _design=design)


def _check_solver_matches(solver: DecompositionHandle, design: LinearSystemDesign) -> None:
    expected_kind = KIND_SYMBOLIC if design.kind == KIND_SYMBOLIC else KIND_REAL
    if solver.kind != expected_kind:
        raise UnsupportedCombinationError(
            f"A {solver.kind} solver cannot solve a {design.kind} system",
            kind_a=design.kind_A,
            kind_b=design.kind_b,
            algorithm=solver.algorithm,
        )

    if tuple(solver.shape) != (design.m, design.m):
        raise DimensionError(
            f"solver was built for shape {tuple(solver.shape)}, "
            f"but A has shape {(design.m, design.m)}"
        )

    if expected_kind == KIND_SYMBOLIC:
        same = sympy.ImmutableMatrix(design.A) == solver.matrix
    else:
        same = np.array_equal(solver.matrix, design.A_value)
    if not same:
        raise ValidationError("solver was built from a different matrix than A")


def _get_backend(kind: str, algorithm: str):
    """
    Select and instantiate the backend for a resolved kind.

    Args:
        kind: Output kind from resolve_output_kind
        algorithm: Algorithm name, used in the backend name

    Returns:
        Backend instance ready to solve

    Raises:
        ValueError: If kind is unknown
    """
    try:
        backend_cls = _BACKENDS[kind]
    except KeyError:
        raise ValueError(f"Unknown scalar kind: {kind!r}") from None
    return backend_cls(algorithm)
