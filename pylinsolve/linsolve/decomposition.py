"""
Decomposition adapter.

Turns an algorithm name plus a matrix into a DecompositionHandle. The
algorithm is a plain parameter: the solve pipeline never looks inside a
factorization, it only calls handle.solve(rhs).

Real and dual matrices are factored through their value projection, so a
dual A yields a handle bound to a real matrix of the same shape. Symbolic
matrices are factored exactly and are supported for 'cholesky' only.
"""

from typing import Any, Callable, Literal

from pylinsolve.core.compute.linalg import (
    CholeskySolver,
    LDLTSolver,
    LUSolver,
    QRSolver,
    SymbolicCholeskySolver,
)
from pylinsolve.core.exceptions import UnsupportedCombinationError
from pylinsolve.core.kinds import KIND_SYMBOLIC, classify
from pylinsolve.core.protocols import DecompositionHandle
from pylinsolve.scalars.conversion import value_matrix


# Type alias for algorithm selection
Algorithm = Literal['cholesky', 'ldlt', 'qr', 'lu']

ALGORITHMS: tuple[str, ...] = ('cholesky', 'ldlt', 'qr', 'lu')

_REAL_FACTORIES: dict[str, Callable[..., DecompositionHandle]] = {
    'cholesky': CholeskySolver.factor,
    'ldlt': LDLTSolver.factor,
    'qr': QRSolver.factor,
    'lu': LUSolver.factor,
}

_SYMBOLIC_FACTORIES: dict[str, Callable[..., DecompositionHandle]] = {
    'cholesky': SymbolicCholeskySolver.factor,
}


def check_algorithm(algorithm: str) -> None:
    """
    Raises:
        ValueError: If algorithm is not one of ALGORITHMS
    """
    if algorithm not in ALGORITHMS:
        raise ValueError(
            f"Unknown algorithm: {algorithm!r}. Expected one of {list(ALGORITHMS)}"
        )


def factor(matrix: Any, kind: str, algorithm: Algorithm, name: str = 'A') -> DecompositionHandle:
    """
    Factor an already-classified matrix.

    Args:
        matrix: Real value matrix, or symbolic matrix when kind is symbolic
        kind: Scalar kind the handle should be bound to
        algorithm: One of ALGORITHMS
        name: Matrix name for error messages

    Raises:
        UnsupportedCombinationError: If kind is symbolic and algorithm is
            not 'cholesky'
        SingularMatrixError: If the algorithm cannot factor the matrix
    """
    if kind == KIND_SYMBOLIC:
        if algorithm not in _SYMBOLIC_FACTORIES:
            raise UnsupportedCombinationError(
                f"Algorithm {algorithm!r} is not supported for symbolic matrices; "
                f"use one of {sorted(_SYMBOLIC_FACTORIES)}",
                kind_a=KIND_SYMBOLIC,
                algorithm=algorithm,
            )
        return _SYMBOLIC_FACTORIES[algorithm](matrix, name)
    return _REAL_FACTORIES[algorithm](matrix, name)


def get_solver(A: Any, algorithm: Algorithm = 'cholesky') -> DecompositionHandle:
    """
    Factor A once for repeated solves.

    A real A gives a handle bound to A; a dual A gives a handle bound to
    its value projection (same shape); a symbolic A gives an exact handle.

    Args:
        A: Square real, dual or symbolic matrix
        algorithm: 'cholesky' (LLᵀ), 'ldlt' (pivoted LDLᵀ), 'qr'
            (column-pivoted QR) or 'lu' (partially pivoted LU)

    Returns:
        DecompositionHandle with a solve(rhs) method

    Raises:
        ValueError: If algorithm is unknown
        UnsupportedCombinationError: If A is symbolic and algorithm is not
            'cholesky'
        NotPositiveDefiniteError: If a Cholesky-family algorithm fails
        SingularMatrixError: If A is singular for the algorithm

    Example:
        >>> solver = get_solver([[1.0, 3.0], [3.0, 10.0]], algorithm='lu')
        >>> solver.solve([3.0, 5.0])
        array([15., -4.])
    """
    check_algorithm(algorithm)
    kind = classify(A, 'A')
    if kind == KIND_SYMBOLIC:
        return factor(A, kind, algorithm)
    return factor(value_matrix(A), kind, algorithm)
