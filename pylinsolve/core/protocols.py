"""
Core protocols for PyLinSolve.

These define structural interfaces that concrete implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
a caller can supply its own factorization object without inheriting from
anything in this package.

Design Principles:
    - Minimal contracts: a handle solves, a backend produces a Result
    - Algorithms are parameters: nothing here knows about LU or QR
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class DecompositionHandle(Protocol):
    """
    A factorization bound to one matrix and one algorithm.

    The handle owns its factorization arrays, is immutable after
    construction, and can solve for any number of right-hand sides.
    Construction fails (SingularMatrixError / NotPositiveDefiniteError)
    when the algorithm cannot factor the matrix.
    """

    @property
    def algorithm(self) -> str:
        """Algorithm identifier ('cholesky', 'ldlt', 'qr', 'lu')."""
        ...

    @property
    def kind(self) -> str:
        """Scalar kind of the bound matrix ('real' or 'symbolic')."""
        ...

    @property
    def shape(self) -> tuple[int, int]:
        """Shape of the bound matrix."""
        ...

    @property
    def matrix(self) -> Any:
        """The bound matrix (read-only copy for real handles)."""
        ...

    def solve(self, rhs: Any) -> Any:
        """
        Solve (bound matrix) @ x = rhs.

        Args:
            rhs: Right-hand side of shape (m,) or (m, k)

        Returns:
            x with the same shape as rhs
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for solve backends.

    Each backend knows how to take a validated design and a decomposition
    handle and produce a parameter payload. Backends are stateless.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{kind}_{algorithm}'
        Examples: 'real_lu', 'dual_cholesky', 'symbolic_cholesky'
        """
        ...

    def solve(self, design: D, solver: DecompositionHandle) -> 'Result[P]':
        """
        Execute the solve.

        Args:
            design: Validated linear system design
            solver: Factorization of the (value of the) system matrix

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
