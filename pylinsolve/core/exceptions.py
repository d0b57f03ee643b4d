"""
Exception hierarchy for PyLinSolve.

All exceptions inherit from PyLinSolveError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinSolveError(Exception):
    """Base exception for all PyLinSolve errors."""
    pass


class ValidationError(PyLinSolveError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when A is not square, when b does not have as many rows as A,
    or when an array has the wrong number of dimensions.
    """
    pass


class UnsupportedCombinationError(ValidationError):
    """
    Scalar kinds (or kind and algorithm) cannot be combined.

    Raised before any numeric work when A and b have no common output
    kind (e.g. a symbolic A paired with a dual b), or when a symbolic
    matrix is paired with an algorithm that has no exact counterpart.

    Attributes:
        kind_a: Scalar kind of A
        kind_b: Scalar kind of b, if relevant
        algorithm: Decomposition algorithm, if relevant
    """

    def __init__(
        self,
        message: str,
        kind_a: str | None = None,
        kind_b: str | None = None,
        algorithm: str | None = None,
    ):
        super().__init__(message)
        self.kind_a = kind_a
        self.kind_b = kind_b
        self.algorithm = algorithm


class DerivativeError(ValidationError):
    """
    Derivative bookkeeping of dual matrices is inconsistent.

    Base class for derivative-size errors. Never silently zero-padded.
    """
    pass


class GradientSizeMismatchError(DerivativeError):
    """
    Two entries of one matrix carry derivative vectors of different lengths.

    Attributes:
        matrix_name: Name of the offending matrix ('A' or 'b')
        size: Derivative length of the offending entry
        other_size: Derivative length seen earlier in the same matrix
        index: Index of the offending entry, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        size: int | None = None,
        other_size: int | None = None,
        index: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.size = size
        self.other_size = other_size
        self.index = index


class VariableCountMismatchError(DerivativeError):
    """
    A and b carry derivatives for different numbers of variables.

    Attributes:
        n_a: Number of derivative variables in A
        n_b: Number of derivative variables in b
    """

    def __init__(self, message: str, n_a: int, n_b: int):
        super().__init__(message)
        self.n_a = n_a
        self.n_b = n_b


class NumericalError(PyLinSolveError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a decomposition cannot produce a usable factorization
    because the matrix is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        algorithm: Decomposition algorithm that failed
        rank: Numerical rank, if computed
        expected_rank: Expected rank (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        algorithm: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.algorithm = algorithm
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(SingularMatrixError):
    """
    Matrix is not positive definite.

    Raised when the Cholesky factorization fails. It is a
    SingularMatrixError in the sense that the requested algorithm cannot
    solve the system.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        algorithm: Decomposition algorithm that failed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        algorithm: str | None = None,
    ):
        super().__init__(message, matrix_name=matrix_name, algorithm=algorithm)
