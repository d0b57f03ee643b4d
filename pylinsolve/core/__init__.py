"""
Core infrastructure for PyLinSolve.

This module provides shared abstractions, utilities, and compute kernels
used by the linear solve domain module.

Key components:
    protocols: DecompositionHandle, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    kinds: Scalar kind constants and the kind resolver (import directly)
    compute: Timing and linear algebra kernels
"""

from pylinsolve.core.exceptions import (
    PyLinSolveError,
    ValidationError,
    DimensionError,
    UnsupportedCombinationError,
    DerivativeError,
    GradientSizeMismatchError,
    VariableCountMismatchError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)
from pylinsolve.core.protocols import DecompositionHandle, Backend
from pylinsolve.core.result import Result

__all__ = [
    # Protocols
    "DecompositionHandle",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSolveError",
    "ValidationError",
    "DimensionError",
    "UnsupportedCombinationError",
    "DerivativeError",
    "GradientSizeMismatchError",
    "VariableCountMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
