"""
Shared compute infrastructure for PyLinSolve.

IMPORTANT: This is NOT where solve backends live. Those go in
linsolve/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    linalg: Factorization kernels (Cholesky, LDLᵀ, QR, LU, symbolic Cholesky)
"""

from pylinsolve.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
