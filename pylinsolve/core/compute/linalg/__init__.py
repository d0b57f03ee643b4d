"""
Linear algebra kernels for PyLinSolve.

Each kernel is a factorization handle: a frozen object built once by
`factor(A)` and reused for any number of right-hand sides with `solve(rhs)`.

All kernels follow these conventions:
    - Real kernels use SciPy (LAPACK under the hood)
    - The symbolic kernel uses SymPy exact arithmetic
    - Factorization failures raise immediately with the algorithm name

Submodules:
    cholesky: Cholesky (LLᵀ) and Bunch-Kaufman LDLᵀ
    qr: Column-pivoted Householder QR
    lu: Partially pivoted LU
    symbolic: Exact Cholesky over SymPy expressions
"""

from pylinsolve.core.compute.linalg.cholesky import CholeskySolver, LDLTSolver
from pylinsolve.core.compute.linalg.qr import QRResult, QRSolver, qr_cpu
from pylinsolve.core.compute.linalg.lu import LUSolver
from pylinsolve.core.compute.linalg.symbolic import SymbolicCholeskySolver

__all__ = [
    "CholeskySolver",
    "LDLTSolver",
    "QRResult",
    "QRSolver",
    "qr_cpu",
    "LUSolver",
    "SymbolicCholeskySolver",
]
