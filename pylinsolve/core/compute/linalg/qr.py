"""
Column-pivoted QR decomposition.

Computes A[:, P] = Q R with Householder reflections (LAPACK geqp3 via
SciPy). The pivoting puts the largest remaining column first at each step,
so |diag(R)| is non-increasing and the numerical rank can be read off it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import qr, solve_triangular

from pylinsolve.core.compute.linalg._base import RealSolverMixin, prepare_matrix
from pylinsolve.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of column-pivoted QR decomposition.

    Attributes:
        Q: Orthogonal matrix (m x m)
        R: Upper triangular matrix (m x m)
        pivot: Column permutation such that A[:, pivot] = Q R
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    pivot: NDArray[np.intp]
    rank: int


def qr_cpu(A: NDArray[np.floating[Any]]) -> QRResult:
    """
    Column-pivoted QR decomposition using LAPACK (via SciPy).

    Args:
        A: Square matrix to decompose (m x m)

    Returns:
        QRResult with Q, R, pivot and numerical rank
    """
    Q, R, pivot = qr(A, pivoting=True, check_finite=False)

    # Determine numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R[0] > 0:
        # Tolerance based on matrix size and machine epsilon
        tol = max(A.shape) * np.finfo(A.dtype).eps * diag_R[0]
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, pivot=pivot, rank=rank)


@dataclass(frozen=True, repr=False, eq=False)
class QRSolver(RealSolverMixin):
    """
    Solve handle backed by column-pivoted QR.

    Attributes:
        factorization: The QRResult
        algorithm: 'qr'
    """
    _matrix: NDArray[np.floating[Any]]
    factorization: QRResult
    algorithm: str = 'qr'

    @classmethod
    def factor(cls, A: ArrayLike, name: str = 'A') -> QRSolver:
        """
        Factor a square matrix.

        Raises:
            SingularMatrixError: If A is rank-deficient
        """
        M = prepare_matrix(A, name)
        m = M.shape[0]
        result = qr_cpu(M)

        if result.rank < m:
            raise SingularMatrixError(
                f"{name} is rank-deficient: rank={result.rank}, expected={m}.",
                matrix_name=name,
                algorithm='qr',
                rank=result.rank,
                expected_rank=m,
            )
        return cls(_matrix=M, factorization=result)

    @property
    def rank(self) -> int:
        return self.factorization.rank

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Solve A x = rhs.

        The solution is computed as:
            A P = Q R
            z = R⁻¹ Q'rhs
            x[P] = z
        """
        b = self._prepare_rhs(rhs)
        f = self.factorization
        # Solve R @ z = Q'b using back substitution
        z = solve_triangular(f.R, f.Q.T @ b, lower=False, check_finite=False)
        x = np.empty_like(z)
        x[f.pivot] = z
        return x
