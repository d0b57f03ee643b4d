"""
Cholesky (LLᵀ) and pivoted LDLᵀ factorizations.

Both read only the lower triangle of A, so a non-symmetric A is factored
as if its upper triangle mirrored the lower one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import LinAlgError, cho_factor, cho_solve, ldl, solve_banded, solve_triangular

from pylinsolve.core.compute.linalg._base import RealSolverMixin, prepare_matrix
from pylinsolve.core.exceptions import NotPositiveDefiniteError, SingularMatrixError


@dataclass(frozen=True, repr=False, eq=False)
class CholeskySolver(RealSolverMixin):
    """
    Cholesky factorization A = L Lᵀ.

    Attributes:
        L: Lower triangular factor (upper triangle holds scratch values)
        algorithm: 'cholesky'
    """
    _matrix: NDArray[np.floating[Any]]
    L: NDArray[np.floating[Any]]
    algorithm: str = 'cholesky'

    @classmethod
    def factor(cls, A: ArrayLike, name: str = 'A') -> CholeskySolver:
        """
        Factor a symmetric positive definite matrix.

        Raises:
            NotPositiveDefiniteError: If A is not positive definite
        """
        M = prepare_matrix(A, name)
        try:
            L, _ = cho_factor(M, lower=True, check_finite=False)
        except LinAlgError as e:
            raise NotPositiveDefiniteError(
                f"{name} is not positive definite, Cholesky factorization failed: {e}",
                matrix_name=name,
                algorithm='cholesky',
            ) from e
        L.setflags(write=False)
        return cls(_matrix=M, L=L)

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """Solve A x = rhs by forward and back substitution."""
        b = self._prepare_rhs(rhs)
        return cho_solve((self.L, True), b, check_finite=False)


@dataclass(frozen=True, repr=False, eq=False)
class LDLTSolver(RealSolverMixin):
    """
    Bunch-Kaufman factorization P A Pᵀ = L D Lᵀ.

    D is block diagonal with 1x1 and 2x2 blocks, so it is stored in
    banded form for O(m) solves.

    Attributes:
        L: Unit lower triangular factor (already row-permuted)
        D_banded: D in solve_banded layout (3 x m)
        perm: Row permutation such that L = lu[perm]
        rank: Numerical rank of D
        algorithm: 'ldlt'
    """
    _matrix: NDArray[np.floating[Any]]
    L: NDArray[np.floating[Any]]
    D_banded: NDArray[np.floating[Any]]
    perm: NDArray[np.intp]
    rank: int
    algorithm: str = 'ldlt'

    @classmethod
    def factor(cls, A: ArrayLike, name: str = 'A') -> LDLTSolver:
        """
        Factor a symmetric (possibly indefinite) matrix.

        Raises:
            SingularMatrixError: If D is numerically singular
        """
        M = prepare_matrix(A, name)
        m = M.shape[0]
        lu, d, perm = ldl(M, lower=True, check_finite=False)

        eigs = np.abs(np.linalg.eigvalsh(d))
        scale = eigs.max()
        tol = m * np.finfo(np.float64).eps * scale
        rank = int(np.sum(eigs > tol)) if scale > 0 else 0
        if rank < m:
            raise SingularMatrixError(
                f"{name} is singular, LDLT factorization found rank={rank}, expected={m}",
                matrix_name=name,
                algorithm='ldlt',
                rank=rank,
                expected_rank=m,
            )

        D_banded = np.zeros((3, m))
        D_banded[0, 1:] = np.diag(d, 1)
        D_banded[1] = np.diag(d)
        D_banded[2, :-1] = np.diag(d, -1)

        L = lu[perm]
        for arr in (L, D_banded, perm):
            arr.setflags(write=False)
        return cls(_matrix=M, L=L, D_banded=D_banded, perm=perm, rank=rank)

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """Solve A x = rhs through L, D, Lᵀ and the permutation."""
        b = self._prepare_rhs(rhs)
        y = solve_triangular(self.L, b[self.perm], lower=True, unit_diagonal=True,
                             check_finite=False)
        w = solve_banded((1, 1), self.D_banded, y, check_finite=False)
        v = solve_triangular(self.L.T, w, lower=False, unit_diagonal=True,
                             check_finite=False)
        x = np.empty_like(v)
        x[self.perm] = v
        return x
