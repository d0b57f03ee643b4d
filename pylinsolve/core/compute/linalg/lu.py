"""
LU decomposition with partial (row) pivoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pylinsolve.core.compute.linalg._base import RealSolverMixin, prepare_matrix
from pylinsolve.core.exceptions import SingularMatrixError


@dataclass(frozen=True, repr=False, eq=False)
class LUSolver(RealSolverMixin):
    """
    Factorization P A = L U.

    Attributes:
        lu: L (unit diagonal, below) and U (on and above) packed together
        piv: LAPACK pivot indices
        algorithm: 'lu'
    """
    _matrix: NDArray[np.floating[Any]]
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.int32]
    algorithm: str = 'lu'

    @classmethod
    def factor(cls, A: ArrayLike, name: str = 'A') -> LUSolver:
        """
        Factor a square matrix.

        Raises:
            SingularMatrixError: If U has an exactly zero pivot
        """
        M = prepare_matrix(A, name)
        m = M.shape[0]
        with warnings.catch_warnings():
            # A zero pivot is reported below as SingularMatrixError
            warnings.simplefilter('ignore', LinAlgWarning)
            lu, piv = lu_factor(M, check_finite=False)

        rank = int(np.count_nonzero(np.diag(lu)))
        if rank < m:
            raise SingularMatrixError(
                f"{name} is singular: LU factorization has {m - rank} zero pivot(s)",
                matrix_name=name,
                algorithm='lu',
                rank=rank,
                expected_rank=m,
            )
        lu.setflags(write=False)
        piv.setflags(write=False)
        return cls(_matrix=M, lu=lu, piv=piv)

    def solve(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        """Solve A x = rhs with the stored factors."""
        b = self._prepare_rhs(rhs)
        return lu_solve((self.lu, self.piv), b, check_finite=False)
