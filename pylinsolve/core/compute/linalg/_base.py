"""
Shared plumbing for real-valued factorization handles.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.kinds import KIND_REAL
from pylinsolve.core.validation import (
    check_array,
    check_consistent_rows,
    check_finite,
    check_ndim,
    check_square,
)


def prepare_matrix(A: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate a real square matrix and return a read-only float64 copy."""
    arr = np.array(check_array(A, name), dtype=np.float64, copy=True)
    check_square(arr.shape, name)
    check_finite(arr, name)
    arr.setflags(write=False)
    return arr


class RealSolverMixin:
    """
    Common accessors for handles bound to a real matrix.

    Subclasses are frozen dataclasses with `_matrix` and `algorithm` fields.
    """

    _matrix: NDArray[np.floating[Any]]

    @property
    def kind(self) -> str:
        return KIND_REAL

    @property
    def shape(self) -> tuple[int, int]:
        return self._matrix.shape

    @property
    def matrix(self) -> NDArray[np.floating[Any]]:
        return self._matrix

    def _prepare_rhs(self, rhs: ArrayLike) -> NDArray[np.floating[Any]]:
        arr = check_array(rhs, 'rhs')
        check_ndim(arr.shape, (1, 2), 'rhs')
        check_consistent_rows(self._matrix.shape, arr.shape, names=('A', 'rhs'))
        return arr

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape})"
