"""
Conversion between dual matrices and their value/derivative parts.

The value projector (value_matrix) strips derivative information from a
real or dual matrix. The remaining helpers build dual matrices from plain
arrays and pull derivative slices back out, so callers never loop over
entries themselves.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
import sympy

from pylinsolve.core.exceptions import (
    DimensionError,
    GradientSizeMismatchError,
    ValidationError,
)
from pylinsolve.scalars.dual import Dual


def _as_object_or_float(M: ArrayLike) -> NDArray:
    arr = np.asarray(M)
    if arr.dtype != object:
        return arr.astype(np.float64)
    return arr


def value_matrix(M: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Project a real or dual matrix onto its values.

    Args:
        M: Real array or object array of Dual

    Returns:
        float64 array of the same shape. A new array even for real input.

    Raises:
        ValidationError: If an entry is neither real nor Dual (symbolic
            entries included)
    """
    arr = _as_object_or_float(M)
    if arr.dtype != object:
        return arr.copy()
    out = np.empty(arr.shape, dtype=np.float64)
    for idx, entry in np.ndenumerate(arr):
        if isinstance(entry, Dual):
            out[idx] = entry.value
        elif isinstance(entry, sympy.Basic):
            raise ValidationError(
                f"entry {idx}: symbolic entries have no floating-point value"
            )
        else:
            try:
                out[idx] = float(entry)
            except TypeError as e:
                raise ValidationError(
                    f"entry {idx}: cannot take the value of {type(entry).__name__}"
                ) from e
    return out


def derivative_matrix(M: ArrayLike, n: int) -> NDArray[np.floating[Any]]:
    """
    Stack the per-variable derivative slices of a matrix.

    Args:
        M: Real array or object array of Dual
        n: Number of derivative variables. Every non-empty derivative
           vector in M must have exactly this length.

    Returns:
        float64 array of shape (n, *M.shape). Slice k holds dM/dz_k.
        Entries with an empty derivative vector (and real matrices)
        contribute zeros.

    Raises:
        GradientSizeMismatchError: If a non-empty derivative vector has a
            length other than n
    """
    arr = _as_object_or_float(M)
    out = np.zeros((n,) + arr.shape, dtype=np.float64)
    if arr.dtype != object or n == 0:
        return out
    for idx, entry in np.ndenumerate(arr):
        if not isinstance(entry, Dual) or entry.n_derivatives == 0:
            continue
        if entry.n_derivatives != n:
            raise GradientSizeMismatchError(
                f"entry {idx} has {entry.n_derivatives} derivatives, expected {n}",
                size=entry.n_derivatives,
                other_size=n,
                index=idx,
            )
        out[(slice(None),) + idx] = entry.derivatives
    return out


def make_dual_matrix(
    values: ArrayLike,
    derivatives: ArrayLike | None = None,
) -> NDArray[np.object_]:
    """
    Build a dual matrix from values and per-entry derivatives.

    Args:
        values: Real array of any shape S
        derivatives: Array of shape S + (n,) holding each entry's derivative
            vector, or None for empty derivative vectors everywhere

    Returns:
        Object array of Dual with shape S

    Example:
        >>> b = make_dual_matrix([3.0, 5.0], [[1, 2, 3], [4, 5, 6]])
        >>> b[1]
        Dual(5.0, [4.0, 5.0, 6.0])
    """
    vals = np.asarray(values, dtype=np.float64)
    out = np.empty(vals.shape, dtype=object)
    if derivatives is None:
        for idx, v in np.ndenumerate(vals):
            out[idx] = Dual(v)
        return out

    ders = np.asarray(derivatives, dtype=np.float64)
    if ders.shape[:-1] != vals.shape or ders.ndim != vals.ndim + 1:
        raise DimensionError(
            f"derivatives: expected shape {vals.shape} + (n,), got {ders.shape}"
        )
    for idx, v in np.ndenumerate(vals):
        out[idx] = Dual(v, ders[idx])
    return out


def to_dual(values: ArrayLike) -> NDArray[np.object_]:
    """
    Cast a matrix to a dual matrix.

    Real entries become Dual with an empty derivative vector. Dual entries
    are copied with their derivatives intact.
    """
    arr = _as_object_or_float(values)
    if arr.dtype != object:
        return make_dual_matrix(arr)
    out = np.empty(arr.shape, dtype=object)
    for idx, entry in np.ndenumerate(arr):
        if isinstance(entry, Dual):
            out[idx] = Dual(entry.value, entry.derivatives)
        else:
            out[idx] = Dual(value_matrix(entry))
    return out


def gradient_matrix(v: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Jacobian of a dual vector.

    Args:
        v: 1-D object array of Dual with a consistent derivative length
           (empty vectors allowed)

    Returns:
        float64 array of shape (m, n)
    """
    arr = _as_object_or_float(v)
    if arr.ndim != 1:
        raise DimensionError(f"v: expected 1D array, got {arr.ndim}D with shape {arr.shape}")
    n = 0
    if arr.dtype == object:
        n = max((e.n_derivatives for e in arr if isinstance(e, Dual)), default=0)
    return derivative_matrix(arr, n).T
