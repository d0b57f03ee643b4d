"""
Input checks for real matrices and for the shapes of A and b.

Each check tests one property and raises with the offending name and the
actual value. Nothing is repaired: a bad input is reported, never reshaped,
padded or cast beyond int -> float.

Shape checks take a shape tuple rather than an array so that real, dual
(object) and sympy matrices share them.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.exceptions import DimensionError, ValidationError


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert a real array-like to a floating-point ndarray.

    Object arrays are refused: dual and symbolic matrices are classified
    before they could reach this point.

    Args:
        array: Real array-like
        name: Parameter name for error messages

    Returns:
        ndarray with a floating dtype (integers become float64)

    Raises:
        ValidationError: If the input is not a numeric array
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: got object dtype, expected a real numeric array"
        )
    if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {arr.dtype}, expected real numbers"
        )
    if np.issubdtype(arr.dtype, np.floating):
        return arr
    return arr.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Raises:
        ValidationError: If any entry is NaN or infinite
    """
    finite = np.isfinite(array)
    if finite.all():
        return
    n_nan = int(np.isnan(array).sum())
    n_inf = int(array.size - finite.sum()) - n_nan
    raise ValidationError(
        f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
    )


def check_ndim(shape: tuple[int, ...], ndim: int | tuple[int, ...], name: str) -> None:
    """
    Verify a shape has one of the allowed numbers of dimensions.

    Args:
        shape: Shape to check
        ndim: Required number of dimensions, or a tuple of allowed values
        name: Parameter name for error messages

    Raises:
        DimensionError: If the shape has the wrong number of dimensions
    """
    allowed = (ndim,) if isinstance(ndim, int) else ndim
    if len(shape) not in allowed:
        expected = " or ".join(f"{d}D" for d in allowed)
        raise DimensionError(
            f"{name}: expected {expected} array, got {len(shape)}D with shape {shape}"
        )


def check_square(shape: tuple[int, ...], name: str) -> None:
    """
    Verify a 2D shape is square and non-empty.

    Raises:
        DimensionError: If rows != columns or the matrix is empty
    """
    check_ndim(shape, 2, name)
    rows, cols = shape
    if rows != cols:
        raise DimensionError(f"{name}: expected square matrix, got shape {shape}")
    if rows == 0:
        raise DimensionError(f"{name}: matrix is empty")


def check_consistent_rows(
    *shapes: tuple[int, ...],
    names: tuple[str, ...]
) -> None:
    """
    Verify all shapes have the same number of rows (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of shapes
        DimensionError: If shapes have inconsistent row counts
    """
    if len(shapes) != len(names):
        raise ValueError(
            f"Number of shapes ({len(shapes)}) must match number of names ({len(names)})"
        )

    if len(shapes) < 2:
        return

    rows = [shape[0] for shape in shapes]
    if len(set(rows)) > 1:
        details = ", ".join(f"{name}={n}" for name, n in zip(names, rows))
        raise DimensionError(f"Inconsistent row counts: {details}")


def check_min_columns(shape: tuple[int, ...], min_columns: int, name: str) -> None:
    """
    Verify a 1D or 2D shape has at least min_columns columns.

    A 1D shape counts as a single column.

    Raises:
        DimensionError: If there are fewer than min_columns columns
    """
    k = shape[1] if len(shape) == 2 else 1
    if k < min_columns:
        raise DimensionError(
            f"{name}: requires at least {min_columns} columns, got {k}"
        )
