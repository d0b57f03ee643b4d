"""
Forward-mode dual numbers.

A Dual pairs a real value with a vector of partial derivatives with respect
to a fixed, ordered set of independent variables. Arithmetic propagates the
derivatives by the usual chain rule, so object-dtype NumPy arrays of Duals
can be multiplied with ``@`` to check a solve.

An empty derivative vector means "no sensitivity recorded". It combines with
a vector of any length as a zero vector. Two non-empty vectors of different
lengths never combine: that raises GradientSizeMismatchError rather than
truncating or padding.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsolve.core.exceptions import GradientSizeMismatchError

REALS = (int, float, np.integer, np.floating)


class Dual:
    """
    Dual number with a dynamic-length derivative vector.

    Attributes:
        value: Real part
        derivatives: 1-D float64 array of partial derivatives (possibly empty)

    Examples:
        >>> x = Dual(2.0, [1.0, 0.0])
        >>> y = Dual(3.0, [0.0, 1.0])
        >>> x * y
        Dual(6.0, [3.0, 2.0])
    """

    __slots__ = ('value', 'derivatives')

    def __init__(self, value: float, derivatives: ArrayLike = ()) -> None:
        self.value = float(value)
        d = np.array(derivatives, dtype=np.float64).ravel()
        self.derivatives: NDArray[np.floating[Any]] = d

    @property
    def n_derivatives(self) -> int:
        """Length of the derivative vector."""
        return int(self.derivatives.size)

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Dual({self.value!r}, {self.derivatives.tolist()!r})"

    # === Arithmetic ===

    def __neg__(self) -> Dual:
        return Dual(-self.value, -self.derivatives)

    def __pos__(self) -> Dual:
        return Dual(self.value, self.derivatives.copy())

    def __add__(self, other: Any) -> Dual:
        if isinstance(other, Dual):
            d1, d2 = _align(self.derivatives, other.derivatives)
            return Dual(self.value + other.value, d1 + d2)
        if isinstance(other, REALS):
            return Dual(self.value + float(other), self.derivatives.copy())
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Dual:
        if isinstance(other, Dual):
            d1, d2 = _align(self.derivatives, other.derivatives)
            return Dual(self.value - other.value, d1 - d2)
        if isinstance(other, REALS):
            return Dual(self.value - float(other), self.derivatives.copy())
        return NotImplemented

    def __rsub__(self, other: Any) -> Dual:
        if isinstance(other, REALS):
            return Dual(float(other) - self.value, -self.derivatives)
        return NotImplemented

    def __mul__(self, other: Any) -> Dual:
        if isinstance(other, Dual):
            d1, d2 = _align(self.derivatives, other.derivatives)
            return Dual(self.value * other.value, other.value * d1 + self.value * d2)
        if isinstance(other, REALS):
            c = float(other)
            return Dual(self.value * c, self.derivatives * c)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Dual:
        if isinstance(other, Dual):
            d1, d2 = _align(self.derivatives, other.derivatives)
            q = self.value / other.value
            return Dual(q, (d1 - q * d2) / other.value)
        if isinstance(other, REALS):
            c = float(other)
            return Dual(self.value / c, self.derivatives / c)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Dual:
        if isinstance(other, REALS):
            c = float(other)
            q = c / self.value
            return Dual(q, -q * self.derivatives / self.value)
        return NotImplemented

    # === Comparison ===

    def __eq__(self, other: Any) -> bool:
        """Exact equality; an empty derivative vector equals all zeros."""
        if isinstance(other, REALS):
            other = Dual(float(other))
        if not isinstance(other, Dual):
            return NotImplemented
        if self.value != other.value:
            return False
        d1, d2 = _align(self.derivatives, other.derivatives)
        return bool(np.array_equal(d1, d2))

    __hash__ = None  # type: ignore[assignment]


def _align(
    d1: NDArray[np.floating[Any]],
    d2: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Return both derivative vectors at a common length."""
    n1, n2 = d1.size, d2.size
    if n1 == n2:
        return d1, d2
    if n1 == 0:
        return np.zeros(n2), d2
    if n2 == 0:
        return d1, np.zeros(n1)
    raise GradientSizeMismatchError(
        f"Cannot combine derivative vectors of size {n1} and {n2}",
        size=n2,
        other_size=n1,
    )


def value(x: Dual | float) -> float:
    """Real part of a dual or real scalar."""
    if isinstance(x, Dual):
        return x.value
    return float(x)


def derivatives(x: Dual | float) -> NDArray[np.floating[Any]]:
    """Derivative vector of a dual scalar (empty for a real scalar)."""
    if isinstance(x, Dual):
        return x.derivatives
    return np.zeros(0)


def make_dual(value: float, derivatives: ArrayLike = ()) -> Dual:
    """Construct a Dual from a value and a derivative vector."""
    return Dual(value, derivatives)
