"""
Derivative-size consistency checks for dual systems.

Every entry of a dual matrix carries either an empty derivative vector or a
vector of one common length n. These checks find n for A and for b and
reject any disagreement before a single solve is attempted. Nothing is ever
padded or truncated to make sizes agree.
"""

from typing import Any
import numpy as np

from pylinsolve.core.exceptions import GradientSizeMismatchError, VariableCountMismatchError
from pylinsolve.scalars.dual import Dual


def _entry_label(name: str, idx: tuple[int, ...]) -> str:
    return f"{name}({', '.join(str(i) for i in idx)})"


def derivative_size(M: Any, name: str) -> int:
    """
    Common non-zero derivative length of the entries of M.

    Args:
        M: Real array or object array of Dual
        name: Matrix name for error messages

    Returns:
        The shared derivative length, or 0 if every entry has an empty
        derivative vector (always 0 for a real matrix)

    Raises:
        GradientSizeMismatchError: If two entries have non-empty derivative
            vectors of different lengths
    """
    arr = np.asarray(M)
    if arr.dtype != object:
        return 0

    size = 0
    for idx, entry in np.ndenumerate(arr):
        if not isinstance(entry, Dual):
            continue
        n = entry.n_derivatives
        if n == 0:
            continue
        if size == 0:
            size = n
        elif n != size:
            raise GradientSizeMismatchError(
                f"{_entry_label(name, idx)} has size {n}, while another entry has size {size}",
                matrix_name=name,
                size=n,
                other_size=size,
                index=idx,
            )
    return size


def check_derivative_sizes(A: Any, b: Any) -> int:
    """
    Number of derivative variables shared by A and b.

    Returns:
        max(n_A, n_B); 0 means no derivative propagation is needed

    Raises:
        GradientSizeMismatchError: If A or b is internally inconsistent
        VariableCountMismatchError: If A and b both carry derivatives but
            for different numbers of variables
    """
    n_a = derivative_size(A, 'A')
    n_b = derivative_size(b, 'b')
    if n_a and n_b and n_a != n_b:
        raise VariableCountMismatchError(
            f"A contains derivatives for {n_a} variables, "
            f"while b contains derivatives for {n_b} variables",
            n_a=n_a,
            n_b=n_b,
        )
    return max(n_a, n_b)
