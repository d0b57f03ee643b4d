"""
Scalar kind constants and the kind resolver for PyLinSolve.

This module is the SINGLE SOURCE OF TRUTH for scalar kind strings and the
only place where the kind of a matrix is inspected. Everything downstream
receives an already-resolved kind.

Usage:
    from pylinsolve.core.kinds import KIND_DUAL, classify, resolve_output_kind

    kind_A = classify(A, 'A')
    kind_b = classify(b, 'b')
    if resolve_output_kind(kind_A, kind_b) == KIND_DUAL:
        ...
"""

from typing import Any
import numpy as np
import sympy

from pylinsolve.core.exceptions import UnsupportedCombinationError, ValidationError
from pylinsolve.scalars.dual import Dual, REALS

# Plain floating-point entries
KIND_REAL = 'real'

# Forward-mode dual numbers (value + derivative vector)
KIND_DUAL = 'dual'

# Exact SymPy expressions
KIND_SYMBOLIC = 'symbolic'

# All kinds as a frozenset for validation
ALL_KINDS = frozenset({
    KIND_REAL,
    KIND_DUAL,
    KIND_SYMBOLIC,
})

# Output kind for every supported (kind of A, kind of b) pair
_PROMOTION = {
    (KIND_REAL, KIND_REAL): KIND_REAL,
    (KIND_REAL, KIND_DUAL): KIND_DUAL,
    (KIND_DUAL, KIND_REAL): KIND_DUAL,
    (KIND_DUAL, KIND_DUAL): KIND_DUAL,
    (KIND_SYMBOLIC, KIND_SYMBOLIC): KIND_SYMBOLIC,
}


def _entry_kind(entry: Any, name: str) -> str:
    if isinstance(entry, Dual):
        return KIND_DUAL
    if isinstance(entry, sympy.Basic):
        return KIND_SYMBOLIC
    if isinstance(entry, REALS) and not isinstance(entry, (bool, np.bool_)):
        return KIND_REAL
    raise ValidationError(
        f"{name}: unsupported entry type {type(entry).__name__}, "
        f"expected float, Dual or sympy expression"
    )


def classify(matrix: Any, name: str) -> str:
    """
    Determine the scalar kind of a matrix.

    Args:
        matrix: NumPy array, array-like, or sympy Matrix
        name: Parameter name for error messages

    Returns:
        One of KIND_REAL, KIND_DUAL, KIND_SYMBOLIC

    Raises:
        ValidationError: If entries are of an unsupported type, or if the
            matrix mixes entries of different kinds
    """
    if isinstance(matrix, sympy.MatrixBase):
        return KIND_SYMBOLIC

    try:
        arr = np.asarray(matrix)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if arr.dtype != object:
        if np.issubdtype(arr.dtype, np.complexfloating):
            raise ValidationError(f"{name}: complex dtype {arr.dtype} is not supported")
        if not np.issubdtype(arr.dtype, np.number):
            raise ValidationError(
                f"{name}: non-numeric dtype {arr.dtype}, expected numeric data"
            )
        return KIND_REAL

    kinds = {_entry_kind(entry, name) for entry in arr.flat}
    if not kinds:
        return KIND_REAL
    # Numbers inside a symbolic matrix are symbolic constants.
    if kinds == {KIND_REAL, KIND_SYMBOLIC}:
        return KIND_SYMBOLIC
    if len(kinds) > 1:
        raise ValidationError(
            f"{name}: mixes entries of kinds {sorted(kinds)}; "
            f"every entry of a matrix must have the same kind"
        )
    return kinds.pop()


def resolve_output_kind(kind_a: str, kind_b: str) -> str:
    """
    Promote the kinds of A and b to the kind of the solution x.

    real + real -> real; real/dual + real/dual with at least one dual ->
    dual; symbolic + symbolic -> symbolic.

    Raises:
        ValueError: If either argument is not a known kind
        UnsupportedCombinationError: If the pair has no common kind
    """
    for kind in (kind_a, kind_b):
        if kind not in ALL_KINDS:
            raise ValueError(f"Unknown scalar kind: {kind!r}")
    try:
        return _PROMOTION[(kind_a, kind_b)]
    except KeyError:
        raise UnsupportedCombinationError(
            f"Cannot solve a system with {kind_a} A and {kind_b} b",
            kind_a=kind_a,
            kind_b=kind_b,
        ) from None
