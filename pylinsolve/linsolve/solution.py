"""
Linear solve solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsolve.core.kinds import KIND_DUAL
from pylinsolve.core.result import Result

if TYPE_CHECKING:
    from pylinsolve.linsolve.design import LinearSystemDesign


@dataclass(frozen=True)
class LinearSolveParams:
    """
    Parameter payload for a linear solve.

    This is the immutable data computed by backends.

    Attributes:
        x: Solution in the output kind: float array (real), object array
            of Dual (dual) or sympy.Matrix (symbolic)
        value: Value part of x as a float array (None for symbolic)
        derivatives: dx/dz_k stacked along axis 0, shape (n, *x.shape)
            (None unless dual)
    """
    x: Any
    value: NDArray[np.floating[Any]] | None
    derivatives: NDArray[np.floating[Any]] | None


@dataclass
class LinearSolveSolution:
    """
    User-facing linear solve results.

    Wraps the backend Result and the design it was computed from.
    """
    _result: Result[LinearSolveParams]
    _design: 'LinearSystemDesign'

    @property
    def x(self) -> Any:
        return self._result.params.x

    @property
    def value(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.value

    @property
    def derivatives(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.derivatives

    @property
    def kind(self) -> str:
        return self._design.kind

    @property
    def algorithm(self) -> str:
        return self._result.info['algorithm']

    @property
    def n_derivatives(self) -> int:
        return self._design.n_derivatives

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def residual(self) -> NDArray[np.floating[Any]]:
        """
        Value residual A·x − b.

        Only defined for real and dual solutions.

        Raises:
            TypeError: For symbolic solutions
        """
        if self.value is None:
            raise TypeError("residual() is not defined for symbolic solutions")
        return self._design.A_value @ self.value - self._design.b_value

    def summary(self) -> str:
        """Generate a short text report."""
        lines = [
            "Linear Solve Results",
            "=" * 60,
            f"Kind: {self.kind} (A: {self._design.kind_A}, b: {self._design.kind_b})",
            f"Algorithm: {self.algorithm}",
            f"System: {self._design.m} x {self._design.m}, {self._design.k} right-hand side(s)",
        ]
        if self.value is not None:
            lines.append(f"Residual max |A·x − b|: {float(np.max(np.abs(self.residual()))):.3e}")
        if self.kind == KIND_DUAL:
            lines.append(f"Derivative variables: {self.n_derivatives}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolveSolution(kind={self.kind!r}, algorithm={self.algorithm!r}, "
            f"m={self._design.m}, k={self._design.k}, n_derivatives={self.n_derivatives})"
        )
