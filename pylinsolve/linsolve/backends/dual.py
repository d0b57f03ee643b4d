"""
Dual backend: forward-mode derivatives through a linear solve.

Differentiating A(z) x(z) = b(z) with respect to an independent variable
z_k gives

    A ∂x/∂z_k = ∂b/∂z_k − (∂A/∂z_k) x

so each derivative slice of x is one more solve with the SAME factorization
of the value of A. The cost is one O(m³) factorization plus n O(m²)
solves, and no decomposition algorithm needs its own derivative rules.
"""

from typing import Any
import numpy as np

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.protocols import DecompositionHandle
from pylinsolve.core.result import Result
from pylinsolve.linsolve.design import LinearSystemDesign
from pylinsolve.linsolve.solution import LinearSolveParams
from pylinsolve.scalars.conversion import make_dual_matrix


class DualBackend:
    """
    Solve a system where A and/or b carry dual numbers.

    Implements the Backend protocol for LinearSystemDesign -> LinearSolveParams.
    """

    def __init__(self, algorithm: str):
        self._algorithm = algorithm

    @property
    def name(self) -> str:
        return f'dual_{self._algorithm}'

    def solve(
        self,
        design: LinearSystemDesign,
        solver: DecompositionHandle,
        timer: Timer | None = None,
    ) -> Result[LinearSolveParams]:
        """
        Solve for the value of x, then for each derivative slice.

        Algorithm:
            1. x_val = solve(b_val)
            2. For each k: dx_k = solve(∂b_k − ∂A_k x_val)
            3. x[i] = Dual(x_val[i], (dx_0[i], ..., dx_{n-1}[i]))

        Args:
            design: Validated dual design (derivative sizes already checked)
            solver: Factorization of the value of A

        Returns:
            Result containing LinearSolveParams
        """
        if timer is None:
            timer = Timer()
            timer.start()

        warnings: list[str] = []
        n = design.n_derivatives

        # A singular value of A fails here, before any derivative work
        with timer.section('value_solve'):
            x_val = solver.solve(design.b_value)

        with timer.section('derivative_solve'):
            dA = design.A_derivatives()
            db = design.b_derivatives()
            dx = np.empty((n,) + x_val.shape, dtype=np.float64)
            for k in range(n):
                rhs = db[k] - dA[k] @ x_val
                dx[k] = solver.solve(rhs)

        if n == 0:
            x = make_dual_matrix(x_val)
            warnings.append(
                "no derivative information recorded in A or b; "
                "derivatives of x are empty"
            )
        else:
            x = make_dual_matrix(x_val, np.moveaxis(dx, 0, -1))

        timer.stop()

        info: dict[str, Any] = {
            'algorithm': solver.algorithm,
            'kind': design.kind,
            'n_derivatives': n,
            'n_solves': n + 1,
        }

        return Result(
            params=LinearSolveParams(x=x, value=x_val, derivatives=dx),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
