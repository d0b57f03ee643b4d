"""
Symbolic backend: exact elimination over SymPy expressions.
"""

from typing import Any

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.protocols import DecompositionHandle
from pylinsolve.core.result import Result
from pylinsolve.linsolve.design import LinearSystemDesign
from pylinsolve.linsolve.solution import LinearSolveParams


class SymbolicBackend:
    """
    Solve a symbolic system exactly.

    The solution is a sympy.Matrix (a column vector when b was 1-D). No
    rounding is introduced; compare results with expr_equal.
    """

    def __init__(self, algorithm: str):
        self._algorithm = algorithm

    @property
    def name(self) -> str:
        return f'symbolic_{self._algorithm}'

    def solve(
        self,
        design: LinearSystemDesign,
        solver: DecompositionHandle,
        timer: Timer | None = None,
    ) -> Result[LinearSolveParams]:
        if timer is None:
            timer = Timer()
            timer.start()

        with timer.section('value_solve'):
            x = solver.solve(design.b)

        timer.stop()

        info: dict[str, Any] = {
            'algorithm': solver.algorithm,
            'kind': design.kind,
            'n_derivatives': 0,
        }

        return Result(
            params=LinearSolveParams(x=x, value=None, derivatives=None),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
