"""
Real backend: A and b are plain floating-point matrices.
"""

from typing import Any

from pylinsolve.core.compute.timing import Timer
from pylinsolve.core.protocols import DecompositionHandle
from pylinsolve.core.result import Result
from pylinsolve.linsolve.design import LinearSystemDesign
from pylinsolve.linsolve.solution import LinearSolveParams


class RealBackend:
    """
    Solve a real system with one call to the handle.

    Implements the Backend protocol for LinearSystemDesign -> LinearSolveParams.
    """

    def __init__(self, algorithm: str):
        self._algorithm = algorithm

    @property
    def name(self) -> str:
        return f'real_{self._algorithm}'

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
            x = solver.solve(design.b_value)

        timer.stop()

        info: dict[str, Any] = {
            'algorithm': solver.algorithm,
            'kind': design.kind,
            'n_derivatives': 0,
        }

        return Result(
            params=LinearSolveParams(x=x, value=x, derivatives=None),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
