"""
Wall-clock timing for the stages of a solve.

A solve is timed as a whole and by stage ('decomposition', 'value_solve',
'derivative_solve'). Backends receive the Timer started by solve() and add
their own stages to it.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total time plus named stage durations.

    A stage entered more than once accumulates. Stages are not required to
    be disjoint or to cover the total.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('decomposition'):
            solver = get_solver(A, algorithm='lu')
        with timer.section('value_solve'):
            x = solver.solve(b)
        timer.stop()
        timer.result()
        # {'total_seconds': 0.0012, 'decomposition': 0.0008, 'value_solve': 0.0001}
    """

    def __init__(self):
        self._stages: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @property
    def sections(self) -> dict[str, float]:
        """Stage durations recorded so far (a copy)."""
        return dict(self._stages)

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the body of the with-block as stage `name`.

        The duration is recorded even if the body raises.
        """
        t = time.perf_counter()
        try:
            yield
        finally:
            self._stages[name] = self._stages.get(name, 0.0) + (time.perf_counter() - t)

    def result(self) -> dict[str, float]:
        """
        Returns:
            {'total_seconds': ..., <stage>: ...}

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._stages}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block as a whole.

    Usage:
        with timed() as timer:
            solve(A, b, algorithm='qr')
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
