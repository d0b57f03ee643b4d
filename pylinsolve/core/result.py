"""
Result envelope returned by every solve backend.

Backends differ only in their payload; the envelope around it (metadata,
stage timings, backend name, non-fatal warnings) is the same for all of
them, so LinearSolveSolution and the tests read it uniformly.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen output of one backend run.

    Attributes:
        params: Backend payload (for linear solves, LinearSolveParams)
        info: Metadata such as 'algorithm', 'kind', 'n_derivatives'
        timing: Timer.result() of the run, or None when not timed
        backend_name: '{kind}_{algorithm}' of the producing backend
        warnings: Non-fatal diagnostics, in the order they were raised

    Example:
        >>> Result(
        ...     params=LinearSolveParams(x=x, value=x, derivatives=None),
        ...     info={'algorithm': 'lu', 'kind': 'real'},
        ...     timing=None,
        ...     backend_name='real_lu',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if some warning contains substring."""
        return any(substring in w for w in self.warnings)
