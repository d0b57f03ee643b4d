"""
Linear solve backends.

Available backends:
    RealBackend: real A and b, one solve
    DualBackend: dual A and/or b, one value solve plus one solve per variable
    SymbolicBackend: symbolic A and b, exact solve
"""

from pylinsolve.linsolve.backends.real import RealBackend
from pylinsolve.linsolve.backends.dual import DualBackend
from pylinsolve.linsolve.backends.symbolic import SymbolicBackend

__all__ = [
    "RealBackend",
    "DualBackend",
    "SymbolicBackend",
]
