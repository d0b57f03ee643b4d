"""
Structural checks for the DecompositionHandle and Backend protocols.
"""

import numpy as np

from pylinsolve import solve_with
from pylinsolve.core.protocols import Backend, DecompositionHandle
from pylinsolve.linsolve.backends import DualBackend, RealBackend, SymbolicBackend


class _IdentityHandle:
    """A user-supplied handle that inherits from nothing."""

    algorithm = "identity"
    kind = "real"
    shape = (2, 2)
    matrix = np.eye(2)

    def solve(self, rhs):
        return np.asarray(rhs, dtype=float)


class TestProtocols:

    def test_foreign_handle_satisfies_protocol(self):
        assert isinstance(_IdentityHandle(), DecompositionHandle)

    def test_plain_object_is_not_a_handle(self):
        assert not isinstance(object(), DecompositionHandle)

    def test_backends_satisfy_protocol(self):
        for backend in (RealBackend("lu"), DualBackend("qr"), SymbolicBackend("cholesky")):
            assert isinstance(backend, Backend)

    def test_backend_names(self):
        assert RealBackend("lu").name == "real_lu"
        assert DualBackend("qr").name == "dual_qr"
        assert SymbolicBackend("cholesky").name == "symbolic_cholesky"

    def test_solve_with_foreign_handle(self, b_vec_dual):
        result = solve_with(_IdentityHandle(), np.eye(2), b_vec_dual)
        np.testing.assert_array_equal(result.value, [3.0, 5.0])
        np.testing.assert_array_equal(result.derivatives[:, 1], [4.0, 5.0, 6.0])
        assert result.backend_name == "dual_identity"
