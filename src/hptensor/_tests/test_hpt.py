import random

import numpy as np
import pytest
import symengine as se
import sympy as sp

import hptensor
from hptensor import (HT, HTC, SVHP, BackendRegistry, DomainError,
                      EquivalenceClass, SymEngineBackend, SymPyBackend,
                      TensorEntry, equivalence_class)

# Preparations
# ------------

x, y, z = se.symbols("x y z")

He3x = x**3 - 3*x
He6x = x**6 - 15*x**4 + 45*x**2 - 15
He9x = x**9 - 36*x**7 + 378*x**5 - 1260*x**3 + 945*x

He3y = y**3 - 3*y
He6y = y**6 - 15*y**4 + 45*y**2 - 15
He9y = y**9 - 36*y**7 + 378*y**5 - 1260*y**3 + 945*y

He3z = z**3 - 3*z
He6z = z**6 - 15*z**4 + 45*z**2 - 15
He9z = z**9 - 36*z**7 + 378*z**5 - 1260*z**3 + 945*z

H_3x = 8*x**3 - 12*x
H_6x = 64*x**6 - 480*x**4 + 720*x**2 - 120
H_9x = 512*x**9 - 9216*x**7 + 48384*x**5 - 80640*x**3 + 30240*x

H_3y = 8*y**3 - 12*y
H_6y = 64*y**6 - 480*y**4 + 720*y**2 - 120
H_9y = 512*y**9 - 9216*y**7 + 48384*y**5 - 80640*y**3 + 30240*y

H_3z = 8*z**3 - 12*z
H_6z = 64*z**6 - 480*z**4 + 720*z**2 - 120
H_9z = 512*z**9 - 9216*z**7 + 48384*z**5 - 80640*z**3 + 30240*z

PROB = {1: (He3x, He6x, He9x), 2: (He3y, He6y, He9y), 3: (He3z, He6z, He9z)}
PHYS = {1: (H_3x, H_6x, H_9x), 2: (H_3y, H_6y, H_9y), 3: (H_3z, H_6z, H_9z)}


class _CountingBackend(SymEngineBackend):
    """SymEngine backend that records every arithmetic call."""

    def __init__(self):
        self.calls = 0

    def _count(self, result):
        self.calls += 1
        return result

    def constant(self, value):
        return self._count(super().constant(value))

    def power(self, poly, exponent):
        return self._count(super().power(poly, exponent))

    def multiply(self, lhs, rhs):
        return self._count(super().multiply(lhs, rhs))


# Single-variable polynomial tests
# --------------------------------

@pytest.mark.parametrize("be", ["se", "SymEngine", "sp", "SymPy"])
@pytest.mark.parametrize("axis", [1, 2, 3])
def test_svhp_probabilist(be, axis):
    for order, expected in zip((3, 6, 9), PROB[axis]):
        result = SVHP(order, axis=axis, probabilist=True, backend=be)
        assert hptensor.get_backend(be).to_sympy(result) == sp.expand(expected._sympy_())


@pytest.mark.parametrize("be", ["se", "SymEngine", "sp", "SymPy"])
@pytest.mark.parametrize("axis", [1, 2, 3])
def test_svhp_physicist(be, axis):
    for order, expected in zip((3, 6, 9), PHYS[axis]):
        result = SVHP(order, axis=axis, probabilist=False, backend=be)
        assert hptensor.get_backend(be).to_sympy(result) == sp.expand(expected._sympy_())


def test_svhp_defaults():
    assert SVHP(3) == se.expand(He3x)
    assert SVHP(0) == 1
    assert SVHP(0, probabilist=False) == 1
    assert SVHP(9, axis=3, backend="unknown") == se.expand(He9z)
    assert SVHP(6, axis=2, method="rodrigues") == se.expand(He6y)


# Hermite tensor component tests
# ------------------------------

@pytest.mark.parametrize("be", ["se", "sp"])
@pytest.mark.parametrize("probabilist", [True, False])
def test_htc_factorial_3d(be, probabilist):
    rng = random.Random(0)
    table = PROB if probabilist else PHYS
    backend = hptensor.get_backend(be)
    for X, nx in zip(table[1], (3, 6, 9)):
        for Y, ny in zip(table[2], (3, 6, 9)):
            for Z, nz in zip(table[3], (3, 6, 9)):
                raw = "x" * nx + "y" * ny + "z" * nz
                idx = "".join(rng.sample(raw, len(raw)))
                expected = sp.expand((X * Y * Z)._sympy_())
                assert backend.to_sympy(HTC(idx, dimension=3, probabilist=probabilist, backend=be)) == expected


def test_htc_permutation_invariance():
    assert HTC("xyx") == HTC("xxy") == HTC("yxx")
    assert HTC("xyx", backend="sp") == HTC("yxx", backend="sp")


def test_htc_dimension_masking():
    assert HTC("xyz", dimension=1) == x
    assert HTC("xyz", dimension=2) == x*y
    assert HTC("xyz", dimension=3) == x*y*z
    assert HTC("yyzz", dimension=1) == 1


def test_htc_default_dimension_is_two():
    assert HTC("xz") == HTC("x", dimension=3)


def test_htc_documented_examples():
    assert HTC("xzyxy", dimension=3) == se.expand(x**2*y**2*z - x**2*z - y**2*z + z)
    assert HTC("xzyxy", dimension=3, probabilist=False) == se.expand(
        32*x**2*y**2*z - 16*x**2*z - 16*y**2*z + 8*z
    )
    assert HTC("xxy") == se.expand(x**2*y - y)


# Hermite tensor tests
# --------------------

def test_ht_structure():
    H = HT(3, dimension=2)
    assert list(H) == ["xxx", "xxy", "xyy", "yyy"]
    assert all(isinstance(entry, TensorEntry) for entry in H.values())
    assert isinstance(H["xxy"].set, EquivalenceClass)
    assert H["xxy"].set == {"xxy", "xyx", "yxx"}
    assert H["xxy"].val == HTC("yxx")


@pytest.mark.parametrize("dimension", [1, 2, 3])
def test_ht_cardinalities(dimension):
    for n in range(0, 7):
        H = HT(n, dimension=dimension, backend="sp")
        assert sum(len(entry.set) for entry in H.values()) == dimension ** n


def test_equivalence_class_helper():
    assert equivalence_class("zxx", dimension=3) == {"xxz", "xzx", "zxx"}


# Validation tests
# ----------------

@pytest.mark.parametrize("call", [
    lambda be: SVHP(-1, backend=be),
    lambda be: SVHP(2, axis=0, backend=be),
    lambda be: SVHP(2, axis=4, backend=be),
    lambda be: SVHP(2, method="bogus", backend=be),
    lambda be: HTC("xy", dimension=0, backend=be),
    lambda be: HTC("xy", dimension=4, backend=be),
    lambda be: HTC("", dimension=2, method="bogus", backend=be),
    lambda be: HT(-1, backend=be),
    lambda be: HT(2, dimension=0, backend=be),
    lambda be: HT(2, dimension=4, backend=be),
    lambda be: HT(2, method="bogus", backend=be),
])
def test_validation_before_computation(call):
    be = _CountingBackend()
    with pytest.raises(DomainError):
        call(be)
    assert be.calls == 0


def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        SVHP(-3)


def test_registry_argument():
    registry = BackendRegistry.from_backends((SymEngineBackend, SymPyBackend), default="sp")
    assert isinstance(SVHP(2, backend="nope", registry=registry), sp.Poly)
    assert isinstance(HT(1, registry=registry)["x"].val, sp.Poly)


def test_numpy_integer_arguments():
    assert SVHP(np.int64(3), axis=np.int64(2)) == se.expand(He3y)
    assert HTC("xzz", dimension=np.int64(3)) == HTC("xzz", dimension=3)
    H = HT(np.int64(2), dimension=np.int8(3))
    assert list(H) == list(HT(2, dimension=3))


def test_equivalence_sets_union_to_all_indices():
    for dimension in (1, 2, 3):
        H = HT(4, dimension=dimension)
        union = frozenset().union(*(entry.set for entry in H.values()))
        assert len(union) == dimension ** 4
