"""
hptensor
========

Symbolic Hermite polynomial tensors (N-dimensional Hermite polynomials) in
one to three Euclidean dimensions, in the probabilist's or physicist's
normalization.

>>> import hptensor
>>> hptensor.HTC("xxy")
-y + x**2*y
"""

from .algorithms.backends import (DEFAULT_REGISTRY, AlgebraBackend,
                                  BackendRegistry, SymEngineBackend,
                                  SymPyBackend, get_backend, resolve_backend)
from .algorithms.polynomial import IndexCounts, hermite_coefficients
from .algorithms.tensor import EquivalenceClass, TensorEntry
from .algorithms.utils.exceptions import (BackendError, DomainError,
                                          HptensorError)
from .hpt import HT, HTC, SVHP, equivalence_class

__version__ = "0.1.0"

__all__ = [
    "SVHP",
    "HTC",
    "HT",
    "equivalence_class",
    "hermite_coefficients",
    "IndexCounts",
    "EquivalenceClass",
    "TensorEntry",
    "AlgebraBackend",
    "SymEngineBackend",
    "SymPyBackend",
    "BackendRegistry",
    "DEFAULT_REGISTRY",
    "get_backend",
    "resolve_backend",
    "HptensorError",
    "DomainError",
    "BackendError",
]
