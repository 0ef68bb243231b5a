""" Public API for the :mod:`~hptensor.algorithms` package.
"""

from .backends import (BackendRegistry, get_backend, resolve_backend)
from .polynomial import IndexCounts
from .tensor import EquivalenceClass, TensorEntry
from .utils.exceptions import BackendError, DomainError, HptensorError

__all__ = [
    "BackendRegistry",
    "get_backend",
    "resolve_backend",
    "IndexCounts",
    "EquivalenceClass",
    "TensorEntry",
    "BackendError",
    "DomainError",
    "HptensorError",
]
