"""Public API for the :mod:`~hptensor.algorithms.backends` package.
"""

from .base import _AlgebraBackend as AlgebraBackend
from .registry import (DEFAULT_REGISTRY, BackendRegistry, get_backend,
                       resolve_backend)
from .symengine_backend import _SymEngineBackend as SymEngineBackend
from .sympy_backend import _SymPyBackend as SymPyBackend

__all__ = [
    "AlgebraBackend",
    "BackendRegistry",
    "DEFAULT_REGISTRY",
    "SymEngineBackend",
    "SymPyBackend",
    "get_backend",
    "resolve_backend",
]
