"""Public API for the :mod:`~hptensor.algorithms.tensor` package.
"""

from .enumeration import EquivalenceClass, TensorEntry

__all__ = [
    "EquivalenceClass",
    "TensorEntry",
]
