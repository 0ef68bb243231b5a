"""Public API for the :mod:`~hptensor.algorithms.polynomial` package.
"""

from .base import IndexCounts
from .hermite import _hermite_coefficients as hermite_coefficients

__all__ = [
    "IndexCounts",
    "hermite_coefficients",
]
