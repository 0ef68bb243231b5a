"""
hptensor.algorithms.utils.config
================================

Package-wide constants.
"""

FASTMATH = False  # Global flag for Numba's fastmath option

AXIS_LABELS = "xyz"  # Axis 1, 2, 3
MAX_DIMENSION = 3

DEFAULT_DIMENSION = 2
DEFAULT_PROBABILIST = True
DEFAULT_BACKEND = "se"  # SymEngine is faster than the SymPy ring backend
DEFAULT_METHOD = "explicit"
