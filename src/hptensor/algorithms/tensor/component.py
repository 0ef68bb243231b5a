"""
hptensor.algorithms.tensor.component
====================================

Assembly of a single Hermite tensor component.

A component depends only on the per-axis counts of its index: it is the
product of one single-variable Hermite polynomial per axis present, so every
permutation of an index yields the same polynomial.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from hptensor.algorithms.backends.base import _AlgebraBackend
from hptensor.algorithms.polynomial.base import IndexCounts, _index_counts
from hptensor.algorithms.polynomial.hermite import _check_method, _hermite
from hptensor.utils.log_config import logger


def _component_from_counts(counts: IndexCounts, probabilist: bool, backend: _AlgebraBackend, method: str = "explicit") -> Any:
    """Multiply the single-variable factors of *counts*; rank 0 gives ``1``."""
    result = backend.one()
    for axis, count in enumerate(counts, start=1):
        if count != 0:
            result = backend.multiply(result, _hermite(count, axis, probabilist, backend, method))
    return backend.normalize(result)


def _tensor_component(index: Union[str, Iterable, IndexCounts], dimension: int, probabilist: bool, backend: _AlgebraBackend, method: str = "explicit") -> Any:
    """
    Return the Hermite tensor component selected by *index*.

    Parameters
    ----------
    index : str or Iterable or IndexCounts
        Index labels (``'x'``, ``'y'``, ``'z'`` or axes 1-3). Unrecognized
        labels are ignored; labels of axes beyond *dimension* are masked.
    dimension : int
        Euclidean dimension in ``[1, 3]``.
    probabilist : bool
        Probabilist's (``True``) or physicist's (``False``) normalization.
    backend : :class:`~hptensor.algorithms.backends.base._AlgebraBackend`
        Algebra backend producing the polynomial.
    method : str, optional
        Single-variable construction, ``'explicit'`` or ``'rodrigues'``.

    Returns
    -------
    Any
        The component in *backend*'s canonical form.

    Raises
    ------
    :class:`~hptensor.algorithms.utils.exceptions.DomainError`
        If *dimension* is not in ``[1, 3]``.
    """
    counts = _index_counts(index, dimension)
    _check_method(method)
    logger.debug(f"Assembling component {counts.canonical()!r} (D={dimension})")
    return _component_from_counts(counts, probabilist, backend, method)
