"""
hptensor.algorithms.tensor.enumeration
======================================

Enumeration of the distinct components of a Hermite polynomial tensor.

A rank-``n`` tensor in ``D`` dimensions has ``D**n`` components but only
``D`` multichoose ``n`` distinct ones: components whose indices are
permutations of each other share the same polynomial. Each distinct
component is reported once, keyed by its canonical index, together with the
class of index strings that map to it.
"""

from __future__ import annotations

from collections.abc import Set
from typing import Any, Dict, Iterator, NamedTuple

from sympy.utilities.iterables import multiset_permutations

from hptensor.algorithms.backends.base import _AlgebraBackend
from hptensor.algorithms.polynomial.base import (IndexCounts, _check_dimension,
                                                 _check_rank,
                                                 _canonical_counts,
                                                 _index_counts, _multichoose)
from hptensor.algorithms.polynomial.hermite import _check_method
from hptensor.algorithms.tensor.component import _component_from_counts
from hptensor.algorithms.utils.config import AXIS_LABELS
from hptensor.utils.log_config import logger


class EquivalenceClass(Set):
    """Index strings that are permutations of one canonical index.

    The class is described by its per-axis counts only; permutations are
    produced on demand in lexicographic order, never stored. It behaves as a
    read-only set of strings and compares equal to a built-in ``set`` or
    ``frozenset`` holding the same strings. Set operators (``|``, ``&``,
    ``-``, ``^``) return a ``frozenset``.

    Parameters
    ----------
    counts : IndexCounts
        Per-axis counts ``(ax, ay, az)`` of the canonical index.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: IndexCounts):
        self._counts = IndexCounts(*counts)

    @property
    def counts(self) -> IndexCounts:
        return self._counts

    @property
    def canonical(self) -> str:
        return self._counts.canonical()

    def __len__(self) -> int:
        return self._counts.multinomial()

    def __iter__(self) -> Iterator[str]:
        if self._counts.rank == 0:
            yield ""
            return
        for perm in multiset_permutations(list(self.canonical)):
            yield "".join(perm)

    def __contains__(self, item) -> bool:
        if not isinstance(item, str) or len(item) != self._counts.rank:
            return False
        if any(c not in AXIS_LABELS for c in item):
            return False
        return IndexCounts(*(item.count(label) for label in AXIS_LABELS)) == self._counts

    def __hash__(self) -> int:
        return self._hash()

    @classmethod
    def _from_iterable(cls, it) -> frozenset:
        # Results of set operators are not single permutation classes
        return frozenset(it)

    def materialize(self) -> frozenset:
        """Return every index string of the class as a ``frozenset``."""
        return frozenset(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.canonical}', size={len(self)})"


class TensorEntry(NamedTuple):
    """A distinct tensor component and the indices that share it."""
    val: Any
    set: EquivalenceClass

    @property
    def counts(self) -> IndexCounts:
        return self.set.counts


def _hermite_tensor(rank: int, dimension: int, probabilist: bool, backend: _AlgebraBackend, method: str = "explicit") -> Dict[str, TensorEntry]:
    """
    Return every distinct component of a Hermite polynomial tensor.

    Parameters
    ----------
    rank : int
        Tensor rank ``n >= 0``.
    dimension : int
        Euclidean dimension ``D`` in ``[1, 3]``.
    probabilist : bool
        Probabilist's (``True``) or physicist's (``False``) normalization.
    backend : :class:`~hptensor.algorithms.backends.base._AlgebraBackend`
        Algebra backend producing the polynomials.
    method : str, optional
        Single-variable construction, ``'explicit'`` or ``'rodrigues'``.

    Returns
    -------
    dict[str, TensorEntry]
        Canonical index to ``(val, set)``, with ``D`` multichoose ``n``
        entries ordered from the x-heaviest index to the last-axis-heaviest.
        Set sizes are the multinomial coefficients of the index counts and
        add up to ``D**n``.

    Raises
    ------
    :class:`~hptensor.algorithms.utils.exceptions.DomainError`
        If *rank* is negative or *dimension* is not in ``[1, 3]``.
    """
    rank = _check_rank(rank, "n")
    dimension = _check_dimension(dimension)
    _check_method(method)

    ret: Dict[str, TensorEntry] = {}
    for counts in _canonical_counts(rank, dimension):
        key = counts.canonical()
        val = _component_from_counts(counts, probabilist, backend, method)
        ret[key] = TensorEntry(val=val, set=EquivalenceClass(counts))

    logger.info(
        f"Hermite tensor of rank {rank} in {dimension}D: {len(ret)} distinct "
        f"components (expected {_multichoose(dimension, rank)}), {dimension ** rank} total"
    )
    return ret


def _equivalence_class(index, dimension: int) -> EquivalenceClass:
    """Return the class of index strings sharing *index*'s component."""
    return EquivalenceClass(_index_counts(index, dimension))
