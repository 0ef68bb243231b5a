"""
hptensor.algorithms.polynomial.base
===================================

Index bookkeeping for Hermite tensor components.

A tensor index is a multiset of axis labels; it is identified by its
per-axis counts ``(ax, ay, az)``. The canonical string form lists the x's,
then the y's, then the z's.

The lookup tables follow the usual monomial-table layout: ``psi[d, n]``
counts the distinct count triples of total ``n`` over ``d`` axes, and
``clmo[n]`` lists them in canonical order, packed into a single integer.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, NamedTuple, Union

import numpy as np
from numba import njit

from hptensor.algorithms.utils.config import (AXIS_LABELS, FASTMATH,
                                              MAX_DIMENSION)
from hptensor.algorithms.utils.exceptions import DomainError

#  21 bits for each of the y and z counts; the x count is implied by the rank.
#
#  ┌─────────┬────────┬────────┐
#  │ bits    │ 0-20   │ 21-41  │
#  │ field   │ ay     │ az     │
#  └─────────┴────────┴────────┘

_COUNT_BITS = 21
_COUNT_MASK = (1 << _COUNT_BITS) - 1
_MAX_RANK = _COUNT_MASK


class IndexCounts(NamedTuple):
    """Per-axis occurrence counts of a tensor index."""
    ax: int = 0
    ay: int = 0
    az: int = 0

    @property
    def rank(self) -> int:
        return self.ax + self.ay + self.az

    def canonical(self) -> str:
        """Return the canonical index string, e.g. ``'xxyz'``."""
        return "".join(label * count for label, count in zip(AXIS_LABELS, self))

    def multinomial(self) -> int:
        """Number of distinct orderings of the index."""
        return _multinomial(self)


def _check_dimension(dimension: int) -> int:
    if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral):
        raise DomainError(f"dimension D = {dimension!r} is not an integer in the valid domain [1, {MAX_DIMENSION}]")
    if dimension <= 0 or dimension > MAX_DIMENSION:
        raise DomainError(f"dimension D = {dimension} is outside the valid domain [1, {MAX_DIMENSION}]")
    return int(dimension)


def _check_rank(rank: int, name: str = "n") -> int:
    if isinstance(rank, bool) or not isinstance(rank, numbers.Integral):
        raise DomainError(f"{name} = {rank!r} is not an integer in the valid domain [0, inf)")
    if rank < 0:
        raise DomainError(f"{name} = {rank} outside the valid domain [0, inf)")
    return int(rank)


def _label_axis(label) -> int:
    """Return the axis (1-3) named by *label*, or 0 if it names none."""
    if isinstance(label, str):
        pos = AXIS_LABELS.find(label) if len(label) == 1 else -1
        return pos + 1
    if isinstance(label, numbers.Integral) and not isinstance(label, bool):
        return int(label) if 1 <= label <= MAX_DIMENSION else 0
    return 0


def _index_counts(index: Union[str, Iterable, IndexCounts], dimension: int) -> IndexCounts:
    """Count the axis labels of *index*, masking axes above *dimension*.

    Parameters
    ----------
    index : str or Iterable or IndexCounts
        Axis labels, either as characters ``'x'``, ``'y'``, ``'z'`` or as
        integer axes 1-3. Any other entry is ignored.
    dimension : int
        Euclidean dimension in ``[1, 3]``. Labels of axes beyond it are
        treated as absent.

    Returns
    -------
    IndexCounts
        The masked ``(ax, ay, az)`` counts.
    """
    dimension = _check_dimension(dimension)
    if isinstance(index, IndexCounts):
        counts = list(index)
    else:
        counts = [0, 0, 0]
        for label in index:
            axis = _label_axis(label)
            if axis:
                counts[axis - 1] += 1
    for axis in range(dimension, MAX_DIMENSION):
        counts[axis] = 0
    return IndexCounts(*counts)


def _multichoose(dimension: int, rank: int) -> int:
    """Number of multisets of size *rank* drawn from *dimension* symbols."""
    if dimension == 0:
        return 1 if rank == 0 else 0
    return math.comb(dimension + rank - 1, rank)


def _multinomial(counts: Iterable[int]) -> int:
    """Return ``(sum k)! / prod(k!)`` as an exact integer."""
    ks = sorted(k for k in counts if k)
    total, result = 0, 1
    for k in ks:
        total += k
        result *= math.comb(total, k)
    return result


def _init_index_tables(max_rank: int, dimension: int = MAX_DIMENSION):
    """
    Initialize lookup tables of canonical tensor indices.

    Parameters
    ----------
    max_rank : int
        Largest tensor rank to tabulate.
    dimension : int, optional
        Number of active axes (1-3). Default is 3.

    Returns
    -------
    psi : numpy.ndarray
        2D array where ``psi[d, n]`` is the number of distinct indices of
        rank ``n`` over ``d`` axes. Shape is ``(dimension+1, max_rank+1)``.
    clmo : list of numpy.ndarray
        ``clmo[n]`` holds the packed ``(ay, az)`` counts of every canonical
        index of rank ``n``, ordered by decreasing x count then decreasing
        y count.
    """
    max_rank = _check_rank(max_rank, "max_rank")
    dimension = _check_dimension(dimension)
    _check_table_rank(max_rank, "max_rank")

    psi = np.zeros((dimension + 1, max_rank + 1), dtype=np.int64)
    for d in range(1, dimension + 1):
        for n in range(max_rank + 1):
            psi[d, n] = _multichoose(d, n)
    psi[0, 0] = 1

    clmo = [_index_table(n, dimension) for n in range(max_rank + 1)]
    return psi, clmo


def _check_table_rank(rank: int, name: str) -> None:
    if rank > _MAX_RANK:
        raise DomainError(f"{name} = {rank} outside the valid domain [0, {_MAX_RANK}]")


def _index_table(rank: int, dimension: int) -> np.ndarray:
    """Packed ``(ay, az)`` counts of every canonical index of one rank."""
    arr = np.empty(_multichoose(dimension, rank), dtype=np.int64)
    idx = 0
    for ax in range(rank, -1, -1):
        if dimension == 1:
            arr[idx] = 0
            break
        for ay in range(rank - ax, -1, -1):
            az = rank - ax - ay
            if dimension == 2 and az != 0:
                continue
            arr[idx] = _pack_counts(ay, az)
            idx += 1
    return arr


@njit(fastmath=FASTMATH, cache=False)
def _pack_counts(ay: int, az: int) -> int:
    return (ay & _COUNT_MASK) | ((az & _COUNT_MASK) << _COUNT_BITS)


@njit(fastmath=FASTMATH, cache=False)
def _decode_counts(pos: int, rank: int, table: np.ndarray) -> np.ndarray:
    """
    Decode the count triple stored at *pos* of a rank's table.

    Parameters
    ----------
    pos : int
        Position in ``clmo[rank]``.
    rank : int
        Tensor rank the table belongs to.
    table : numpy.ndarray
        ``clmo[rank]`` as returned by :func:`_init_index_tables`.

    Returns
    -------
    numpy.ndarray
        ``[ax, ay, az]`` with ``ax + ay + az == rank``.
    """
    packed = table[pos]
    k = np.empty(3, dtype=np.int64)
    k[1] = packed & _COUNT_MASK
    k[2] = (packed >> _COUNT_BITS) & _COUNT_MASK
    k[0] = rank - k[1] - k[2]
    return k


def _canonical_counts(rank: int, dimension: int) -> list[IndexCounts]:
    """All canonical count triples of *rank* over *dimension* axes, in table order."""
    rank = _check_rank(rank, "n")
    dimension = _check_dimension(dimension)
    _check_table_rank(rank, "n")
    table = _index_table(rank, dimension)
    return [
        IndexCounts(*(int(c) for c in _decode_counts(pos, rank, table)))
        for pos in range(table.shape[0])
    ]
