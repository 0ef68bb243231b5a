import math

import numpy as np
import pytest

from hptensor.algorithms.polynomial.base import (IndexCounts, _canonical_counts,
                                                 _check_dimension, _check_rank,
                                                 _decode_counts,
                                                 _index_counts, _index_table,
                                                 _init_index_tables,
                                                 _multichoose, _multinomial)
from hptensor.algorithms.utils.exceptions import DomainError

MAX_RANK = 8
PSI, CLMO = _init_index_tables(MAX_RANK)


def test_init_index_tables():
    """Test if the index tables are initialized correctly"""
    assert PSI.shape == (4, MAX_RANK + 1)

    assert PSI[1, 5] == 1   # Axes=1, Rank=5: only xxxxx
    assert PSI[2, 2] == 3   # Axes=2, Rank=2: xx, xy, yy
    assert PSI[3, 1] == 3   # Axes=3, Rank=1: x, y, z
    assert PSI[3, 2] == 6
    assert PSI[0, 0] == 1

    assert len(CLMO) == MAX_RANK + 1
    for n in range(MAX_RANK + 1):
        assert len(CLMO[n]) == PSI[3, n]


def test_decode_counts():
    for n in range(MAX_RANK + 1):
        seen = set()
        for pos in range(PSI[3, n]):
            k = np.asarray(_decode_counts(pos, n, CLMO[n]))
            assert k.shape == (3,)
            assert np.sum(k) == n
            assert np.all(k >= 0)
            seen.add(tuple(int(c) for c in k))
        assert len(seen) == PSI[3, n]


def test_table_order_is_canonical():
    assert _canonical_counts(2, 3) == [
        IndexCounts(2, 0, 0),
        IndexCounts(1, 1, 0),
        IndexCounts(1, 0, 1),
        IndexCounts(0, 2, 0),
        IndexCounts(0, 1, 1),
        IndexCounts(0, 0, 2),
    ]
    assert _canonical_counts(3, 2) == [
        IndexCounts(3, 0, 0),
        IndexCounts(2, 1, 0),
        IndexCounts(1, 2, 0),
        IndexCounts(0, 3, 0),
    ]
    assert _canonical_counts(4, 1) == [IndexCounts(4, 0, 0)]
    assert _canonical_counts(0, 3) == [IndexCounts(0, 0, 0)]


@pytest.mark.parametrize("dimension", [1, 2, 3])
def test_tables_per_dimension(dimension):
    psi, clmo = _init_index_tables(MAX_RANK, dimension)
    assert psi.shape == (dimension + 1, MAX_RANK + 1)
    for n in range(MAX_RANK + 1):
        assert len(clmo[n]) == _multichoose(dimension, n)
        for pos in range(len(clmo[n])):
            k = _decode_counts(pos, n, clmo[n])
            assert all(k[a] == 0 for a in range(dimension, 3))


def test_multichoose():
    assert _multichoose(1, 7) == 1
    assert _multichoose(2, 7) == 8
    assert _multichoose(3, 2) == 6
    assert _multichoose(3, 0) == 1
    for d in (1, 2, 3):
        for n in range(1, 10):
            assert _multichoose(d, n) == math.comb(n + d - 1, d - 1)


def test_multinomial():
    assert _multinomial((0, 0, 0)) == 1
    assert _multinomial((3, 0, 0)) == 1
    assert _multinomial((2, 1, 0)) == 3
    assert _multinomial((1, 1, 1)) == 6
    assert _multinomial((9, 6, 3)) == math.factorial(18) // (
        math.factorial(9) * math.factorial(6) * math.factorial(3)
    )


def test_index_counts():
    assert _index_counts("xyx", 2) == IndexCounts(2, 1, 0)
    assert _index_counts("zyxz", 3) == IndexCounts(1, 1, 2)
    assert _index_counts([1, 3, 3, 2], 3) == IndexCounts(1, 1, 2)
    assert _index_counts("", 3) == IndexCounts(0, 0, 0)


def test_index_counts_ignores_unknown_labels():
    assert _index_counts("x-y_z!w", 3) == IndexCounts(1, 1, 1)
    assert _index_counts("abc", 3).rank == 0
    assert _index_counts(["x", "xy", 0, 4, None, True], 3) == IndexCounts(1, 0, 0)


def test_index_counts_masks_axes_beyond_dimension():
    assert _index_counts("xyz", 1) == IndexCounts(1, 0, 0)
    assert _index_counts("xyzzy", 2) == IndexCounts(1, 2, 0)
    assert _index_counts(IndexCounts(2, 2, 2), 1) == IndexCounts(2, 0, 0)


@pytest.mark.parametrize("dimension", [0, 4, -1, 2.0, True])
def test_index_counts_rejects_bad_dimension(dimension):
    with pytest.raises(DomainError):
        _index_counts("xy", dimension)


def test_index_counts_helpers():
    counts = IndexCounts(2, 0, 1)
    assert counts.rank == 3
    assert counts.canonical() == "xxz"
    assert counts.multinomial() == 3


def test_init_index_tables_rejects_negative_rank():
    with pytest.raises(DomainError):
        _init_index_tables(-1)


@pytest.mark.parametrize("dimension", [1, 2, 3])
def test_single_rank_table_matches_full_tables(dimension):
    _, clmo = _init_index_tables(MAX_RANK, dimension)
    for n in range(MAX_RANK + 1):
        assert np.array_equal(_index_table(n, dimension), clmo[n])


def test_canonical_counts_high_rank():
    counts = _canonical_counts(40, 3)
    assert len(counts) == _multichoose(3, 40)
    assert counts[0] == IndexCounts(40, 0, 0)
    assert counts[-1] == IndexCounts(0, 0, 40)
    assert all(c.rank == 40 for c in counts)


def test_canonical_counts_rejects_bad_input():
    with pytest.raises(DomainError):
        _canonical_counts(-1, 2)
    with pytest.raises(DomainError):
        _canonical_counts(2, 4)


@pytest.mark.parametrize("integer", [np.int64, np.int32, np.uint8])
def test_validators_accept_numpy_integers(integer):
    assert _check_dimension(integer(2)) == 2
    assert type(_check_dimension(integer(2))) is int
    assert _check_rank(integer(5)) == 5
    assert type(_check_rank(integer(5))) is int
    assert _canonical_counts(integer(2), integer(2)) == _canonical_counts(2, 2)


@pytest.mark.parametrize("value", [2.0, "2", None, True, np.float64(2.0)])
def test_validators_reject_non_integers(value):
    with pytest.raises(DomainError, match="is not an integer"):
        _check_dimension(value)
    with pytest.raises(DomainError, match="is not an integer"):
        _check_rank(value)
