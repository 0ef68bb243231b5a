"""
hptensor.hpt
============

High-level interface to the Hermite polynomial tensor generators.

Every function accepts a ``backend`` argument: a backend name or alias
(``'se'``, ``'SymEngine'``, ``'sp'``, ``'SymPy'``, ...), a backend instance,
or ``None`` for the default. Unrecognized names silently select the default
backend.

Examples
--------
>>> from hptensor import SVHP, HTC, HT
>>> SVHP(3)
-3*x + x**3
>>> HTC("xzyxy", dimension=3)
z - x**2*z - y**2*z + x**2*y**2*z
>>> sorted(HT(2, dimension=2))
['xx', 'xy', 'yy']

References
----------
H. Grad, "Note on N-dimensional Hermite polynomials", Communications on
Pure and Applied Mathematics, 2(4), 325-330, 1949.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Union

from hptensor.algorithms.backends.registry import (DEFAULT_REGISTRY,
                                                   BackendLike,
                                                   BackendRegistry,
                                                   get_backend)
from hptensor.algorithms.polynomial.base import IndexCounts
from hptensor.algorithms.polynomial.hermite import _hermite
from hptensor.algorithms.tensor.component import _tensor_component
from hptensor.algorithms.tensor.enumeration import (EquivalenceClass,
                                                    TensorEntry,
                                                    _equivalence_class,
                                                    _hermite_tensor)
from hptensor.algorithms.utils.config import (DEFAULT_DIMENSION,
                                              DEFAULT_METHOD,
                                              DEFAULT_PROBABILIST)


def SVHP(
    order: int,
    axis: int = 1,
    probabilist: bool = DEFAULT_PROBABILIST,
    backend: BackendLike = None,
    method: str = DEFAULT_METHOD,
    registry: BackendRegistry = DEFAULT_REGISTRY,
) -> Any:
    """
    Single-Variable Hermite Polynomial.

    Parameters
    ----------
    order : int
        Polynomial order, ``order >= 0``.
    axis : int, optional
        1, 2 or 3 for the x, y or z variable. Default is 1.
    probabilist : bool, optional
        Probabilist's :math:`He_n` if ``True`` (default), physicist's
        :math:`H_n` otherwise.
    backend : str or AlgebraBackend, optional
        Backend name, alias or instance. Default is ``'se'``.
    method : str, optional
        ``'explicit'`` (closed-form sum, default) or ``'rodrigues'``
        (differentiation of the Gaussian weight).
    registry : BackendRegistry, optional
        Table used to resolve *backend* names.

    Returns
    -------
    Any
        The polynomial in the backend's canonical form.

    Raises
    ------
    :class:`~hptensor.algorithms.utils.exceptions.DomainError`
        If *order* < 0 or *axis* is not in ``[1, 3]``.

    Examples
    --------
    >>> SVHP(4, axis=2)
    3 - 6*y**2 + y**4
    >>> SVHP(5, axis=3, probabilist=False, backend="sp")
    Poly(32*z**5 - 160*z**3 + 120*z, x, y, z, domain='QQ')
    """
    be = get_backend(backend, registry)
    return _hermite(order, axis, probabilist, be, method)


def HTC(
    index: Union[str, Iterable, IndexCounts],
    dimension: int = DEFAULT_DIMENSION,
    probabilist: bool = DEFAULT_PROBABILIST,
    backend: BackendLike = None,
    method: str = DEFAULT_METHOD,
    registry: BackendRegistry = DEFAULT_REGISTRY,
) -> Any:
    """
    Hermite Tensor Component.

    The index is a string of x's, y's and/or z's (or an iterable of axis
    labels). Unrecognized characters are ignored and labels of axes beyond
    *dimension* are masked, so the tensor rank is the count of valid labels.
    An index without valid labels is the rank-0 tensor, whose only component
    is ``1``.

    Parameters
    ----------
    index : str or Iterable or IndexCounts
        Component index, in any order.
    dimension : int, optional
        Euclidean dimension in ``[1, 3]``. Default is 2.
    probabilist : bool, optional
        Probabilist's (default) or physicist's normalization.
    backend : str or AlgebraBackend, optional
        Backend name, alias or instance.
    method : str, optional
        Single-variable construction, ``'explicit'`` or ``'rodrigues'``.
    registry : BackendRegistry, optional
        Table used to resolve *backend* names.

    Returns
    -------
    Any
        The component in the backend's canonical form.

    Raises
    ------
    :class:`~hptensor.algorithms.utils.exceptions.DomainError`
        If *dimension* is not in ``[1, 3]``.

    Examples
    --------
    >>> HTC("xzyxy", dimension=3, probabilist=False)
    8*z - 16*x**2*z - 16*y**2*z + 32*x**2*y**2*z
    """
    be = get_backend(backend, registry)
    return _tensor_component(index, dimension, probabilist, be, method)


def HT(
    rank: int,
    dimension: int = DEFAULT_DIMENSION,
    probabilist: bool = DEFAULT_PROBABILIST,
    backend: BackendLike = None,
    method: str = DEFAULT_METHOD,
    registry: BackendRegistry = DEFAULT_REGISTRY,
) -> Dict[str, TensorEntry]:
    """
    All distinct components of a Hermite polynomial tensor.

    The keys are the canonical indices ``'x'*ax + 'y'*ay + 'z'*az``, one per
    solution of ``ax + ay + az = rank`` over the active axes: there are
    ``D`` multichoose ``n`` = ``(D + n - 1)! / (n! (D - 1)!)`` of them. Each
    value is a :class:`TensorEntry` ``(val, set)`` holding the component and
    the :class:`EquivalenceClass` of index strings sharing it, whose size is
    the multinomial coefficient ``n! / (ax! ay! az!)``.

    Parameters
    ----------
    rank : int
        Tensor rank ``n >= 0``.
    dimension : int, optional
        Euclidean dimension in ``[1, 3]``. Default is 2.
    probabilist : bool, optional
        Probabilist's (default) or physicist's normalization.
    backend : str or AlgebraBackend, optional
        Backend name, alias or instance.
    method : str, optional
        Single-variable construction, ``'explicit'`` or ``'rodrigues'``.
    registry : BackendRegistry, optional
        Table used to resolve *backend* names.

    Returns
    -------
    dict[str, TensorEntry]

    Raises
    ------
    :class:`~hptensor.algorithms.utils.exceptions.DomainError`
        If *rank* < 0 or *dimension* is not in ``[1, 3]``.

    Examples
    --------
    >>> H = HT(3, dimension=2)
    >>> list(H)
    ['xxx', 'xxy', 'xyy', 'yyy']
    >>> sorted(H["xxy"].set)
    ['xxy', 'xyx', 'yxx']
    """
    be = get_backend(backend, registry)
    return _hermite_tensor(rank, dimension, probabilist, be, method)


def equivalence_class(index: Union[str, Iterable, IndexCounts], dimension: int = DEFAULT_DIMENSION) -> EquivalenceClass:
    """Index strings whose component equals the one selected by *index*.

    >>> sorted(equivalence_class("yxz", dimension=3))[:3]
    ['xyz', 'xzy', 'yxz']
    """
    return _equivalence_class(index, dimension)
