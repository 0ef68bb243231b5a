"""
hptensor.algorithms.polynomial.hermite
======================================

Single-variable Hermite polynomials.

Two constructions are provided. The explicit one sums the closed form

.. math::

    He_n(v) = n! \\sum_{m=0}^{\\lfloor n/2 \\rfloor}
              \\frac{(-1)^m}{m!\\,(n-2m)!\\,2^m} v^{n-2m}, \\qquad
    H_n(v) = n! \\sum_{m=0}^{\\lfloor n/2 \\rfloor}
             \\frac{(-1)^m}{m!\\,(n-2m)!} (2v)^{n-2m},

and only needs scalar arithmetic, powers and additions from the backend.
The Rodrigues one differentiates the Gaussian weight and therefore needs a
backend with symbolic differentiation. Both return the backend's canonical
form, so results from different construction paths compare structurally.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any, Dict

from hptensor.algorithms.backends.base import _AlgebraBackend, _check_axis
from hptensor.algorithms.polynomial.base import _check_rank
from hptensor.algorithms.utils.exceptions import DomainError
from hptensor.utils.log_config import logger


def _hermite_coefficients(order: int, probabilist: bool = True) -> Dict[int, Fraction]:
    """Return the exponent to coefficient map of the *order*-th Hermite polynomial.

    Coefficients are exact: factorials are Python integers and the sum is
    taken over :class:`fractions.Fraction`.
    """
    order = _check_rank(order, "order")
    n_fact = math.factorial(order)
    coeffs = {}
    for m in range(order // 2 + 1):
        ex = order - 2 * m
        num = n_fact * (-1) ** m
        if probabilist:
            den = math.factorial(m) * math.factorial(ex) * 2 ** m
            coeffs[ex] = Fraction(num, den)
        else:
            den = math.factorial(m) * math.factorial(ex)
            coeffs[ex] = Fraction(num, den) * 2 ** ex
    return coeffs


def _hermite_polynomial(order: int, axis: int, probabilist: bool, backend: _AlgebraBackend) -> Any:
    """
    Single-variable Hermite polynomial by explicit summation.

    Parameters
    ----------
    order : int
        Polynomial order, ``order >= 0``.
    axis : int
        Axis of the variable: 1, 2, 3 for x, y, z.
    probabilist : bool
        ``True`` for the probabilist's :math:`He_n`, ``False`` for the
        physicist's :math:`H_n`.
    backend : :class:`~hptensor.algorithms.backends.base._AlgebraBackend`
        Algebra backend producing the polynomial.

    Returns
    -------
    Any
        The polynomial, in *backend*'s canonical form.

    Raises
    ------
    :class:`~hptensor.algorithms.utils.exceptions.DomainError`
        If *order* is negative or *axis* is not in ``[1, 3]``.
    """
    order = _check_rank(order, "order")
    axis = _check_axis(axis)
    if order == 0:
        return backend.one()

    v = backend.variable(axis)
    poly = backend.zero()
    for ex, coeff in _hermite_coefficients(order, probabilist).items():
        term = backend.scale(backend.power(v, ex), coeff)
        poly = backend.add(poly, term)
    return backend.normalize(poly)


def _hermite_rodrigues(order: int, axis: int, probabilist: bool, backend: _AlgebraBackend) -> Any:
    """Single-variable Hermite polynomial by Rodrigues' formula.

    Computes :math:`(-1)^n e^{w} \\frac{d^n}{dv^n} e^{-w}` with
    :math:`w = v^2/2` (probabilist's) or :math:`w = v^2` (physicist's).
    """
    order = _check_rank(order, "order")
    axis = _check_axis(axis)
    if order == 0:
        return backend.one()

    weight, inverse = backend.gaussian(axis, probabilist)
    derivative = backend.diff(weight, axis, order)
    logger.debug(f"Rodrigues derivative of order {order} on axis {axis} computed")
    poly = backend.from_expression(backend.multiply(derivative, inverse))
    if order % 2:
        poly = backend.scale(poly, -1)
    return backend.normalize(poly)


_METHODS = {
    "explicit": _hermite_polynomial,
    "rodrigues": _hermite_rodrigues,
}


def _check_method(method: str) -> str:
    if method not in _METHODS:
        raise DomainError(f"method = {method!r} outside the valid domain {sorted(_METHODS)}")
    return method


def _hermite(order: int, axis: int, probabilist: bool, backend: _AlgebraBackend, method: str = "explicit") -> Any:
    """Dispatch to the construction named by *method*."""
    return _METHODS[_check_method(method)](order, axis, probabilist, backend)
