"""
hptensor.algorithms.backends.sympy_backend
==========================================

SymPy ("sp") backend: polynomials are elements of the ring ``QQ[x, y, z]``
represented by :class:`sympy.Poly`.

Ring elements carry exact rational coefficients in a dense, canonical
representation, so :meth:`normalize` has nothing left to do.
"""

from __future__ import annotations

from fractions import Fraction

import sympy as sp

from hptensor.algorithms.backends.base import (Rational, _AlgebraBackend,
                                               _check_axis)
from hptensor.algorithms.utils.exceptions import BackendError

x, y, z = sp.symbols('x y z')
axis_vars = (x, y, z)


def _to_sympy_rational(value: Rational) -> sp.Rational:
    value = Fraction(value)
    return sp.Rational(value.numerator, value.denominator)


class _SymPyBackend(_AlgebraBackend):
    """Polynomial ring backend built on :class:`sympy.Poly` over ``QQ``."""

    name = "sp"
    aliases = ("SP", "SymPy", "sympy", "Poly")

    def _poly(self, expr) -> sp.Poly:
        return sp.Poly(expr, *axis_vars, domain=sp.QQ)

    def symbol(self, axis: int) -> sp.Symbol:
        return axis_vars[_check_axis(axis) - 1]

    def variable(self, axis: int) -> sp.Poly:
        return self._poly(self.symbol(axis))

    def constant(self, value: Rational) -> sp.Poly:
        return self._poly(_to_sympy_rational(value))

    def power(self, poly: sp.Poly, exponent: int) -> sp.Poly:
        return poly ** exponent

    def add(self, lhs: sp.Poly, rhs: sp.Poly) -> sp.Poly:
        return lhs + rhs

    def multiply(self, lhs: sp.Poly, rhs: sp.Poly) -> sp.Poly:
        return lhs * rhs

    def scale(self, poly: sp.Poly, factor: Rational) -> sp.Poly:
        return poly.mul_ground(_to_sympy_rational(factor))

    def normalize(self, poly) -> sp.Poly:
        if isinstance(poly, sp.Poly):
            return poly
        return self._poly(poly)

    def diff(self, expr, axis: int, order: int = 1):
        if isinstance(expr, sp.Poly):
            expr = expr.as_expr()
        return sp.diff(expr, self.symbol(axis), order)

    def gaussian(self, axis: int, probabilist: bool):
        v = self.symbol(axis)
        w = v**2 / 2 if probabilist else v**2
        return sp.exp(-w), sp.exp(w)

    def from_expression(self, expr) -> sp.Poly:
        if isinstance(expr, sp.Poly):
            expr = expr.as_expr()
        expanded = sp.powsimp(sp.expand(expr))
        if not (expanded.free_symbols <= set(axis_vars)
                and expanded.is_polynomial(*axis_vars)):
            raise BackendError(f"Expression '{expanded}' is not a polynomial in {axis_vars}")
        return self._poly(expanded)

    def to_sympy(self, poly):
        if isinstance(poly, sp.Poly):
            return poly.as_expr()
        return sp.expand(poly)
