"""
hptensor.algorithms.backends.symengine_backend
==============================================

SymEngine ("se") backend: polynomials are plain ``symengine.Basic``
expressions kept in expanded form.
"""

from __future__ import annotations

from fractions import Fraction

import symengine as se

from hptensor.algorithms.backends.base import (Rational, _AlgebraBackend,
                                               _check_axis)
from hptensor.algorithms.utils.exceptions import BackendError

x, y, z = se.symbols('x y z')
axis_vars = (x, y, z)


def _to_symengine_rational(value: Rational) -> se.Basic:
    value = Fraction(value)
    return se.Rational(value.numerator, value.denominator)


class _SymEngineBackend(_AlgebraBackend):
    """Expression backend built on :mod:`symengine`."""

    name = "se"
    aliases = ("SE", "SymEng", "SymEngine", "symengine")

    def symbol(self, axis: int) -> se.Symbol:
        return axis_vars[_check_axis(axis) - 1]

    def constant(self, value: Rational) -> se.Basic:
        return _to_symengine_rational(value)

    def power(self, poly: se.Basic, exponent: int) -> se.Basic:
        return poly ** exponent

    def add(self, lhs: se.Basic, rhs: se.Basic) -> se.Basic:
        return lhs + rhs

    def multiply(self, lhs: se.Basic, rhs: se.Basic) -> se.Basic:
        return lhs * rhs

    def scale(self, poly: se.Basic, factor: Rational) -> se.Basic:
        return _to_symengine_rational(factor) * poly

    def normalize(self, poly: se.Basic) -> se.Basic:
        return se.expand(poly)

    def diff(self, expr: se.Basic, axis: int, order: int = 1) -> se.Basic:
        v = self.symbol(axis)
        for _ in range(order):
            expr = se.diff(expr, v)
        return expr

    def gaussian(self, axis: int, probabilist: bool):
        v = self.symbol(axis)
        w = v**2 / 2 if probabilist else v**2
        return se.exp(-w), se.exp(w)

    def from_expression(self, expr: se.Basic) -> se.Basic:
        expanded = se.expand(expr)
        as_sympy = self.to_sympy(expanded)
        sympy_vars = [self.to_sympy(v) for v in axis_vars]
        if not (as_sympy.free_symbols <= set(sympy_vars)
                and as_sympy.is_polynomial(*sympy_vars)):
            raise BackendError(f"Expression '{expanded}' is not a polynomial in {axis_vars}")
        return expanded

    def to_sympy(self, poly: se.Basic):
        return se.sympify(poly)._sympy_()
