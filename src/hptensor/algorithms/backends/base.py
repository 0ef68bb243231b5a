"""
hptensor.algorithms.backends.base
=================================

Abstract interface shared by the symbolic algebra backends.

A backend supplies an opaque polynomial type in the three axis variables
``x``, ``y`` and ``z`` together with the exact arithmetic the Hermite
generators need. Backend instances are immutable and hold no state besides
read-only symbol objects, so a single instance may be shared freely.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Any, Tuple, Union

from hptensor.algorithms.utils.exceptions import DomainError

Rational = Union[int, Fraction]


def _check_axis(axis: int) -> int:
    """Return *axis* if it names one of the three Cartesian axes."""
    if isinstance(axis, bool) or not isinstance(axis, numbers.Integral):
        raise DomainError(f"axis = {axis!r} is not an integer in the valid domain [1, 3]")
    if axis <= 0 or axis >= 4:
        raise DomainError(f"axis = {axis} outside the valid domain [1, 3]")
    return int(axis)


class _AlgebraBackend(ABC):
    """Capability set used by the Hermite tensor generators.

    Concrete backends set :attr:`name` (the canonical registry key) and
    :attr:`aliases`, and implement the abstract arithmetic below. Every
    operation returns a new value; inputs are never mutated.
    """

    name: str = "abstract"
    aliases: Tuple[str, ...] = ()

    @abstractmethod
    def symbol(self, axis: int) -> Any:
        """Return the symbolic variable bound to *axis* (1, 2 or 3)."""

    @abstractmethod
    def constant(self, value: Rational) -> Any:
        """Lift an exact rational into the polynomial domain."""

    def one(self) -> Any:
        return self.constant(1)

    def zero(self) -> Any:
        return self.constant(0)

    def variable(self, axis: int) -> Any:
        """Return *axis*'s variable as a polynomial of this backend."""
        return self.symbol(axis)

    @abstractmethod
    def power(self, poly: Any, exponent: int) -> Any:
        ...

    @abstractmethod
    def add(self, lhs: Any, rhs: Any) -> Any:
        ...

    @abstractmethod
    def multiply(self, lhs: Any, rhs: Any) -> Any:
        ...

    @abstractmethod
    def scale(self, poly: Any, factor: Rational) -> Any:
        ...

    @abstractmethod
    def normalize(self, poly: Any) -> Any:
        """Return the canonical expanded (sum of monomials) form of *poly*."""

    def equals(self, lhs: Any, rhs: Any) -> bool:
        """Structural equality of the normalized forms."""
        return self.normalize(lhs) == self.normalize(rhs)

    @abstractmethod
    def diff(self, expr: Any, axis: int, order: int = 1) -> Any:
        """Differentiate *expr* *order* times with respect to *axis*'s variable."""

    @abstractmethod
    def gaussian(self, axis: int, probabilist: bool) -> Tuple[Any, Any]:
        """Return the Hermite weight ``exp(-w)`` and its reciprocal ``exp(w)``.

        ``w`` is ``v**2/2`` for the probabilist's family and ``v**2`` for the
        physicist's, ``v`` being *axis*'s variable.
        """

    @abstractmethod
    def from_expression(self, expr: Any) -> Any:
        """Convert a general symbolic expression back into a polynomial.

        Raises
        ------
        :class:`~hptensor.algorithms.utils.exceptions.BackendError`
            If *expr* is not a polynomial in the axis variables.
        """

    @abstractmethod
    def to_sympy(self, poly: Any):
        """Return *poly* as an expanded SymPy expression."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash((type(self), self.name))
