# FractionKit - Fraction Type
# Copyright (c) 2024 FractionKit Contributors. All rights reserved.

"""
Exact rational numbers with fixed-width components.

A Fraction stores a signed numerator and a strictly positive denominator,
both limited to the signed 64-bit range. Values are not kept in lowest
terms: arithmetic works on the stored components and ``reduce()`` must be
called explicitly. Equality, ordering and hashing are defined on the
mathematical value, so unreduced fractions still behave like numbers.

Example:
    >>> from fractionkit.fraction import Fraction
    >>> half = Fraction(1, 2)
    >>> third = Fraction(1, 3)
    >>> half.add(third)
    Fraction(5, 6)
    >>> str(Fraction(12, 8))
    '3/2'
    >>> Fraction(2, 4) == half
    True
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .exceptions import (
    DivisionByZeroError,
    FractionOverflowError,
    ZeroDenominatorError,
)


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Operands accepted by the arithmetic operators
Operand = Union['Fraction', int]


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of two non-negative integers (Euclid).

    ``gcd(a, 0)`` is ``a``; ``gcd(0, 0)`` is 0 and never arises from a
    valid fraction since the denominator is non-zero.

    Raises:
        ValueError: If either argument is negative.
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd requires non-negative integers, got ({a}, {b})")
    while b != 0:
        a, b = b, a % b
    return a


def _checked(value: int, operation: str) -> int:
    """Return value unchanged if it fits in 64 bits."""
    if value < INT64_MIN or value > INT64_MAX:
        raise FractionOverflowError(value, operation)
    return value


def _require_int(value: object, name: str) -> int:
    # bool is an int subclass but never a sensible component
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Fraction {name} must be an int, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True, eq=False)
class Fraction:
    """
    A rational number numerator/denominator.

    Fractions are immutable and hashable. The denominator is always
    positive; the sign lives in the numerator.
    """
    numerator: int
    denominator: int

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Create the fraction numerator/denominator.

        Args:
            numerator: Signed 64-bit integer.
            denominator: Non-zero signed 64-bit integer (default 1).

        Raises:
            ZeroDenominatorError: If denominator is 0.
            FractionOverflowError: If a component is outside the 64-bit
                range, including after sign normalization.
            TypeError: If a component is not an int.
        """
        num = _checked(_require_int(numerator, 'numerator'), 'construction')
        den = _checked(_require_int(denominator, 'denominator'), 'construction')

        if den == 0:
            raise ZeroDenominatorError()

        if den < 0:
            num = _checked(-num, 'sign normalization')
            den = _checked(-den, 'sign normalization')

        # Bypass frozen dataclass __setattr__
        object.__setattr__(self, 'numerator', num)
        object.__setattr__(self, 'denominator', den)

    @classmethod
    def from_integer(cls, n: int) -> Fraction:
        """Create the fraction n/1."""
        return cls(n, 1)

    @classmethod
    def _coerce(cls, value: object) -> Union[Fraction, None]:
        """Promote ints to fractions; None for anything else."""
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_integer(value)
        return None

    # ------------------------------------------------------------------
    # Reduction
    # ------------------------------------------------------------------

    def reduce(self) -> Fraction:
        """
        Return this value in lowest terms.

        Zero reduces to 0/1. The receiver is left untouched.
        """
        g = gcd(abs(self.numerator), self.denominator)
        return Fraction(self.numerator // g, self.denominator // g)

    def is_reduced(self) -> bool:
        """True if numerator and denominator share no factor above 1."""
        return gcd(abs(self.numerator), self.denominator) == 1

    # ------------------------------------------------------------------
    # Arithmetic (named API; results are not reduced)
    # ------------------------------------------------------------------

    def add(self, other: Fraction) -> Fraction:
        """Return self + other via cross-multiplication."""
        return Fraction(
            _checked(
                _checked(self.numerator * other.denominator, 'add')
                + _checked(other.numerator * self.denominator, 'add'),
                'add',
            ),
            _checked(self.denominator * other.denominator, 'add'),
        )

    def subtract(self, other: Fraction) -> Fraction:
        """Return self - other via cross-multiplication."""
        return Fraction(
            _checked(
                _checked(self.numerator * other.denominator, 'subtract')
                - _checked(other.numerator * self.denominator, 'subtract'),
                'subtract',
            ),
            _checked(self.denominator * other.denominator, 'subtract'),
        )

    def multiply(self, other: Fraction) -> Fraction:
        """Return self * other."""
        return Fraction(
            _checked(self.numerator * other.numerator, 'multiply'),
            _checked(self.denominator * other.denominator, 'multiply'),
        )

    def reciprocal(self) -> Fraction:
        """
        Return denominator/numerator, with the sign moved to the numerator.

        Raises:
            DivisionByZeroError: If this fraction is zero.
        """
        if self.numerator == 0:
            raise DivisionByZeroError()
        return Fraction(self.denominator, self.numerator)

    def divide(self, other: Fraction) -> Fraction:
        """
        Return self / other, computed as self * other.reciprocal().

        Raises:
            DivisionByZeroError: If other is zero.
        """
        return self.multiply(other.reciprocal())

    def negate(self) -> Fraction:
        """Return -self."""
        return Fraction(_checked(-self.numerator, 'negate'), self.denominator)

    # ------------------------------------------------------------------
    # Conversion & predicates
    # ------------------------------------------------------------------

    def to_float(self) -> float:
        """Floating-point approximation. Lossy for most values."""
        return self.numerator / self.denominator

    def to_decimal_string(self, places: int = 4) -> str:
        """The float approximation with a fixed number of decimals."""
        return f"{self.to_float():.{places}f}"

    def abs(self) -> Fraction:
        """Return |self|."""
        return Fraction(_checked(abs(self.numerator), 'abs'), self.denominator)

    def is_positive(self) -> bool:
        """True if the value is above zero."""
        return self.numerator > 0

    def is_negative(self) -> bool:
        """True if the value is below zero."""
        return self.numerator < 0

    def is_zero(self) -> bool:
        """True if the value is zero, whatever the denominator."""
        return self.numerator == 0

    # ------------------------------------------------------------------
    # Comparison (cross-multiplication on unbounded Python ints)
    # ------------------------------------------------------------------

    def _cross(self, other: Fraction) -> tuple[int, int]:
        return (self.numerator * other.denominator,
                other.numerator * self.denominator)

    def __eq__(self, other: object) -> bool:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        lhs, rhs = self._cross(other_frac)
        return lhs == rhs

    def __lt__(self, other: Operand) -> bool:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        lhs, rhs = self._cross(other_frac)
        return lhs < rhs

    def __le__(self, other: Operand) -> bool:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        lhs, rhs = self._cross(other_frac)
        return lhs <= rhs

    def __gt__(self, other: Operand) -> bool:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        lhs, rhs = self._cross(other_frac)
        return lhs > rhs

    def __ge__(self, other: Operand) -> bool:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        lhs, rhs = self._cross(other_frac)
        return lhs >= rhs

    def __hash__(self) -> int:
        reduced = self.reduce()
        # Integral values hash like the int they equal
        if reduced.denominator == 1:
            return hash(reduced.numerator)
        return hash((reduced.numerator, reduced.denominator))

    # ------------------------------------------------------------------
    # Operator sugar (delegates to the named API)
    # ------------------------------------------------------------------

    def __add__(self, other: Operand) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return self.add(other_frac)

    def __radd__(self, other: int) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return other_frac.add(self)

    def __sub__(self, other: Operand) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return self.subtract(other_frac)

    def __rsub__(self, other: int) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return other_frac.subtract(self)

    def __mul__(self, other: Operand) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return self.multiply(other_frac)

    def __rmul__(self, other: int) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return other_frac.multiply(self)

    def __truediv__(self, other: Operand) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return self.divide(other_frac)

    def __rtruediv__(self, other: int) -> Fraction:
        other_frac = Fraction._coerce(other)
        if other_frac is None:
            return NotImplemented
        return other_frac.divide(self)

    def __neg__(self) -> Fraction:
        return self.negate()

    def __pos__(self) -> Fraction:
        return self

    def __abs__(self) -> Fraction:
        return self.abs()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        reduced = self.reduce()
        if reduced.denominator == 1:
            return str(reduced.numerator)
        return f"{reduced.numerator}/{reduced.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"
