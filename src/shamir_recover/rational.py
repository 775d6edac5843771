# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact rational numbers over Python's unbounded integers.

:class:`Rational` is an immutable value type. Every instance is kept in lowest
terms with a positive denominator, so two rationals are equal exactly when
their ``(numerator, denominator)`` pairs are equal. An integral rational also
compares (and hashes) equal to the matching ``int``. Only ``int`` operands are
accepted; floats and strings raise :class:`TypeError`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .errors import DivisionByZero, NonIntegralResult, describe_int

RationalLike = Union["Rational", int]


def _check_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Rational {name} must be an int, got {type(value).__name__}")
    return int(value)


@dataclass(frozen=True, eq=False)
class Rational:
    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num = _check_int(self.numerator, "numerator")
        den = _check_int(self.denominator, "denominator")
        if den == 0:
            raise DivisionByZero(f"Zero denominator for numerator {describe_int(num)}")
        # gcd(0, d) == |d|, so zero always normalizes to 0/1
        g = math.gcd(num, den)
        if g != 1:
            num //= g
            den //= g
        if den < 0:
            num, den = -num, -den
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @classmethod
    def coerce(cls, value: RationalLike) -> "Rational":
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")

    def add(self, other: RationalLike) -> "Rational":
        o = Rational.coerce(other)
        return Rational(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    def subtract(self, other: RationalLike) -> "Rational":
        return self.add(Rational.coerce(other).negate())

    def multiply(self, other: RationalLike) -> "Rational":
        o = Rational.coerce(other)
        return Rational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other: RationalLike) -> "Rational":
        o = Rational.coerce(other)
        if o.numerator == 0:
            raise DivisionByZero(
                f"Division of {describe_int(self.numerator)}/{describe_int(self.denominator)} by zero"
            )
        return Rational(self.numerator * o.denominator, self.denominator * o.numerator)

    def negate(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_integer(self) -> int:
        """Return the value as an ``int``.

        Raises :class:`NonIntegralResult` instead of truncating when the
        reduced denominator is not 1.
        """

        if self.denominator != 1:
            raise NonIntegralResult(self.numerator, self.denominator)
        return self.numerator

    # operator sugar; ints are accepted on either side
    def __add__(self, other: RationalLike) -> "Rational":
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> "Rational":
        return self.subtract(other)

    def __rsub__(self, other: RationalLike) -> "Rational":
        return Rational.coerce(other).subtract(self)

    def __mul__(self, other: RationalLike) -> "Rational":
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> "Rational":
        return self.divide(other)

    def __rtruediv__(self, other: RationalLike) -> "Rational":
        return Rational.coerce(other).divide(self)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rational):
            return (self.numerator, self.denominator) == (other.numerator, other.denominator)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # integral values hash like the int they equal
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


ZERO = Rational(0)
ONE = Rational(1)


__all__ = ["Rational", "RationalLike", "ZERO", "ONE"]
