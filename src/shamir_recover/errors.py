# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised while decoding shares and reconstructing secrets."""

from __future__ import annotations

# str(int) refuses more than 4300 digits by default; stay well below it
_MAX_MESSAGE_BITS = 4000


def describe_int(value: int) -> str:
    """Render ``value`` for an error message without converting huge ints."""

    if abs(value).bit_length() <= _MAX_MESSAGE_BITS:
        return str(value)
    return f"<{value.bit_length()}-bit integer>"


class ShamirError(Exception):
    """Base class for every failure raised by :mod:`shamir_recover`."""


class InvalidBase(ShamirError, ValueError):
    """Raised when a radix is outside ``[2, 36]``."""

    def __init__(self, base: object) -> None:
        super().__init__(f"Invalid base {base!r}; expected an integer in [2, 36]")
        self.base = base


class InvalidDigit(ShamirError, ValueError):
    """Raised when a share value contains a character outside its base."""

    def __init__(self, digit: str, base: int) -> None:
        super().__init__(f"Invalid digit {digit!r} for base {base}")
        self.digit = digit
        self.base = base


class InsufficientShares(ShamirError, ValueError):
    """Raised when fewer than ``k`` points are available."""

    def __init__(self, available: int, k: int) -> None:
        super().__init__(f"Not enough points: got {available}, need at least {k}")
        self.available = available
        self.k = k


class DivisionByZero(ShamirError, ZeroDivisionError):
    """Raised on a rational division (or construction) with a zero divisor."""


class CoincidentAbscissas(DivisionByZero):
    """Raised when two interpolation points share the same ``x``."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate abscissa x={describe_int(x)} among interpolation points")
        self.x = x


class NonIntegralResult(ShamirError, ArithmeticError):
    """Raised when a rational expected to be an integer has a denominator != 1."""

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(
            f"Result {describe_int(numerator)}/{describe_int(denominator)} is not an integer"
        )
        self.numerator = numerator
        self.denominator = denominator


class MalformedShareRecord(ShamirError, ValueError):
    """Raised when a share record set does not have the expected shape."""


__all__ = [
    "describe_int",
    "ShamirError",
    "InvalidBase",
    "InvalidDigit",
    "InsufficientShares",
    "DivisionByZero",
    "CoincidentAbscissas",
    "NonIntegralResult",
    "MalformedShareRecord",
]
