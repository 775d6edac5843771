# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Radix 2..36 conversion for share values."""

from __future__ import annotations

from .errors import InvalidBase, InvalidDigit

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}

MIN_BASE = 2
MAX_BASE = len(DIGITS)


def _check_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return base


def decode(value: str, base: int) -> int:
    """Decode ``value`` (most significant digit first) from ``base``.

    Letters are case-insensitive. An empty string decodes to ``0``.
    """

    _check_base(base)
    result = 0
    for ch in value:
        digit = _DIGIT_VALUES.get(ch.lower())
        if digit is None or digit >= base:
            raise InvalidDigit(ch, base)
        result = result * base + digit
    return result


def encode(value: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using lowercase digits."""

    _check_base(base)
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, base)
        out.append(DIGITS[rem])
    return "".join(reversed(out))


_DECIMAL_CHUNK = 10**18


def to_decimal(value: int) -> str:
    """Render any int in base 10, however many digits it has.

    ``str(int)`` is capped at 4300 digits on current interpreters; this
    goes through 18-digit chunks, each well under the cap.
    """

    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks: list[int] = []
    while value >= _DECIMAL_CHUNK:
        value, rem = divmod(value, _DECIMAL_CHUNK)
        chunks.append(rem)
    head = str(value)
    return sign + head + "".join(f"{chunk:018d}" for chunk in reversed(chunks))


__all__ = ["DIGITS", "MIN_BASE", "MAX_BASE", "decode", "encode", "to_decimal"]
