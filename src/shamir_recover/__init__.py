# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact reconstruction of Shamir secrets from base-encoded shares."""

from __future__ import annotations

from .base_decoder import decode, encode, to_decimal
from .errors import (
    CoincidentAbscissas,
    DivisionByZero,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    MalformedShareRecord,
    NonIntegralResult,
    ShamirError,
)
from .rational import Rational
from .records import ShareRecordSet, load_share_records, parse_share_records, recover_from_records
from .shamir import SharePoint, find_inconsistent_shares, interpolate_at, reconstruct_secret

__version__ = "0.1.0"

__all__ = [
    "Rational",
    "SharePoint",
    "ShareRecordSet",
    "decode",
    "encode",
    "to_decimal",
    "reconstruct_secret",
    "interpolate_at",
    "find_inconsistent_shares",
    "parse_share_records",
    "load_share_records",
    "recover_from_records",
    "ShamirError",
    "InvalidBase",
    "InvalidDigit",
    "InsufficientShares",
    "DivisionByZero",
    "CoincidentAbscissas",
    "NonIntegralResult",
    "MalformedShareRecord",
]
