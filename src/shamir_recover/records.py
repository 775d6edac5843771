# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Parsing of share record sets.

A record set looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Each index from 1 to ``n`` that is present becomes a :class:`SharePoint`;
absent indices are skipped.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .base_decoder import decode
from .errors import MalformedShareRecord
from .shamir import SharePoint, reconstruct_secret

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShareRecordSet:
    n: int
    k: int
    points: tuple[SharePoint, ...]
    # radix each point was decoded from, parallel to ``points``
    bases: tuple[int, ...] = ()
    source: str | None = None

    @property
    def degree(self) -> int:
        return self.k - 1


def _parse_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise MalformedShareRecord(f"Field {field!r} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            pass
    raise MalformedShareRecord(f"Field {field!r} must be an integer, got {value!r}")


def parse_share_records(data: Mapping[str, Any], *, source: str | None = None) -> ShareRecordSet:
    """Build a :class:`ShareRecordSet` from an already decoded mapping."""

    if not isinstance(data, Mapping):
        raise MalformedShareRecord("Share record set must be a JSON object")
    keys = data.get("keys")
    if not isinstance(keys, Mapping):
        raise MalformedShareRecord("Missing 'keys' object with 'n' and 'k'")
    if "n" not in keys or "k" not in keys:
        raise MalformedShareRecord("'keys' must define both 'n' and 'k'")
    n = _parse_int(keys["n"], "keys.n")
    k = _parse_int(keys["k"], "keys.k")
    if k < 1:
        raise MalformedShareRecord(f"Threshold k must be positive, got {k}")

    points: list[SharePoint] = []
    bases: list[int] = []
    for index in range(1, n + 1):
        entry = data.get(str(index))
        if entry is None:
            continue
        if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
            raise MalformedShareRecord(f"Share {index} must have 'base' and 'value'")
        value = entry["value"]
        if not isinstance(value, str):
            raise MalformedShareRecord(f"Share {index} value must be a string, got {value!r}")
        base = _parse_int(entry["base"], f"{index}.base")
        points.append(SharePoint(index, decode(value, base)))
        bases.append(base)

    _logger.debug("Parsed %d of %d shares (k=%d) from %s", len(points), n, k, source or "<mapping>")
    return ShareRecordSet(n=n, k=k, points=tuple(points), bases=tuple(bases), source=source)


def load_share_records(path: os.PathLike[str] | str) -> ShareRecordSet:
    """Read and parse a JSON share record file."""

    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except ValueError as exc:
        # JSONDecodeError, UnicodeDecodeError and oversized number literals
        raise MalformedShareRecord(f"{p}: not a valid UTF-8 JSON document ({exc})") from exc
    return parse_share_records(data, source=str(p))


def recover_from_records(records: ShareRecordSet) -> int:
    """Reconstruct the secret described by ``records``."""

    return reconstruct_secret(records.points, records.k)


__all__ = ["ShareRecordSet", "parse_share_records", "load_share_records", "recover_from_records"]
