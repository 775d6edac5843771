# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact Shamir secret reconstruction over the rationals.

This module provides the interpolation helpers:

``reconstruct_secret``
    Recover ``P(0)`` from the first ``k`` share points.

``interpolate_at``
    Evaluate the polynomial through a set of points at any abscissa.

``find_inconsistent_shares``
    Report extra shares that do not lie on the polynomial fixed by the first
    ``k`` points.

All arithmetic goes through :class:`~shamir_recover.rational.Rational`, so the
result is exact for any integer magnitude.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .errors import CoincidentAbscissas, InsufficientShares
from .rational import ONE, ZERO, Rational, RationalLike

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SharePoint:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _check_distinct(xs: Sequence[int]) -> None:
    seen: set[int] = set()
    for x in xs:
        if x in seen:
            raise CoincidentAbscissas(x)
        seen.add(x)


def lagrange_basis_at(xs: Sequence[int], i: int, x: RationalLike = 0) -> Rational:
    """Return ``L_i(x)``, the Lagrange basis weight of ``xs[i]`` at ``x``."""

    target = Rational.coerce(x)
    xi = xs[i]
    num = ONE
    den = ONE
    for j, xj in enumerate(xs):
        if i == j:
            continue
        num = num * (target - xj)
        den = den * (xi - xj)
    # den is zero only for duplicate abscissas; divide() raises DivisionByZero
    return num / den


def interpolate_at(points: Sequence[SharePoint], x: RationalLike = 0) -> Rational:
    """Evaluate the polynomial through all ``points`` at ``x``."""

    xs = [p.x for p in points]
    _check_distinct(xs)
    total = ZERO
    for i, point in enumerate(points):
        total = total + point.y * lagrange_basis_at(xs, i, x)
    return total


def _select(points: Sequence[SharePoint], k: int) -> list[SharePoint]:
    if k < 1:
        raise ValueError(f"Threshold k must be positive, got {k}")
    if len(points) < k:
        raise InsufficientShares(len(points), k)
    return list(points[:k])


def reconstruct_secret(points: Sequence[SharePoint], k: int) -> int:
    """Recover the secret ``P(0)`` from the first ``k`` of ``points``.

    Only the first ``k`` points in the order supplied are used; extra points
    are not cross-checked (see :func:`find_inconsistent_shares`).

    Raises :class:`InsufficientShares` when fewer than ``k`` points are given,
    :class:`CoincidentAbscissas` for duplicate ``x`` values among the selected
    points, and :class:`NonIntegralResult` when the points do not describe an
    integer constant term.
    """

    selected = _select(points, k)
    _logger.debug("Interpolating at x=0 over abscissas %s", [p.x for p in selected])
    return interpolate_at(selected, 0).to_integer()


def find_inconsistent_shares(points: Sequence[SharePoint], k: int) -> list[SharePoint]:
    """Return points beyond the first ``k`` that disagree with their polynomial."""

    selected = _select(points, k)
    extra = list(points[k:])
    if not extra:
        return []
    _check_distinct([p.x for p in points])
    bad = [p for p in extra if interpolate_at(selected, p.x) != Rational(p.y)]
    _logger.debug("Checked %d extra shares, %d inconsistent", len(extra), len(bad))
    return bad


__all__ = [
    "SharePoint",
    "lagrange_basis_at",
    "interpolate_at",
    "reconstruct_secret",
    "find_inconsistent_shares",
]
