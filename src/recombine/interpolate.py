"""Lagrange interpolation at x = 0 over exact rationals."""
from __future__ import annotations

import logging
from functools import reduce as fold
from typing import Sequence

from .errors import DivisionByZero
from .points import Point
from .rational import Rational, add, reduce

_logger = logging.getLogger(__name__)


def basis_at_zero(points: Sequence[Point], j: int) -> tuple[int, int]:
    """Return the unreduced numerator and denominator of the j-th basis at 0."""
    xj = points[j].x
    numerator = 1
    denominator = 1
    for i, point in enumerate(points):
        if i == j:
            continue
        numerator *= -point.x
        denominator *= xj - point.x
    return numerator, denominator


def _contribution(points: Sequence[Point], j: int) -> Rational:
    numerator, denominator = basis_at_zero(points, j)
    if denominator == 0:
        raise DivisionByZero()
    return reduce(points[j].y * numerator, denominator)


def constant_term(points: Sequence[Point]) -> Rational:
    """Value at x = 0 of the polynomial of degree ``len(points) - 1`` through ``points``."""
    if not points:
        raise ValueError("at least one point is required")
    _logger.debug("Interpolating over %d points", len(points))
    return fold(
        add,
        (_contribution(points, j) for j in range(len(points))),
        Rational.ZERO,
    )


__all__ = ["basis_at_zero", "constant_term"]
