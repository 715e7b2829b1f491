"""Exact fractions over Python integers.

Every :class:`Rational` handed out by this module is canonical: the
denominator is positive and shares no factor with the numerator. The only
non-canonical values ever computed are the cross-multiplied intermediates
inside :func:`add`, which are reduced before they escape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


class ZeroDenominatorError(ZeroDivisionError):
    """Raised when a fraction would be built over a zero denominator."""


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``|a|`` and ``|b|`` (Euclid)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class Rational:
    numerator: int
    denominator: int

    ZERO: ClassVar["Rational"]
    ONE: ClassVar["Rational"]

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDenominatorError("denominator must be non-zero")
        if self.denominator < 0 or gcd(self.numerator, self.denominator) != 1:
            raise ValueError("fraction must be in lowest terms with a positive denominator")

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value, 1)

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def __add__(self, other: Union["Rational", int]) -> "Rational":
        if isinstance(other, int):
            other = Rational.from_int(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    def __str__(self) -> str:
        from .formatting import format_rational

        return format_rational(self)


Rational.ZERO = Rational(0, 1)
Rational.ONE = Rational(1, 1)


def reduce(numerator: int, denominator: int) -> Rational:
    """Return ``numerator/denominator`` in lowest terms with a positive denominator."""
    if denominator == 0:
        raise ZeroDenominatorError("denominator must be non-zero")
    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return Rational(numerator, denominator)


def add(a: Rational, b: Rational) -> Rational:
    """Sum of two fractions, reduced."""
    return reduce(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


__all__ = ["Rational", "ZeroDenominatorError", "add", "gcd", "reduce"]
