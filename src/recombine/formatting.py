from __future__ import annotations

from typing import TYPE_CHECKING

from .digits import unbounded_int_digits

if TYPE_CHECKING:  # pragma: no cover
    from .rational import Rational


def format_rational(value: "Rational") -> str:
    """Render ``value`` as ``"n"`` when integral, else ``"n/d"``."""
    with unbounded_int_digits():
        if value.denominator == 1:
            return str(value.numerator)
        return f"{value.numerator}/{value.denominator}"


__all__ = ["format_rational"]
