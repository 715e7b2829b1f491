"""Single entry point from share document text to the reconstructed constant term."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import NoReturn, Optional, Union

from .digits import unbounded_int_digits
from .errors import InvalidSyntax, RecombineError, Unexpected
from .formatting import format_rational
from .interpolate import constant_term
from .points import build_point_set, select_points
from .rational import Rational

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Either a reconstructed value or the failure that prevented it."""

    value: Optional[Rational] = None
    error: Optional[RecombineError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("an outcome holds exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        with unbounded_int_digits():
            if self.error is not None:
                return self.error.message
            return format_rational(self.value)


def _reject_constant(name: str) -> NoReturn:
    # NaN and Infinity are not JSON
    raise InvalidSyntax()


def _decode(text: Union[str, bytes]) -> object:
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidSyntax() from None
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError:
        raise InvalidSyntax() from None


def _run(text: Union[str, bytes]) -> Rational:
    document = _decode(text)
    point_set = build_point_set(document)
    return constant_term(select_points(point_set))


def reconstruct(text: Union[str, bytes]) -> Outcome:
    """Run the whole pipeline, capturing any failure in the returned outcome."""
    with unbounded_int_digits():
        try:
            return Outcome(value=_run(text))
        except RecombineError as exc:
            _logger.info("Reconstruction rejected: %s", exc.message)
            return Outcome(error=exc)
        except Exception as exc:
            _logger.warning("Unexpected failure during reconstruction", exc_info=True)
            return Outcome(error=Unexpected(str(exc) or type(exc).__name__))


def compute_constant_term(text: Union[str, bytes]) -> str:
    """Return the constant term as ``"n"`` or ``"n/d"``, or an error message.

    Never raises: malformed input of any kind is reported as an
    ``"Error: ..."`` string.
    """
    return reconstruct(text).render()


__all__ = ["Outcome", "compute_constant_term", "reconstruct"]
