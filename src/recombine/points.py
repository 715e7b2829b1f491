"""Turn a decoded share document into an ordered set of points."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

from .digits import unbounded_int_digits
from .errors import (
    DuplicateX,
    InsufficientPoints,
    InvalidBase,
    InvalidThreshold,
    InvalidX,
    InvalidY,
    MissingField,
    MissingKeys,
)

_logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"
MIN_BASE = 2
MAX_BASE = 36

_DECIMAL_RE = re.compile(r"-?[0-9]+")
_RADIX_RE = re.compile(r"-?[0-9A-Za-z]+")
_BASE_RE = re.compile(r"\s*([0-9]+)\s*")


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class PointSet:
    """All valid points of a document together with its declared ``n`` and ``k``."""

    n: int
    k: int
    points: tuple[Point, ...]

    def select(self) -> tuple[Point, ...]:
        return select_points(self)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_integer(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _read_threshold(document: Any) -> tuple[int, int]:
    if not isinstance(document, Mapping):
        raise MissingKeys()
    keys = document.get(KEYS_FIELD)
    if not isinstance(keys, Mapping):
        raise MissingKeys()
    raw_n, raw_k = keys.get("n"), keys.get("k")
    if not _is_number(raw_n) or not _is_number(raw_k):
        raise MissingKeys()

    n, k = _as_integer(raw_n), _as_integer(raw_k)
    if k is None or k <= 0 or n is None or n < k:
        raise InvalidThreshold(raw_n, raw_k)
    return n, k


def parse_base(key: str, base: Any) -> int:
    """Decode a record's radix, accepting integers and decimal digit strings."""
    radix: int | None
    if isinstance(base, str):
        match = _BASE_RE.fullmatch(base)
        radix = int(match.group(1)) if match else None
    else:
        radix = _as_integer(base)
    if radix is None or not MIN_BASE <= radix <= MAX_BASE:
        raise InvalidBase(key, base)
    return radix


def parse_x(key: str) -> int:
    if not _DECIMAL_RE.fullmatch(key):
        raise InvalidX(key)
    with unbounded_int_digits():
        return int(key, 10)


def parse_y(key: str, value: Any, base: Any, radix: int) -> int:
    with unbounded_int_digits():
        return _parse_y(key, value, base, radix)


def _parse_y(key: str, value: Any, base: Any, radix: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        text = str(value)
    elif isinstance(value, str):
        text = value
    else:
        raise InvalidY(key, value, base)
    # int() would also accept "0x"/"0b"/"0o" prefixes, so check each digit
    if not _RADIX_RE.fullmatch(text) or any(
        int(digit, MAX_BASE) >= radix for digit in text.lstrip("-")
    ):
        raise InvalidY(key, value, base)
    return int(text, radix)


def parse_point(key: str, record: Any) -> Point:
    """Validate one share record and return it as a :class:`Point`."""
    if not isinstance(record, Mapping) or not record.get("base") or not record.get("value"):
        raise MissingField(key)
    base = record["base"]
    value = record["value"]
    radix = parse_base(key, base)
    return Point(x=parse_x(key), y=parse_y(key, value, base, radix))


def build_point_set(document: Any) -> PointSet:
    """Validate ``document`` and collect every share record in document order."""
    n, k = _read_threshold(document)
    points = tuple(
        parse_point(key, record)
        for key, record in document.items()
        if key != KEYS_FIELD
    )
    _logger.debug("Parsed %d points (n=%d, k=%d)", len(points), n, k)
    if len(points) < k:
        raise InsufficientPoints(len(points), k)
    return PointSet(n=n, k=k, points=points)


def select_points(point_set: PointSet) -> tuple[Point, ...]:
    """Return the ``k`` points with the smallest x, rejecting repeated x values."""
    ordered = sorted(point_set.points, key=lambda point: point.x)
    selected = tuple(ordered[: point_set.k])

    seen: set[int] = set()
    with unbounded_int_digits():
        for point in selected:
            if point.x in seen:
                _logger.info("Rejected share set: duplicate x=%d", point.x)
                raise DuplicateX(point.x)
            seen.add(point.x)

        _logger.debug("Selected xs: %s", [point.x for point in selected])
    return selected


__all__ = [
    "MAX_BASE",
    "MIN_BASE",
    "Point",
    "PointSet",
    "build_point_set",
    "parse_base",
    "parse_point",
    "parse_x",
    "parse_y",
    "select_points",
]
