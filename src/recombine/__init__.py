"""Exact-rational recombination of threshold shares.

``compute_constant_term`` takes the text of a share document and returns the
constant term of the interpolating polynomial as ``"n"`` or ``"n/d"``, or an
``"Error: ..."`` message describing why the document was rejected.
"""

from __future__ import annotations

from .engine import Outcome, compute_constant_term, reconstruct
from .errors import RecombineError
from .points import Point, PointSet, build_point_set, select_points
from .rational import Rational

__all__ = [
    "Outcome",
    "Point",
    "PointSet",
    "Rational",
    "RecombineError",
    "build_point_set",
    "compute_constant_term",
    "reconstruct",
    "select_points",
]
