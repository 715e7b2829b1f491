"""Lift the interpreter's cap on int/str conversion length.

Python 3.11+ refuses to convert integers of more than 4300 decimal digits
to or from text. Share coordinates carry no upper bound, so the pipeline
runs its conversions inside :func:`unbounded_int_digits`.
"""
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def unbounded_int_digits() -> Iterator[None]:
    """Disable the conversion limit for the duration of the block, then restore it."""
    getter = getattr(sys, "get_int_max_str_digits", None)
    if getter is None:  # pragma: no cover - interpreters without the limit
        yield
        return
    previous = getter()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


__all__ = ["unbounded_int_digits"]
