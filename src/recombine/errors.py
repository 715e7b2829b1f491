"""Failure kinds reported by the recombination pipeline.

Each failure is an exception carrying the offending fields. ``message``
renders the human readable text callers see in place of a numeric result.
"""
from __future__ import annotations

from typing import Any


class RecombineError(ValueError):
    """Base class for every failure the pipeline can report."""

    def __init__(self) -> None:
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "Error: Share document rejected."


class MissingKeys(RecombineError):
    """The document has no usable ``keys`` object."""

    @property
    def message(self) -> str:
        return "Error: Missing or invalid 'keys' object with numeric 'n' and 'k'."


class InvalidThreshold(RecombineError):
    """``k`` is not a positive integer or ``n`` is smaller than ``k``."""

    def __init__(self, n: Any, k: Any) -> None:
        self.n = n
        self.k = k
        super().__init__()

    @property
    def message(self) -> str:
        return "Error: 'k' must be a positive integer and 'n' must be >= 'k'."


class MissingField(RecombineError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: Point '{self.key}' missing 'base' or 'value'."


class InvalidBase(RecombineError):
    def __init__(self, key: str, base: Any) -> None:
        self.key = key
        self.base = base
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: Invalid base '{self.base}' for point '{self.key}'."


class InvalidX(RecombineError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: Invalid x coordinate '{self.key}'."


class InvalidY(RecombineError):
    def __init__(self, key: str, value: Any, base: Any) -> None:
        self.key = key
        self.value = value
        self.base = base
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: Invalid value '{self.value}' in base {self.base} for '{self.key}'."


class InsufficientPoints(RecombineError):
    def __init__(self, count: int, k: int) -> None:
        self.count = count
        self.k = k
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: Not enough points ({self.count}) to satisfy k={self.k}."


class DuplicateX(RecombineError):
    """Two of the selected points share an x coordinate."""

    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: Duplicate x values detected (x={self.x})."


class DivisionByZero(RecombineError):
    """A Lagrange basis denominator vanished."""

    @property
    def message(self) -> str:
        return "Error: Division by zero in basis denominator."


class InvalidSyntax(RecombineError):
    @property
    def message(self) -> str:
        return "Error: Invalid JSON syntax."


class Unexpected(RecombineError):
    """Wraps any other failure raised while processing a document."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__()

    @property
    def message(self) -> str:
        return f"Error: {self.detail}"


__all__ = [
    "DivisionByZero",
    "DuplicateX",
    "InsufficientPoints",
    "InvalidBase",
    "InvalidSyntax",
    "InvalidThreshold",
    "InvalidX",
    "InvalidY",
    "MissingField",
    "MissingKeys",
    "RecombineError",
    "Unexpected",
]
