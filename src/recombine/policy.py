"""Runtime configuration for the recombination tools.

Values can be overridden by environment variables so deployments can tune
limits without code changes. Malformed overrides fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class RecombinePolicy:
    """Holds tunables for loading share documents."""

    max_document_mb: int = 16
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @property
    def max_document_bytes(self) -> int:
        return self.max_document_mb * 1024 * 1024


def load_policy() -> RecombinePolicy:
    """Load the policy considering environment overrides."""

    return RecombinePolicy(
        max_document_mb=_load_int("RECOMBINE_MAX_DOCUMENT_MB", 16),
        encoding=_load_str("RECOMBINE_ENCODING", "utf-8"),
        log_level=_load_str("RECOMBINE_LOG_LEVEL", "WARNING").upper(),
    )


policy = load_policy()


__all__ = ["RecombinePolicy", "policy", "load_policy"]
