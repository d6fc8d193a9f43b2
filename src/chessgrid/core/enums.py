"""Core enumerations for the grid domain."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds raised by grid constructors and conversions."""

    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_FORMAT = "invalid_format"
    NOT_SINGLETON = "not_singleton"

    def __str__(self) -> str:
        return self.name.lower()
