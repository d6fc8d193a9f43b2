"""Chessgrid — 8x8 grid coordinates and 64-bit square sets."""

from chessgrid.core import (
    Bitboard,
    ErrorKind,
    GridError,
    InvalidFormatError,
    NotSingletonError,
    OutOfBoundsError,
    Square,
)

__version__ = "0.1.0"

__all__ = [
    "Bitboard",
    "ErrorKind",
    "GridError",
    "InvalidFormatError",
    "NotSingletonError",
    "OutOfBoundsError",
    "Square",
    "__version__",
]
