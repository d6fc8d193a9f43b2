"""Exception hierarchy for grid primitives.

Every error is a :class:`ValueError` tagged with an :class:`ErrorKind`, so
callers can either catch the concrete class or branch on ``err.kind``.
"""

from __future__ import annotations

from typing import ClassVar

from chessgrid.core.enums import ErrorKind


class GridError(ValueError):
    """Base class for all grid errors."""

    kind: ClassVar[ErrorKind]


class OutOfBoundsError(GridError):
    """A coordinate, index or raw value lies outside the grid."""

    kind = ErrorKind.OUT_OF_BOUNDS


class InvalidFormatError(GridError):
    """Text does not match two-character algebraic notation."""

    kind = ErrorKind.INVALID_FORMAT


class NotSingletonError(GridError):
    """A bitboard does not hold exactly one square."""

    kind = ErrorKind.NOT_SINGLETON
