"""Core domain layer — grid coordinates and square sets with zero external dependencies.

Quick start::

    from chessgrid.core import Bitboard, Square

    bb = Bitboard()
    bb.set(Square.from_string("e4"))
    print(bb.count())
"""

from chessgrid.core.bitboard import EMPTY, FULL, Bitboard
from chessgrid.core.enums import ErrorKind
from chessgrid.core.errors import (
    GridError,
    InvalidFormatError,
    NotSingletonError,
    OutOfBoundsError,
)
from chessgrid.core.types import (
    BOARD_SIZE,
    FILE_NAMES,
    NUM_SQUARES,
    RANK_NAMES,
    SQUARES,
    Square,
)

__all__ = [
    # Enums
    "ErrorKind",
    # Errors
    "GridError",
    "InvalidFormatError",
    "NotSingletonError",
    "OutOfBoundsError",
    # Geometry
    "BOARD_SIZE",
    "FILE_NAMES",
    "NUM_SQUARES",
    "RANK_NAMES",
    "SQUARES",
    # Value types
    "Bitboard",
    "EMPTY",
    "FULL",
    "Square",
]
