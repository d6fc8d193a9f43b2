"""Bitboard - a set of squares packed into one 64-bit integer.

Bit ``i`` (counting from the least significant bit) is set iff the square
with linear index ``i`` is a member::

    rank 8 | 56 57 58 59 60 61 62 63
    ...
    rank 2 |  8  9 10 11 12 13 14 15
    rank 1 |  0  1  2  3  4  5  6  7
              a  b  c  d  e  f  g  h
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Final

from chessgrid.core.errors import NotSingletonError, OutOfBoundsError
from chessgrid.core.types import BOARD_SIZE, NUM_SQUARES, SQUARES, Square

_LOGGER = logging.getLogger(__name__)

EMPTY: Final = 0
FULL: Final = (1 << NUM_SQUARES) - 1


def _check_bits(bits: int) -> int:
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"Bitboard bits must be an int, got {type(bits).__name__}")
    if not EMPTY <= bits <= FULL:
        raise OutOfBoundsError(f"Bitboard bits must fit in 64 unsigned bits: {bits:#x}")
    return bits


def _bits_of(value: object) -> int | None:
    """Raw bits of a set-algebra operand, or None when the type is unsupported."""
    if isinstance(value, Bitboard):
        return value._bits
    if isinstance(value, Square):
        return 1 << value.index
    if isinstance(value, int) and not isinstance(value, bool):
        return _check_bits(value)
    return None


class Bitboard:
    """Mutable set of :class:`Square` values backed by a single integer.

    ``set``, ``clear`` and ``put`` return the membership *before* the
    mutation, so callers can detect no-op writes without a separate
    :meth:`get`.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: int = EMPTY) -> None:
        self._bits = _check_bits(bits)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def from_bits(cls, bits: int) -> Bitboard:
        return cls(bits)

    @classmethod
    def from_square(cls, sq: Square) -> Bitboard:
        """Singleton set; every square maps to one, so this never fails."""
        return cls(1 << sq.index)

    @classmethod
    def from_squares(cls, squares: Iterable[Square]) -> Bitboard:
        bits = EMPTY
        for sq in squares:
            bits |= 1 << sq.index
        return cls(bits)

    # -- Element access -----------------------------------------------------

    @property
    def bits(self) -> int:
        return self._bits

    def get(self, sq: Square) -> bool:
        return self._bits & (1 << sq.index) != 0

    def set(self, sq: Square) -> bool:
        old = self.get(sq)
        self._bits |= 1 << sq.index
        return old

    def clear(self, sq: Square) -> bool:
        old = self.get(sq)
        self._bits &= ~(1 << sq.index)
        return old

    def put(self, sq: Square, value: bool) -> bool:
        if value:
            return self.set(sq)
        return self.clear(sq)

    # -- Cardinality --------------------------------------------------------

    def count(self) -> int:
        return self._bits.bit_count()

    def any(self) -> bool:
        return self._bits != EMPTY

    def none(self) -> bool:
        return self._bits == EMPTY

    # -- Conversions --------------------------------------------------------

    def to_square(self) -> Square:
        """The sole member; raises :class:`NotSingletonError` otherwise."""
        count = self.count()
        if count != 1:
            _LOGGER.debug("Bitboard %#018x holds %d squares, not one", self._bits, count)
            raise NotSingletonError(
                f"Bitboard does not contain exactly one square (has {count})"
            )
        return SQUARES[self._bits.bit_length() - 1]

    def squares(self) -> list[Square]:
        """Members in ascending index order."""
        return list(self)

    def copy(self) -> Bitboard:
        return Bitboard(self._bits)

    def __iter__(self) -> Iterator[Square]:
        bits = self._bits
        while bits:
            lsb = bits & -bits
            yield SQUARES[lsb.bit_length() - 1]
            bits ^= lsb

    def __contains__(self, sq: object) -> bool:
        if not isinstance(sq, Square):
            return False
        return self.get(sq)

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return self.any()

    def __int__(self) -> int:
        return self._bits

    # -- Set algebra --------------------------------------------------------

    def __or__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Bitboard(self._bits | bits)

    def __and__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Bitboard(self._bits & bits)

    def __xor__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Bitboard(self._bits ^ bits)

    def __sub__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Bitboard(self._bits & ~bits)

    def __rsub__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        return Bitboard(bits & ~self._bits)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __invert__(self) -> Bitboard:
        return Bitboard(self._bits ^ FULL)

    def __ior__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        self._bits |= bits
        return self

    def __iand__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        self._bits &= bits
        return self

    def __ixor__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        self._bits ^= bits
        return self

    def __isub__(self, other: object) -> Bitboard:
        bits = _bits_of(other)
        if bits is None:
            return NotImplemented
        self._bits &= ~bits
        return self

    # -- Comparison / display -----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bitboard):
            return self._bits == other._bits
        if isinstance(other, int) and not isinstance(other, bool):
            return self._bits == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        """Grid of 0/1, rank 1 on the first line, file a leftmost."""
        lines = []
        for rank in range(BOARD_SIZE):
            row = (self._bits >> (rank * BOARD_SIZE)) & 0xFF
            lines.append(" ".join("1" if row >> f & 1 else "0" for f in range(BOARD_SIZE)))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Bitboard({self._bits:#018x})"
