"""Square value type and grid geometry.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

A square is stored packed in one byte, file in the high nibble and rank in
the low nibble, e.g. e4 → ``0x43``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Final

from chessgrid.core.errors import InvalidFormatError, OutOfBoundsError

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE: Final = 8
NUM_SQUARES: Final = BOARD_SIZE * BOARD_SIZE
FILE_NAMES: Final = "abcdefgh"
RANK_NAMES: Final = "12345678"

_NIBBLE: Final = 0x0F


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful coordinate.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


@total_ordering
@dataclass(frozen=True, slots=True, init=False)
class Square:
    """Immutable coordinate of one cell on the 8x8 grid.

    Construct with :class:`Square` ``(x, y)``, :meth:`from_index`,
    :meth:`from_string` or :meth:`from_packed`. Every constructor rejects
    out-of-range input; nothing is clamped or wrapped.
    """

    _packed: int

    def __init__(self, x: int, y: int) -> None:
        _require_int("x", x)
        _require_int("y", y)
        if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
            raise OutOfBoundsError(f"Square out of bounds [0..8): ({x!r}, {y!r})")
        object.__setattr__(self, "_packed", (x << 4) | y)

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for linear index ``y*8 + x``, e.g. 28 → e4."""
        _require_int("index", index)
        if not 0 <= index < NUM_SQUARES:
            raise OutOfBoundsError(f"Square index out of bounds [0..64): {index!r}")
        return SQUARES[index]

    @classmethod
    def from_string(cls, text: str) -> Square:
        """Parse algebraic notation, e.g. ``'e4'``. The file letter is case-insensitive."""
        if not isinstance(text, str):
            raise TypeError(f"Square notation must be a str, got {type(text).__name__}")
        if len(text) != 2:
            _LOGGER.debug("Rejected square notation of length %d: %r", len(text), text)
            raise InvalidFormatError(f"Square notation must be 2 characters: {text!r}")
        file_char, rank_char = text[0].lower(), text[1]
        if file_char not in FILE_NAMES or rank_char not in RANK_NAMES:
            _LOGGER.debug("Rejected square notation: %r", text)
            raise InvalidFormatError(f"Invalid square notation: {text!r}")
        return SQUARES[RANK_NAMES.index(rank_char) * BOARD_SIZE + FILE_NAMES.index(file_char)]

    @classmethod
    def from_packed(cls, packed: int) -> Square:
        """Inverse of :attr:`packed`."""
        _require_int("packed", packed)
        if not 0 <= packed <= 0xFF:
            raise OutOfBoundsError(f"Packed square must fit in one byte: {packed!r}")
        return cls(packed >> 4, packed & _NIBBLE)

    # ── Coordinates ──────────────────────────────────────────────────────

    @property
    def x(self) -> int:
        """File index 0–7 (a–h)."""
        return self._packed >> 4

    @property
    def y(self) -> int:
        """Rank index 0–7 (1–8)."""
        return self._packed & _NIBBLE

    @property
    def index(self) -> int:
        """Linear index 0–63."""
        return (self._packed & _NIBBLE) * BOARD_SIZE + (self._packed >> 4)

    @property
    def packed(self) -> int:
        return self._packed

    @property
    def file_name(self) -> str:
        return FILE_NAMES[self.x]

    @property
    def rank_name(self) -> str:
        return RANK_NAMES[self.y]

    def offset(self, dx: int, dy: int) -> Square:
        """Square shifted by ``(dx, dy)``; raises if that leaves the grid."""
        return Square(self.x + dx, self.y + dy)

    # ── Value semantics ──────────────────────────────────────────────────

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Square):
            return NotImplemented
        return self.index < other.index

    def __index__(self) -> int:
        return self.index

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        """Algebraic name, e.g. index 0 → 'a1', 63 → 'h8'."""
        return FILE_NAMES[self.x] + RANK_NAMES[self.y]

    def __repr__(self) -> str:
        return f"Square.from_string({str(self)!r})"


SQUARES: Final[tuple[Square, ...]] = tuple(
    Square(idx % BOARD_SIZE, idx // BOARD_SIZE) for idx in range(NUM_SQUARES)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[56:64]
