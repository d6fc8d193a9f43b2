"""Tests for the Square value type."""

import copy
import logging
import pickle
from dataclasses import FrozenInstanceError

import pytest

from chessgrid.core.enums import ErrorKind
from chessgrid.core.errors import GridError, InvalidFormatError, OutOfBoundsError
from chessgrid.core.types import (
    A1, A8, D4, E4, H1, H8,
    NUM_SQUARES,
    SQUARES,
    Square,
)


class TestSquareConstruction:
    def test_all_coordinates_round_trip(self) -> None:
        for x in range(8):
            for y in range(8):
                sq = Square(x, y)
                assert (sq.x, sq.y) == (x, y)

    @pytest.mark.parametrize("x, y", [(8, 0), (0, 8), (8, 8), (255, 0), (0, 255), (255, 255), (-1, 0)])
    def test_out_of_bounds(self, x: int, y: int) -> None:
        with pytest.raises(OutOfBoundsError):
            Square(x, y)

    def test_non_int_coordinate_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            Square("a", 0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Square(True, 0)

    def test_from_index_round_trip(self) -> None:
        for idx in range(NUM_SQUARES):
            assert Square.from_index(idx).index == idx

    def test_from_index_decomposes(self) -> None:
        sq = Square.from_index(28)
        assert (sq.x, sq.y) == (4, 3)
        assert sq == E4

    @pytest.mark.parametrize("idx", [64, 255, -1])
    def test_from_index_out_of_bounds(self, idx: int) -> None:
        with pytest.raises(OutOfBoundsError):
            Square.from_index(idx)


class TestSquareCorners:
    def test_index(self, corners: tuple[Square, Square, Square, Square]) -> None:
        assert [sq.index for sq in corners] == [0, 7, 56, 63]

    def test_x(self, corners: tuple[Square, Square, Square, Square]) -> None:
        assert [sq.x for sq in corners] == [0, 7, 0, 7]

    def test_y(self, corners: tuple[Square, Square, Square, Square]) -> None:
        assert [sq.y for sq in corners] == [0, 0, 7, 7]

    def test_names(self, corners: tuple[Square, Square, Square, Square]) -> None:
        assert [str(sq) for sq in corners] == ["a1", "h1", "a8", "h8"]

    def test_named_constants(self, corners: tuple[Square, Square, Square, Square]) -> None:
        assert corners == (A1, H1, A8, H8)

    def test_from_index(self, corners: tuple[Square, Square, Square, Square]) -> None:
        assert tuple(Square.from_index(i) for i in (0, 7, 56, 63)) == corners


class TestSquareNotation:
    def test_parse(self) -> None:
        assert Square.from_string("a1") == A1
        assert Square.from_string("h1") == H1
        assert Square.from_string("a8") == A8
        assert Square.from_string("h8") == H8
        assert Square.from_string("d4") == D4

    def test_file_is_case_insensitive(self) -> None:
        assert Square.from_string("A1") == Square.from_string("a1")
        assert Square.from_string("E4") == E4

    def test_display_is_lower_case(self) -> None:
        assert str(Square.from_string("H8")) == "h8"

    def test_text_round_trip(self) -> None:
        for sq in SQUARES:
            assert Square.from_string(str(sq)) == sq

    @pytest.mark.parametrize("text", ["i1", "a9", "a0", "a", "a11", "", "1a", "e 4", "  "])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidFormatError):
            Square.from_string(text)

    def test_non_str_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            Square.from_string(11)  # type: ignore[arg-type]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessgrid.core.types"):
            with pytest.raises(InvalidFormatError):
                Square.from_string("z9")
        assert "'z9'" in caplog.text

    def test_file_and_rank_names(self) -> None:
        assert E4.file_name == "e"
        assert E4.rank_name == "4"


class TestSquarePacking:
    def test_nibble_layout(self) -> None:
        assert E4.packed == 0x43
        assert A1.packed == 0x00
        assert H8.packed == 0x77

    def test_packed_round_trip(self) -> None:
        for sq in SQUARES:
            assert Square.from_packed(sq.packed) == sq

    @pytest.mark.parametrize("packed", [0x80, 0x08, 0x88, 0xFF, 0x100, -1])
    def test_from_packed_out_of_bounds(self, packed: int) -> None:
        with pytest.raises(OutOfBoundsError):
            Square.from_packed(packed)


class TestSquareValueSemantics:
    def test_equality(self, corners: tuple[Square, Square, Square, Square]) -> None:
        for i, a in enumerate(corners):
            for j, b in enumerate(corners):
                assert (a == b) == (i == j)

    def test_not_equal_to_int(self) -> None:
        assert A1 != 0

    def test_hashable(self) -> None:
        assert len({Square(4, 3), E4, Square.from_string("e4")}) == 1

    def test_ordering_follows_index(self) -> None:
        assert H1 < A8
        assert sorted([H8, A8, H1, A1]) == [A1, H1, A8, H8]

    def test_immutable(self) -> None:
        sq = Square(1, 2)
        with pytest.raises(AttributeError):
            sq.x = 3  # type: ignore[misc]
        with pytest.raises(AttributeError):
            sq._packed = 0  # type: ignore[misc]
        with pytest.raises(FrozenInstanceError):
            del sq._packed
        assert (sq.x, sq.y) == (1, 2)

    def test_usable_as_sequence_index(self) -> None:
        cells = list(range(64))
        assert cells[H8] == 63
        assert int(E4) == 28

    def test_copy_and_pickle(self) -> None:
        assert copy.copy(E4) == E4
        assert copy.deepcopy(E4) == E4
        assert pickle.loads(pickle.dumps(E4)) == E4

    def test_repr(self) -> None:
        assert repr(E4) == "Square.from_string('e4')"

    def test_offset(self) -> None:
        assert A1.offset(4, 3) == E4
        assert E4.offset(-4, -3) == A1
        with pytest.raises(OutOfBoundsError):
            H8.offset(1, 0)


class TestErrorKinds:
    def test_kinds(self) -> None:
        with pytest.raises(GridError) as exc:
            Square(8, 0)
        assert exc.value.kind is ErrorKind.OUT_OF_BOUNDS

        with pytest.raises(GridError) as exc:
            Square.from_string("i1")
        assert exc.value.kind is ErrorKind.INVALID_FORMAT

    def test_grid_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError) as exc:
            Square.from_index(64)
        assert exc.value.kind is ErrorKind.OUT_OF_BOUNDS

    def test_kind_str(self) -> None:
        assert str(ErrorKind.NOT_SINGLETON) == "not_singleton"
