"""Tests for coordinate text and FEN placement helpers."""

import pytest

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.errors import InvalidSquareError
from rookery.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    castling_field,
    parse_move,
    parse_square,
    square_name,
)
from rookery.core.types import A1, A8, E1, E2, E4, H1, H8


class TestSquares:
    @pytest.mark.parametrize(
        ("name", "sq"),
        [("a8", A8), ("h8", H8), ("a1", A1), ("h1", H1), ("e2", E2)],
    )
    def test_parse(self, name: str, sq: tuple[int, int]) -> None:
        assert parse_square(name) == sq

    def test_parse_is_forgiving_about_case_and_spaces(self) -> None:
        assert parse_square(" E4 ") == E4

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e0", "e44", "4e"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(InvalidSquareError):
            parse_square(name)

    def test_name(self) -> None:
        assert square_name(E2) == "e2"
        assert square_name(A8) == "a8"

    def test_name_off_board(self) -> None:
        with pytest.raises(InvalidSquareError):
            square_name((8, 0))

    def test_invalid_square_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_square("z9")


class TestParseMove:
    def test_two_coordinates(self) -> None:
        assert parse_move("e2 e4") == (E2, E4)

    def test_extra_whitespace(self) -> None:
        assert parse_move("  e2    e4 ") == (E2, E4)

    @pytest.mark.parametrize("text", ["e2", "e2 e4 e5", "e2-e4", ""])
    def test_wrong_shape(self, text: str) -> None:
        with pytest.raises(InvalidSquareError):
            parse_move(text)


class TestFenPlacement:
    def test_starting_placement_matches_initial(self) -> None:
        assert board_from_fen(STARTING_PLACEMENT) == Board.initial()

    def test_to_fen_initial(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_PLACEMENT

    def test_to_fen_after_move(self) -> None:
        board = Board.initial()
        board.move_piece(E2, E4)
        assert board_to_fen(board) == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"

    def test_pawn_off_start_rank_counts_as_moved(self) -> None:
        board = board_from_fen("4k3/8/8/8/4P3/8/3P4/4K3")
        assert board[E4].has_moved
        assert not board[(6, 3)].has_moved

    def test_castling_letters_control_king_and_rooks(self) -> None:
        board = board_from_fen("r3k2r/8/8/8/8/8/8/R3K2R", castling="Kq")
        assert not board[E1].has_moved
        assert not board[H1].has_moved
        assert board[A1].has_moved
        assert not board[A8].has_moved
        assert board[H8].has_moved

    def test_no_castling_marks_kings_moved(self) -> None:
        board = board_from_fen("r3k2r/8/8/8/8/8/8/R3K2R", castling="-")
        assert board[E1].has_moved
        assert board[(0, 4)].has_moved

    def test_castling_field_roundtrip(self) -> None:
        board = board_from_fen("r3k2r/8/8/8/8/8/8/R3K2R", castling="Qk")
        assert castling_field(board) == "Qk"
        assert castling_field(Board.initial()) == "KQkq"

    def test_castling_field_after_king_moves(self) -> None:
        board = Board.initial()
        board[E1].has_moved = True
        assert castling_field(board) == "kq"

    def test_king_cache_populated(self) -> None:
        board = board_from_fen("8/8/8/3k4/8/8/8/K7")
        assert board.king_square(Color.BLACK) == (3, 3)
        assert board.king_square(Color.WHITE) == (7, 0)
        assert board[(3, 3)].piece_type == PieceType.KING

    @pytest.mark.parametrize(
        "placement",
        [
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid_placement(self, placement: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(placement)

    def test_invalid_castling(self) -> None:
        with pytest.raises(ValueError):
            board_from_fen(STARTING_PLACEMENT, castling="KK")
