"""High-level chess rules: legal moves, check, checkmate, stalemate."""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import Color, GameResult
from rookery.core.errors import IllegalMoveError, InvalidSquareError
from rookery.core.move_generator import MoveGenerator
from rookery.core.types import Square, valid_position


def _require_square(sq: Square) -> None:
    if not valid_position(sq):
        raise InvalidSquareError(f"Square off the board: {sq!r}")


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every hypothetical is evaluated on a cloned board; the board passed in
    is only ever mutated by :meth:`apply_move`.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def would_be_in_check(
        board: Board, color: Color, from_sq: Square, to_sq: Square
    ) -> bool:
        """Would *color* be in check after playing *from_sq* → *to_sq*?"""
        trial = board.copy()
        trial.move_piece(from_sq, to_sq)
        return MoveGenerator(trial).is_in_check(color)

    @staticmethod
    def legal_moves(board: Board, color: Color, from_sq: Square) -> set[Square]:
        """Targets of *color*'s piece on *from_sq* that keep its king safe.

        Empty when the square is empty or holds an opposing piece.
        """
        _require_square(from_sq)
        piece = board[from_sq]
        if piece is None or piece.color != color:
            return set()
        candidates = MoveGenerator(board).pseudo_legal_moves(from_sq)
        return {
            to_sq
            for to_sq in candidates
            if not Rules.would_be_in_check(board, color, from_sq, to_sq)
        }

    @staticmethod
    def all_legal_moves(board: Board, color: Color) -> dict[Square, set[Square]]:
        """Legal targets per origin square, omitting pieces with no moves."""
        result: dict[Square, set[Square]] = {}
        for from_sq in board.pieces(color):
            targets = Rules.legal_moves(board, color, from_sq)
            if targets:
                result[from_sq] = targets
        return result

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        """Whether any piece of *color* has a move that leaves its king safe."""
        gen = MoveGenerator(board)
        for from_sq in board.pieces(color):
            for to_sq in gen.pseudo_legal_moves(from_sq):
                if not Rules.would_be_in_check(board, color, from_sq, to_sq):
                    return True
        return False

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def apply_move(board: Board, from_sq: Square, to_sq: Square) -> Board:
        """Play *from_sq* → *to_sq* on *board* in place, castling included.

        Only the board boundary is enforced here; turn order and legality
        belong to the caller (see :meth:`legal_moves`).
        """
        _require_square(from_sq)
        _require_square(to_sq)
        if board.is_empty(from_sq):
            raise IllegalMoveError(f"No piece on {from_sq!r}")
        board.move_piece(from_sq, to_sq)
        return board

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the current game result with *side_to_move* to play."""
        if Rules.has_legal_move(board, side_to_move):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(board, side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
