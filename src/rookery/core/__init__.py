"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookery.core import Board, Color, Rules, parse_square

    board = Board.initial()
    e2 = parse_square("e2")
    for target in Rules.legal_moves(board, Color.WHITE, e2):
        print(target)
"""

from rookery.core.board import Board
from rookery.core.enums import Color, GameResult, PieceType
from rookery.core.errors import (
    ChessError,
    IllegalMoveError,
    InvalidSquareError,
    SnapshotError,
)
from rookery.core.move_generator import MoveGenerator, pseudo_legal_moves
from rookery.core.notation import (
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    castling_field,
    parse_move,
    parse_square,
    square_name,
)
from rookery.core.piece import Piece
from rookery.core.rules import Rules
from rookery.core.types import Square, valid_position

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Errors
    "ChessError",
    "IllegalMoveError",
    "InvalidSquareError",
    "SnapshotError",
    # Types / helpers
    "Square",
    "valid_position",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    "pseudo_legal_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "castling_field",
    "parse_move",
    "parse_square",
    "square_name",
]
