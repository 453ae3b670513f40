"""Coordinate text and FEN piece-placement helpers."""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.errors import InvalidSquareError
from rookery.core.piece import Piece
from rookery.core.types import FILES, RANKS, Square, valid_position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_HOME_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_KING_HOME_COL = 4

# Castling letter -> (color, rook column)
_CASTLING_CORNERS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


# ── Coordinates ──────────────────────────────────────────────────────────────


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise InvalidSquareError(f"Invalid square name: {name!r}")
    return (8 - int(text[1]), FILES.index(text[0]))


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    if not valid_position(sq):
        raise InvalidSquareError(f"Square off the board: {sq!r}")
    row, col = sq
    return f"{FILES[col]}{8 - row}"


def parse_move(text: str) -> tuple[Square, Square]:
    """Parse a pair of coordinates, e.g. 'e2 e4' → ((6, 4), (4, 4))."""
    parts = text.split()
    if len(parts) != 2:
        raise InvalidSquareError(f"Expected two squares, got: {text!r}")
    return parse_square(parts[0]), parse_square(parts[1])


# ── FEN piece placement ──────────────────────────────────────────────────────


def board_from_fen(placement: str, castling: str = "KQkq") -> Board:
    """Build a :class:`Board` from the FEN piece-placement field.

    ``has_moved`` is inferred since FEN does not carry it: pawns away from
    their start rank count as moved, and a king or rook counts as unmoved
    only while a *castling* letter still covers it.
    """
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")

    _infer_has_moved(board, _parse_castling(castling))
    return board


def board_to_fen(board: Board) -> str:
    """FEN piece-placement field for *board*."""
    ranks: list[str] = []
    for row in range(8):
        text = ""
        gap = 0
        for col in range(8):
            piece = board[(row, col)]
            if piece is None:
                gap += 1
                continue
            if gap:
                text += str(gap)
                gap = 0
            text += str(piece)
        if gap:
            text += str(gap)
        ranks.append(text)
    return "/".join(ranks)


def castling_field(board: Board) -> str:
    """FEN castling field derived from unmoved kings and rooks."""
    letters = ""
    for letter, (color, rook_col) in _CASTLING_CORNERS.items():
        home = _HOME_ROW[color]
        king = board[(home, _KING_HOME_COL)]
        rook = board[(home, rook_col)]
        if (
            king is not None
            and king.piece_type == PieceType.KING
            and king.color == color
            and not king.has_moved
            and rook is not None
            and rook.piece_type == PieceType.ROOK
            and rook.color == color
            and not rook.has_moved
        ):
            letters += letter
    return letters or "-"


def _parse_castling(castling: str) -> set[str]:
    if castling == "-":
        return set()
    seen: set[str] = set()
    for ch in castling:
        if ch not in _CASTLING_CORNERS or ch in seen:
            raise ValueError(f"Invalid FEN castling field: {castling!r}")
        seen.add(ch)
    return seen


def _infer_has_moved(board: Board, rights: set[str]) -> None:
    unmoved_rooks: set[Square] = set()
    colors_with_rights: set[Color] = set()
    for letter in rights:
        color, rook_col = _CASTLING_CORNERS[letter]
        unmoved_rooks.add((_HOME_ROW[color], rook_col))
        colors_with_rights.add(color)

    for piece in board:
        ptype = piece.piece_type
        row, col = piece.position
        if ptype == PieceType.PAWN:
            piece.has_moved = row != _PAWN_START_ROW[piece.color]
        elif ptype == PieceType.KING:
            at_home = piece.position == (_HOME_ROW[piece.color], _KING_HOME_COL)
            piece.has_moved = not (at_home and piece.color in colors_with_rights)
        elif ptype == PieceType.ROOK:
            piece.has_moved = piece.position not in unmoved_rooks
