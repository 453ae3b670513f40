"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# White marches toward row 0, black toward row 7.
_PAWN_DIRECTION: tuple[int, int] = (-1, 1)
_PAWN_START_ROW: tuple[int, int] = (6, 1)

_KINGSIDE_ROOK_COL = 7
_QUEENSIDE_ROOK_COL = 0


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for row in range(8):
        for col in range(8):
            moves: list[Square] = []
            for dr, dc in offsets:
                r = row + dr
                c = col + dc
                if 0 <= r < 8 and 0 <= c < 8:
                    moves.append((r, c))
            targets[(row, col)] = tuple(moves)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for row in range(8):
        for col in range(8):
            square_rays: list[tuple[Square, ...]] = []
            for dr, dc in directions:
                r = row + dr
                c = col + dc
                ray: list[Square] = []
                while 0 <= r < 8 and 0 <= c < 8:
                    ray.append((r, c))
                    r += dr
                    c += dc
                square_rays.append(tuple(ray))
            rays_per_square[(row, col)] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Pseudo-legal move sets and check detection for a :class:`Board`.

    Never mutates the board it wraps; hypothetical positions are built on
    :meth:`Board.copy` clones.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(
        self, sq: Square, *, include_castling: bool = True
    ) -> set[Square]:
        """Targets of the piece on *sq*, ignoring whether its own king is left in check."""
        piece = self._board[sq]
        if piece is None:
            return set()

        moves: set[Square] = set()
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_leaper(piece, _KNIGHT_TARGETS[sq], moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(piece, _BISHOP_RAYS[sq], moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(piece, _ROOK_RAYS[sq], moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(piece, _QUEEN_RAYS[sq], moves)
        elif ptype == PieceType.KING:
            self._gen_leaper(piece, _KING_TARGETS[sq], moves)
            if include_castling:
                self._gen_castling(piece, moves)
        else:  # pragma: no cover - PieceType is closed
            raise ValueError(f"Unknown piece type: {ptype!r}")
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?  ``False`` without a king."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        opponent = color.opposite
        # A castling hop always lands on an empty square, so it never reaches
        # the king; skipping it also stops the two kings' castling checks from
        # querying each other forever.
        for sq in self._board.pieces(opponent):
            if king_sq in self.pseudo_legal_moves(sq, include_castling=False):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, moves: set[Square]) -> None:
        board = self._board
        row, col = piece.position
        direction = _PAWN_DIRECTION[int(piece.color)]

        one_step = (row + direction, col)
        if board.valid_position(one_step) and board.is_empty(one_step):
            moves.add(one_step)
            two_step = (row + 2 * direction, col)
            if (
                row == _PAWN_START_ROW[int(piece.color)]
                and not piece.has_moved
                and board.is_empty(two_step)
            ):
                moves.add(two_step)

        for dc in (-1, 1):
            cap_sq = (row + direction, col + dc)
            if not board.valid_position(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.add(cap_sq)

    def _gen_leaper(
        self, piece: Piece, targets: tuple[Square, ...], moves: set[Square]
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.add(to_sq)

    def _gen_sliding(
        self,
        piece: Piece,
        rays: tuple[tuple[Square, ...], ...],
        moves: set[Square],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.add(to_sq)
                    continue
                if target.color != piece.color:
                    moves.add(to_sq)
                break

    def _gen_castling(self, king: Piece, moves: set[Square]) -> None:
        if king.has_moved:
            return
        row, col = king.position
        if self._can_castle(king, _KINGSIDE_ROOK_COL, 1):
            moves.add((row, col + 2))
        if self._can_castle(king, _QUEENSIDE_ROOK_COL, -1):
            moves.add((row, col - 2))

    def _can_castle(self, king: Piece, rook_col: int, direction: int) -> bool:
        board = self._board
        row, col = king.position

        rook = board[(row, rook_col)]
        if rook is None or rook.piece_type != PieceType.ROOK or rook.has_moved:
            return False
        if rook.color != king.color:
            return False
        # The landing square must lie strictly between king and rook.
        if (rook_col - col) * direction < 3:
            return False

        between = range(col + direction, rook_col, direction)
        if any(not board.is_empty((row, c)) for c in between):
            return False

        if self.is_in_check(king.color):
            return False

        # The king may not pass through (or land on) an attacked square.
        for step in (1, 2):
            transit = (row, col + step * direction)
            if not board.valid_position(transit):
                return False
            trial = board.copy()
            trial_king = trial[king.position]
            trial[king.position] = None
            trial[transit] = trial_king
            if MoveGenerator(trial).is_in_check(king.color):
                return False
        return True


def pseudo_legal_moves(board: Board, sq: Square) -> set[Square]:
    """Shorthand for ``MoveGenerator(board).pseudo_legal_moves(sq)``."""
    return MoveGenerator(board).pseudo_legal_moves(sq)
