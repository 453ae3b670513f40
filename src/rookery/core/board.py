"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import FILES, Square, valid_position

_COLOR_COUNT = 2

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces with a per-color king cache.

    Indexing performs no bounds checks; validate with :meth:`valid_position`
    first.
    """

    __slots__ = ("_grid", "_king_squares")

    valid_position = staticmethod(valid_position)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        """Place *piece* on *sq* (or clear it), keeping ``piece.position`` in sync."""
        row, col = sq
        old_piece = self._grid[row][col]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[int(old_piece.color)] == sq:
                self._king_squares[int(old_piece.color)] = None

        self._grid[row][col] = piece
        if piece is None:
            return

        piece.position = sq
        if piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def piece_at(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq[0]][sq[1]] is None

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        """All pieces on the board in row-major order."""
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [piece.position for piece in self if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is not on the board."""
        return self._king_squares[int(color)]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        """Relocate the occupant of *from_sq* to *to_sq* without legality checks.

        Any occupant of *to_sq* is captured.  A king travelling two files is
        treated as castling and drags the matching corner rook onto the
        square it crossed.  Returns ``False`` (and leaves the board as is)
        when *from_sq* is empty or *to_sq* is off the board.
        """
        if not valid_position(from_sq) or not valid_position(to_sq):
            return False
        piece = self[from_sq]
        if piece is None:
            return False

        self._relocate(piece, from_sq, to_sq)

        if piece.piece_type == PieceType.KING and abs(to_sq[1] - from_sq[1]) == 2:
            direction = 1 if to_sq[1] > from_sq[1] else -1
            rook_from = (from_sq[0], 7 if direction == 1 else 0)
            rook = self[rook_from]
            if (
                rook is not None
                and rook.piece_type == PieceType.ROOK
                and rook.color == piece.color
            ):
                self._relocate(rook, rook_from, (from_sq[0], to_sq[1] - direction))
        return True

    def _relocate(self, piece: Piece, from_sq: Square, to_sq: Square) -> None:
        self[from_sq] = None
        self[to_sq] = piece
        piece.move_to(to_sq)

    def copy(self) -> Board:
        """Independent deep copy; every piece is duplicated."""
        b = Board()
        b._grid = [[p.copy() if p is not None else None for p in row] for row in self._grid]
        b._king_squares = self._king_squares.copy()
        return b

    clone = copy

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]
        self._king_squares = [None] * _COLOR_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[(1, col)] = Piece(PieceType.PAWN, Color.BLACK)
            b[(6, col)] = Piece(PieceType.PAWN, Color.WHITE)

        for col, pt in enumerate(_BACK_RANK):
            b[(0, col)] = Piece(pt, Color.BLACK)
            b[(7, col)] = Piece(pt, Color.WHITE)
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self, *, unicode: bool = True, empty: str = ".") -> str:
        """Text diagram, rank 8 on top, with file and rank labels on every side."""
        files = "  " + " ".join(FILES)
        rows: list[str] = [files]
        for row_idx, row in enumerate(self._grid):
            label = str(8 - row_idx)
            cells = []
            for piece in row:
                if piece is None:
                    cells.append(empty)
                else:
                    cells.append(piece.symbol if unicode else str(piece))
            rows.append(f"{label} {' '.join(cells)} {label}")
        rows.append(files)
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return self.render(unicode=False)
