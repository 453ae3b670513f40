"""Game state machine: turn order, history and end-of-game detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto
from pathlib import Path

from rookery.core import snapshot
from rookery.core.board import Board
from rookery.core.enums import Color, GameResult, PieceType
from rookery.core.errors import IllegalMoveError, InvalidSquareError
from rookery.core.notation import square_name
from rookery.core.piece import Piece
from rookery.core.rules import Rules
from rookery.core.types import Square, valid_position
from rookery.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    was_check: bool = False
    is_castling: bool = False

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)} {square_name(self.to_sq)}"


@dataclass
class GameState:
    """Owns the board and whose turn it is; enforces turn order and legality.

    This is a pure data/logic class with no I/O loop and no rendering policy
    beyond :meth:`render`.
    """

    settings: GameSettings = field(default_factory=GameSettings)
    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, board: Board | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from an existing board."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def legal_moves(self, from_sq: Square) -> set[Square]:
        """Legal targets for the side to move's piece on *from_sq*."""
        return Rules.legal_moves(self.board, self.side_to_move, from_sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Validate and play a move for the side to move, then pass the turn."""
        if self.phase != GamePhase.AWAITING_MOVE:
            raise IllegalMoveError(f"Game is not accepting moves ({self.phase.name})")
        for sq in (from_sq, to_sq):
            if not valid_position(sq):
                raise InvalidSquareError(f"Square off the board: {sq!r}")

        piece = self.board[from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {square_name(from_sq)}")
        if piece.color != self.side_to_move:
            raise IllegalMoveError(
                f"It is {self.side_to_move}'s turn; "
                f"{square_name(from_sq)} holds a {piece.color} piece"
            )
        if to_sq not in self.legal_moves(from_sq):
            raise IllegalMoveError(
                f"Illegal move {square_name(from_sq)} {square_name(to_sq)}"
            )

        moved = piece.copy()
        captured = self.board[to_sq]
        is_castling = (
            piece.piece_type == PieceType.KING and abs(to_sq[1] - from_sq[1]) == 2
        )
        Rules.apply_move(self.board, from_sq, to_sq)
        self.side_to_move = self.side_to_move.opposite

        record = MoveRecord(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=moved,
            captured=captured,
            was_check=Rules.is_in_check(self.board, self.side_to_move),
            is_castling=is_castling,
        )
        self.move_history.append(record)
        _LOGGER.debug("%s played %s", piece.color, record)

        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_in_check(self) -> bool:
        """Whether the side to move is currently in check."""
        return Rules.is_in_check(self.board, self.side_to_move)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def render(self) -> str:
        return self.board.render(
            unicode=self.settings.use_unicode_glyphs,
            empty=self.settings.empty_square,
        )

    # ── Persistence ──────────────────────────────────────────────────────

    def to_json(self) -> str:
        return snapshot.dumps(
            self.board, self.side_to_move, indent=self.settings.snapshot_indent
        )

    def save(self, path: str | Path) -> Path:
        """Write a snapshot of the board and side to move; returns the file used."""
        target = self._with_suffix(Path(path), self.settings)
        target.write_text(self.to_json(), encoding="utf-8")
        _LOGGER.info("Game saved to %s", target)
        return target

    @classmethod
    def from_json(cls, text: str, settings: GameSettings | None = None) -> GameState:
        board, side = snapshot.loads(text)
        state = cls(settings=settings or GameSettings())
        state.setup(board, side)
        return state

    @classmethod
    def load(cls, path: str | Path, settings: GameSettings | None = None) -> GameState:
        """Restore a game written by :meth:`save`."""
        settings = settings or GameSettings()
        source = cls._with_suffix(Path(path), settings)
        state = cls.from_json(source.read_text(encoding="utf-8"), settings)
        _LOGGER.info("Game loaded from %s (%s to move)", source, state.side_to_move)
        return state

    @staticmethod
    def _with_suffix(path: Path, settings: GameSettings) -> Path:
        if path.suffix == settings.save_suffix:
            return path
        return path.with_name(path.name + settings.save_suffix)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", result.name)
