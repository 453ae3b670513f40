"""Exception hierarchy for the chess core."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all rookery errors."""


class InvalidSquareError(ChessError, ValueError):
    """Coordinates fall outside the board or cannot be parsed."""


class IllegalMoveError(ChessError):
    """A move was rejected (no piece, wrong side, or not a legal target)."""


class SnapshotError(ChessError, ValueError):
    """A serialized board/game snapshot is malformed."""
