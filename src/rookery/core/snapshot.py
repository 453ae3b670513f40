"""Board/game snapshots as plain dicts and JSON text."""

from __future__ import annotations

import json
from typing import Any

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.errors import SnapshotError
from rookery.core.piece import Piece
from rookery.core.types import valid_position

SNAPSHOT_VERSION = 1


# ── Board ────────────────────────────────────────────────────────────────────


def board_to_dict(board: Board) -> dict[str, Any]:
    """Every occupant with its kind, color, square and ``has_moved`` flag."""
    return {
        "pieces": [
            {
                "type": str(piece.piece_type),
                "color": str(piece.color),
                "row": piece.position[0],
                "col": piece.position[1],
                "has_moved": piece.has_moved,
            }
            for piece in board
        ]
    }


def board_from_dict(data: dict[str, Any]) -> Board:
    """Rebuild a :class:`Board`, rejecting anything that breaks its invariants."""
    try:
        entries = data["pieces"]
    except (KeyError, TypeError):
        raise SnapshotError("Snapshot has no 'pieces' list") from None
    if not isinstance(entries, list):
        raise SnapshotError("Snapshot 'pieces' must be a list")

    board = Board()
    kings: set[Color] = set()
    for entry in entries:
        piece = _piece_from_dict(entry)
        sq = piece.position
        if not board.is_empty(sq):
            raise SnapshotError(f"Two pieces on square {sq!r}")
        if piece.piece_type == PieceType.KING:
            if piece.color in kings:
                raise SnapshotError(f"More than one {piece.color} king")
            kings.add(piece.color)
        board[sq] = piece
    return board


def _piece_from_dict(entry: Any) -> Piece:
    if not isinstance(entry, dict):
        raise SnapshotError(f"Piece entry must be an object: {entry!r}")
    try:
        ptype = PieceType[str(entry["type"]).upper()]
        color = Color[str(entry["color"]).upper()]
        row = entry["row"]
        col = entry["col"]
        has_moved = entry.get("has_moved", False)
    except KeyError as exc:
        raise SnapshotError(f"Bad piece entry {entry!r}: {exc}") from None

    if type(row) is not int or type(col) is not int:
        raise SnapshotError(f"Piece coordinates must be integers: {entry!r}")
    if not valid_position((row, col)):
        raise SnapshotError(f"Piece off the board: {entry!r}")
    if not isinstance(has_moved, bool):
        raise SnapshotError(f"'has_moved' must be a boolean: {entry!r}")
    return Piece(ptype, color, (row, col), has_moved)


# ── Game snapshot ────────────────────────────────────────────────────────────


def snapshot_to_dict(board: Board, side_to_move: Color) -> dict[str, Any]:
    data = board_to_dict(board)
    data["version"] = SNAPSHOT_VERSION
    data["side_to_move"] = str(side_to_move)
    return data


def snapshot_from_dict(data: dict[str, Any]) -> tuple[Board, Color]:
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object")
    version = data.get("version", SNAPSHOT_VERSION)
    if version != SNAPSHOT_VERSION:
        raise SnapshotError(f"Unsupported snapshot version: {version!r}")
    try:
        side = Color[str(data["side_to_move"]).upper()]
    except KeyError:
        raise SnapshotError(
            f"Bad or missing side_to_move: {data.get('side_to_move')!r}"
        ) from None
    return board_from_dict(data), side


def dumps(board: Board, side_to_move: Color, *, indent: int | None = 2) -> str:
    """Serialise the board and the side to move as JSON text."""
    return json.dumps(snapshot_to_dict(board, side_to_move), indent=indent)


def loads(text: str) -> tuple[Board, Color]:
    """Inverse of :func:`dumps`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot is not valid JSON: {exc}") from exc
    return snapshot_from_dict(data)
