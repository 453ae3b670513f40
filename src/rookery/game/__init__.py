"""Game management layer: turn order and persistence.

Quick start::

    from rookery.core import parse_move
    from rookery.game import GameState

    game = GameState()
    game.setup()
    game.submit_move(*parse_move("e2 e4"))
"""

from rookery.game.state import GamePhase, GameState, MoveRecord

__all__ = [
    "GamePhase",
    "GameState",
    "MoveRecord",
]
