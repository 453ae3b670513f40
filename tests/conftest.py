"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from rookery.core.board import Board
from rookery.game.state import GameState


@pytest.fixture
def initial_board() -> Board:
    """A fresh board in the standard starting position."""
    return Board.initial()


@pytest.fixture
def game() -> GameState:
    """A game set up from the starting position, white to move."""
    state = GameState()
    state.setup()
    return state
