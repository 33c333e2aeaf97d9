"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessedit.core.notation import STARTING_FEN, position_from_fen
from chessedit.core.position import Position
from chessedit.game.session import GameSession


@pytest.fixture
def start_position() -> Position:
    """Fresh standard starting layout, white to move."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def position() -> Callable[[str], Position]:
    """Build a position from a board string."""
    return position_from_fen


@pytest.fixture
def session() -> GameSession:
    return GameSession()
