"""GameSession — the live position plus a bounded undo history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chessedit.core.move import ResolvedMove
from chessedit.core.notation import (
    DEFAULT_CASTLE_MARKERS,
    EMPTY_FEN,
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)
from chessedit.core.position import Position
from chessedit.core.resolver import MoveResolver

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Owns one editable position.

    Every successful move or board replacement first pushes a snapshot of
    the current position; at most ``undo_limit`` snapshots are kept, oldest
    dropped first. Single-threaded: callers issue one command at a time.
    """

    undo_limit: int = 1
    castle_markers: str = DEFAULT_CASTLE_MARKERS
    position: Position = field(default_factory=lambda: position_from_fen(STARTING_FEN))
    history: list[Position] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.undo_limit < 0:
            raise ValueError(f"undo_limit must be >= 0, got {self.undo_limit}")

    # ── Moves ────────────────────────────────────────────────────────────

    def resolve(self, token: str) -> ResolvedMove:
        """Resolve *token* against the live position without changing it."""
        return MoveResolver(self.position, self.castle_markers).resolve(token)

    def play(self, token: str) -> ResolvedMove:
        """Resolve *token* and apply it. Raises a ``MoveError`` untouched."""
        move = self.resolve(token)
        self.apply(move)
        return move

    def apply(self, move: ResolvedMove) -> None:
        """Snapshot the live position, then execute *move* on it."""
        snapshot = self.position.copy()
        self.position.apply(move)
        self._push(snapshot)
        _LOGGER.debug("Applied %s, now %s", move, self.fen)

    # ── Board replacement ────────────────────────────────────────────────

    def load(self, text: str) -> None:
        """Replace the position with one parsed from *text*.

        On ``MalformedBoard`` the live position and history are unchanged.
        """
        fresh = position_from_fen(text)
        self._replace(fresh)
        _LOGGER.info("Loaded position %s", self.fen)

    def reset(self) -> None:
        """Back to the standard starting layout."""
        self._replace(position_from_fen(STARTING_FEN))

    def clear(self) -> None:
        """Empty board, white to move."""
        self._replace(position_from_fen(EMPTY_FEN))

    # ── Undo ─────────────────────────────────────────────────────────────

    def undo(self) -> bool:
        """Restore the latest snapshot. Returns ``False`` if there is none."""
        if not self.history:
            return False
        self.position = self.history.pop()
        _LOGGER.debug("Undo, now %s", self.fen)
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)

    # ── Internal ─────────────────────────────────────────────────────────

    def _replace(self, position: Position) -> None:
        self._push(self.position)
        self.position = position

    def _push(self, snapshot: Position) -> None:
        if self.undo_limit == 0:
            return
        self.history.append(snapshot)
        del self.history[: -self.undo_limit]
