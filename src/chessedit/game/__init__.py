"""Session layer — owns the live position and its undo history."""

from chessedit.game.session import GameSession

__all__ = ["GameSession"]
