"""Domain errors raised by the board codec and the move resolver."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from chessedit.core.types import Square, square_name

if TYPE_CHECKING:
    from chessedit.core.notation.models import MoveFragments


class MalformedBoard(ValueError):
    """Board string has an invalid structure."""


class MoveError(ValueError):
    """Base class for every move-resolution failure."""


class BadMove(MoveError):
    """Token cannot be turned into a move on the current board.

    ``fragments`` holds whatever was parsed and resolved before the failure.
    """

    def __init__(self, message: str, fragments: MoveFragments | None = None) -> None:
        super().__init__(message)
        self.fragments = fragments


class AmbiguousMove(MoveError):
    """More than one origin square fits the token."""

    def __init__(self, token: str, candidates: Sequence[Square]) -> None:
        self.token = token
        self.candidates = list(candidates)
        names = ", ".join(square_name(sq) for sq in self.candidates)
        super().__init__(f"Ambiguous move: {token} (candidates: {names})")


class Unsupported(MoveError):
    """Recognised move kind that this editor does not execute."""
