"""Notation package: board strings and partial move tokens."""

from chessedit.core.notation.fen import (
    EMPTY_FEN,
    STARTING_FEN,
    dump,
    load,
    position_from_fen,
    position_to_fen,
)
from chessedit.core.notation.models import CastleRequest, MoveFragments
from chessedit.core.notation.san import (
    DEFAULT_CASTLE_MARKERS,
    parse_castle_token,
    parse_fragments,
    parse_move_token,
)

__all__ = [
    "DEFAULT_CASTLE_MARKERS",
    "EMPTY_FEN",
    "STARTING_FEN",
    "CastleRequest",
    "MoveFragments",
    "dump",
    "load",
    "parse_castle_token",
    "parse_fragments",
    "parse_move_token",
    "position_from_fen",
    "position_to_fen",
]
