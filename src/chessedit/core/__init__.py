"""Core domain layer — board model, codec and move resolution, no I/O.

Quick start::

    from chessedit.core import STARTING_FEN, position_from_fen, resolve

    pos = position_from_fen(STARTING_FEN)
    pos.apply(resolve("e4", pos))
"""

from chessedit.core.board import OFF_BOARD, Board, OffBoard
from chessedit.core.enums import CastleSide, Color, PieceType
from chessedit.core.errors import (
    AmbiguousMove,
    BadMove,
    MalformedBoard,
    MoveError,
    Unsupported,
)
from chessedit.core.move import CastleMove, Move, ResolvedMove
from chessedit.core.notation import (
    EMPTY_FEN,
    STARTING_FEN,
    CastleRequest,
    MoveFragments,
    dump,
    load,
    parse_move_token,
    position_from_fen,
    position_to_fen,
)
from chessedit.core.piece import Piece
from chessedit.core.position import Position
from chessedit.core.resolver import MoveResolver, resolve
from chessedit.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    # Types / helpers
    "OFF_BOARD",
    "OffBoard",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastleMove",
    "Move",
    "MoveResolver",
    "Piece",
    "Position",
    "ResolvedMove",
    # Errors
    "AmbiguousMove",
    "BadMove",
    "MalformedBoard",
    "MoveError",
    "Unsupported",
    # Notation
    "EMPTY_FEN",
    "STARTING_FEN",
    "CastleRequest",
    "MoveFragments",
    "dump",
    "load",
    "parse_move_token",
    "position_from_fen",
    "position_to_fen",
    "resolve",
]
