"""Compact board-string parsing and serialization.

The format is the piece-placement field of FEN followed by an optional
side-to-move token: ``rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w``.
Any further FEN fields are accepted and ignored.
"""

from __future__ import annotations

from chessedit.core.board import Board
from chessedit.core.enums import Color
from chessedit.core.errors import MalformedBoard
from chessedit.core.piece import Piece
from chessedit.core.position import Position
from chessedit.core.types import make_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"
EMPTY_FEN = "8/8/8/8/8/8/8/8 w"

_DIGITS = "0123456789"
_SIDE_TOKENS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse a board string into a new :class:`Position`."""
    parts = fen.split()
    if not parts:
        raise MalformedBoard("Empty board string")

    board = _parse_placement(parts[0], fen)

    side = Color.WHITE
    if len(parts) > 1:
        try:
            side = _SIDE_TOKENS[parts[1]]
        except KeyError:
            raise MalformedBoard(f"Invalid side-to-move field: {parts[1]!r}") from None

    return Position(board, side)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise MalformedBoard(f"Board must contain 8 ranks: {fen!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _DIGITS:
                step = int(ch)
                if step == 0:
                    raise MalformedBoard(f"Zero-length empty run: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise MalformedBoard(f"Rank {rank + 1} overflows 8 files: {fen!r}")
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ValueError:
                    raise MalformedBoard(
                        f"Invalid piece character {ch!r}: {fen!r}"
                    ) from None
                file += 1
            if file > 8:
                raise MalformedBoard(f"Rank {rank + 1} overflows 8 files: {fen!r}")
        if file != 8:
            raise MalformedBoard(f"Rank {rank + 1} has {file} files: {fen!r}")
    return board


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to the compact board string."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str}"


load = position_from_fen
dump = position_to_fen
