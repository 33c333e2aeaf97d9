"""Plain-text board rendering."""

from __future__ import annotations

from chessedit.core.position import Position
from chessedit.core.types import make_square

FILE_HEADER = "   a b c d e f g h"
# Forces text (not emoji) presentation of the chess glyphs.
TEXT_SELECTOR = "\ufe0e"


def render_board(position: Position, use_unicode: bool = False) -> str:
    """Rank 8 at the top, ranks labelled on both sides, ``.`` for empty."""
    lines = [FILE_HEADER, ""]
    for rank in range(7, -1, -1):
        cells: list[str] = []
        for file in range(8):
            piece = position.board[make_square(file, rank)]
            if piece is None:
                cells.append(".")
            elif use_unicode:
                cells.append(piece.symbol + TEXT_SELECTOR)
            else:
                cells.append(str(piece))
        lines.append(f"{rank + 1}  {' '.join(cells)}  {rank + 1}")
    lines.extend(["", FILE_HEADER])
    return "\n".join(lines) + "\n"


def prompt(position: Position) -> str:
    return f"{position.side_to_move}> "
