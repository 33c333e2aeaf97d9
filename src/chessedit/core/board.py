"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from enum import Enum

from chessedit.core.enums import Color, PieceType
from chessedit.core.piece import Piece
from chessedit.core.types import Square, make_square, on_board

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class OffBoard(Enum):
    """Marker returned when probing a coordinate outside the grid."""

    OFF_BOARD = "!"

    def __repr__(self) -> str:
        return "OFF_BOARD"


OFF_BOARD = OffBoard.OFF_BOARD


class Board:
    """Mutable 64-square board. ``None`` marks an empty square."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def probe(self, file: int, rank: int) -> Piece | OffBoard | None:
        """Checked lookup by file/rank index.

        Returns :data:`OFF_BOARD` outside the grid, ``None`` for an empty
        square, otherwise the piece.
        """
        if not on_board(file, rank):
            return OFF_BOARD
        return self._squares[make_square(file, rank)]

    # -- Copying ----------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
