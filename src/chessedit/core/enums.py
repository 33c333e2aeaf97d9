"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_rank(self) -> int:
        """Rank index of this side's back rank."""
        return 0 if self == Color.WHITE else 7

    @property
    def forward(self) -> int:
        """Rank step a pawn of this color advances by."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastleSide(IntEnum):
    """Which corner the king castles toward."""

    KINGSIDE = 0
    QUEENSIDE = 1

    @property
    def notation(self) -> str:
        return "O-O" if self == CastleSide.KINGSIDE else "O-O-O"
