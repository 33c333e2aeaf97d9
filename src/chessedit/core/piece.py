"""A colored piece and its board-string letter."""

from __future__ import annotations

from dataclasses import dataclass

from chessedit.core.enums import Color, PieceType

# Black letters; white is the same letter upper-cased.
_LETTERS = "pnbrqk"
_GLYPH_BASE = 0x2654
# Offset of each type in the Unicode chess block (king first); black is +6.
_GLYPH_ORDER: tuple[PieceType, ...] = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """One piece of one color, as stored in a board cell."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.piece_type - 1]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """``'N'`` is a white knight, ``'n'`` a black one."""
        index = _LETTERS.find(char.lower()) if len(char) == 1 else -1
        if index < 0:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, PieceType(index + 1))

    @property
    def symbol(self) -> str:
        offset = _GLYPH_ORDER.index(self.piece_type) + 6 * self.color
        return chr(_GLYPH_BASE + offset)
