"""Intermediate results of the move-token tokenizer."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chessedit.core.enums import CastleSide, PieceType
from chessedit.core.types import FILES, RANKS, Square, file_of, make_square, rank_of

# Letters that name a piece in a move token; pawns have none.
PIECE_LETTERS: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
_LETTER_OF: dict[PieceType, str] = {v: k for k, v in PIECE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class MoveFragments:
    """Pieces of a partial move token; ``None`` means not given.

    File and rank fields hold 0–7 indices.
    """

    piece_type: PieceType | None = None
    from_file: int | None = None
    from_rank: int | None = None
    capture: bool = False
    to_file: int | None = None
    to_rank: int | None = None

    @property
    def is_blank(self) -> bool:
        return self.to_file is None

    @property
    def is_fully_specified(self) -> bool:
        return None not in (self.from_file, self.from_rank, self.to_file, self.to_rank)

    @property
    def from_sq(self) -> Square | None:
        if self.from_file is None or self.from_rank is None:
            return None
        return make_square(self.from_file, self.from_rank)

    @property
    def to_sq(self) -> Square | None:
        if self.to_file is None or self.to_rank is None:
            return None
        return make_square(self.to_file, self.to_rank)

    def with_origin(self, sq: Square) -> MoveFragments:
        return replace(self, from_file=file_of(sq), from_rank=rank_of(sq))

    def __str__(self) -> str:
        """Reassemble the known parts, e.g. ``Ng1f3`` or ``exd5``."""
        text = ""
        if self.piece_type is not None and self.piece_type != PieceType.PAWN:
            text += _LETTER_OF[self.piece_type]
        if self.from_file is not None:
            text += FILES[self.from_file]
        if self.from_rank is not None:
            text += RANKS[self.from_rank]
        if self.capture:
            text += "x"
        if self.to_file is not None:
            text += FILES[self.to_file]
        if self.to_rank is not None:
            text += RANKS[self.to_rank]
        return text


@dataclass(frozen=True, slots=True)
class CastleRequest:
    """A lexically valid castling token, not yet checked against a board."""

    side: CastleSide

    def __str__(self) -> str:
        return self.side.notation
