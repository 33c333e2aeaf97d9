"""Resolved move value objects accepted by :meth:`Position.apply`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessedit.core.enums import CastleSide, Color, PieceType
from chessedit.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A fully specified normal move of one piece."""

    piece_type: PieceType
    color: Color
    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class CastleMove:
    """Castling for *color* toward *side*."""

    color: Color
    side: CastleSide

    def __str__(self) -> str:
        return self.side.notation


ResolvedMove: TypeAlias = Move | CastleMove
