"""Move resolution: turn a partial move token into a fully specified move.

Resolution only reads the position. Origins are found by walking outward
from the destination square along each way the piece moves, so a blocked
ray never yields a candidate behind the blocker.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from chessedit.core.board import OFF_BOARD
from chessedit.core.enums import CastleSide, Color, PieceType
from chessedit.core.errors import AmbiguousMove, BadMove, Unsupported
from chessedit.core.move import CastleMove, Move, ResolvedMove
from chessedit.core.notation.models import CastleRequest, MoveFragments
from chessedit.core.notation.san import DEFAULT_CASTLE_MARKERS, parse_move_token
from chessedit.core.piece import Piece
from chessedit.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    rank_of,
    square_name,
)

if TYPE_CHECKING:
    from chessedit.core.position import Position

_LOGGER = logging.getLogger(__name__)


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# piece type -> (offsets, slides along the offset)
_MOVEMENT: dict[PieceType, tuple[tuple[tuple[int, int], ...], bool]] = {
    PieceType.KNIGHT: (KNIGHT_OFFSETS, False),
    PieceType.KING: (KING_OFFSETS, False),
    PieceType.BISHOP: (BISHOP_DIRS, True),
    PieceType.ROOK: (ROOK_DIRS, True),
    PieceType.QUEEN: (QUEEN_DIRS, True),
}

_KING_FILE = 4
# side -> (files that must be empty, rook file)
_CASTLE_PATH: dict[CastleSide, tuple[tuple[int, ...], int]] = {
    CastleSide.KINGSIDE: ((5, 6), 7),
    CastleSide.QUEENSIDE: ((3, 2, 1), 0),
}


class MoveResolver:
    """Resolves move tokens against a :class:`Position`.

    Nothing here mutates the position; the caller applies the returned move.
    """

    __slots__ = ("_pos", "_board", "_castle_markers")

    def __init__(
        self, position: Position, castle_markers: str = DEFAULT_CASTLE_MARKERS
    ) -> None:
        self._pos = position
        self._board = position.board
        self._castle_markers = castle_markers

    # -- Public API ---------------------------------------------------------

    def resolve(self, token: str) -> ResolvedMove:
        """Resolve a raw *token* such as ``Nf3``, ``exd5`` or ``0-0``."""
        if not token:
            raise BadMove("Empty move")

        parsed = parse_move_token(token, self._castle_markers)
        if parsed is None:
            raise BadMove(f"Not a castling move: {token}")
        if isinstance(parsed, CastleRequest):
            return self.resolve_castle(parsed.side)
        return self.resolve_fragments(parsed, token)

    def resolve_fragments(self, fragments: MoveFragments, token: str = "") -> Move:
        """Fill the blanks in *fragments* from board occupancy."""
        token = token or str(fragments)
        if fragments.is_blank:
            raise BadMove(f"Unrecognised move: {token!r}", fragments)
        if fragments.piece_type is None:
            fragments = replace(fragments, piece_type=PieceType.PAWN)
        piece_type = fragments.piece_type
        assert piece_type is not None

        to_sq = fragments.to_sq
        if to_sq is None:
            raise BadMove(f"Missing destination rank: {fragments}", fragments)

        color = self._pos.side_to_move
        occupant = self._board[to_sq]
        if occupant is not None and occupant.color == color:
            raise BadMove(f"That square is taken: {square_name(to_sq)}", fragments)

        if fragments.is_fully_specified:
            from_sq = self._checked_origin(fragments, color)
        elif piece_type == PieceType.PAWN:
            from_sq = self._pawn_origin(fragments, color, token)
        else:
            from_sq = self._piece_origin(fragments, color, token)

        # Only a pawn that can actually reach the last rank is a promotion.
        if piece_type == PieceType.PAWN and rank_of(to_sq) == color.opposite.home_rank:
            raise Unsupported(f"Pawn promotion is not supported: {token}")

        return Move(piece_type, color, from_sq, to_sq)

    def resolve_castle(self, side: CastleSide) -> CastleMove:
        """Check castling occupancy for the side to move.

        Only piece placement is checked; castling rights and attacked
        squares are not tracked.
        """
        color = self._pos.side_to_move
        rank = color.home_rank
        empty_files, rook_file = _CASTLE_PATH[side]

        if self._board[make_square(_KING_FILE, rank)] != Piece(color, PieceType.KING):
            raise BadMove(f"Cannot castle {side.notation}: no {color} king on its square")
        for file in empty_files:
            if not self._board.is_empty(make_square(file, rank)):
                raise BadMove(
                    f"Cannot castle {side.notation}: "
                    f"{square_name(make_square(file, rank))} is occupied"
                )
        if self._board[make_square(rook_file, rank)] != Piece(color, PieceType.ROOK):
            raise BadMove(f"Cannot castle {side.notation}: no {color} rook in the corner")
        return CastleMove(color, side)

    def candidate_origins(
        self, piece_type: PieceType, color: Color, to_sq: Square
    ) -> list[Square]:
        """Squares holding *color*'s *piece_type* that can reach *to_sq*."""
        offsets, slides = _MOVEMENT[piece_type]
        expected = Piece(color, piece_type)
        found: list[Square] = []
        for df, dr in offsets:
            file = file_of(to_sq) + df
            rank = rank_of(to_sq) + dr
            while True:
                cell = self._board.probe(file, rank)
                if cell is OFF_BOARD:
                    break
                if cell is not None:
                    if cell == expected:
                        found.append(make_square(file, rank))
                    break
                if not slides:
                    break
                file += df
                rank += dr
        return sorted(found)

    # -- Piece resolution ---------------------------------------------------

    def _piece_origin(self, fragments: MoveFragments, color: Color, token: str) -> Square:
        assert fragments.piece_type is not None and fragments.to_sq is not None
        candidates = self.candidate_origins(fragments.piece_type, color, fragments.to_sq)
        _LOGGER.debug(
            "%s: candidates %s", token, [square_name(sq) for sq in candidates]
        )
        return self._pick(_filter_origin(candidates, fragments), fragments, token)

    def _checked_origin(self, fragments: MoveFragments, color: Color) -> Square:
        from_sq = fragments.from_sq
        assert from_sq is not None and fragments.piece_type is not None
        if self._board[from_sq] != Piece(color, fragments.piece_type):
            raise BadMove(
                f"No {color} {fragments.piece_type.name.lower()} on "
                f"{square_name(from_sq)}",
                fragments,
            )
        return from_sq

    # -- Pawn resolution ----------------------------------------------------

    def _pawn_origin(self, fragments: MoveFragments, color: Color, token: str) -> Square:
        if fragments.capture:
            return self._pawn_capture_origin(fragments, color, token)

        to_sq = fragments.to_sq
        assert to_sq is not None
        if fragments.from_file is not None and fragments.from_file != fragments.to_file:
            raise BadMove(f"Pawn push must stay on its file: {token}", fragments)
        if not self._board.is_empty(to_sq):
            raise BadMove(f"Pawn push is blocked: {token}", fragments)

        pawn = Piece(color, PieceType.PAWN)
        back = -color.forward
        one_back = offset_square(to_sq, 0, back)
        two_back = offset_square(to_sq, 0, 2 * back)
        double_step_rank = color.home_rank + 3 * color.forward

        origin: Square | None = None
        if one_back is not None and self._board[one_back] == pawn:
            origin = one_back
        elif (
            rank_of(to_sq) == double_step_rank
            and one_back is not None
            and two_back is not None
            and self._board.is_empty(one_back)
            and self._board[two_back] == pawn
        ):
            origin = two_back

        if origin is None or (
            fragments.from_rank is not None and rank_of(origin) != fragments.from_rank
        ):
            raise BadMove(f"No pawn can move to {square_name(to_sq)}: {token}", fragments)
        return origin

    def _pawn_capture_origin(
        self, fragments: MoveFragments, color: Color, token: str
    ) -> Square:
        to_sq = fragments.to_sq
        assert to_sq is not None
        pawn = Piece(color, PieceType.PAWN)
        back = -color.forward

        candidates: list[Square] = []
        for df in (-1, 1):
            sq = offset_square(to_sq, df, back)
            if sq is not None and self._board[sq] == pawn:
                candidates.append(sq)
        candidates = _filter_origin(candidates, fragments)

        if self._board.is_empty(to_sq):
            en_passant_rank = color.opposite.home_rank - 2 * color.forward
            if candidates and rank_of(to_sq) == en_passant_rank:
                raise Unsupported(f"En passant is not supported: {token}")
            raise BadMove(f"Nothing to capture on {square_name(to_sq)}: {token}", fragments)
        return self._pick(candidates, fragments, token)

    # -- Helpers ------------------------------------------------------------

    @staticmethod
    def _pick(candidates: list[Square], fragments: MoveFragments, token: str) -> Square:
        if not candidates:
            raise BadMove(f"No legal origin for {token}", fragments)
        if len(candidates) > 1:
            raise AmbiguousMove(token, candidates)
        return candidates[0]


def _filter_origin(candidates: list[Square], fragments: MoveFragments) -> list[Square]:
    """Drop candidates that contradict a given origin file or rank."""
    return [
        sq
        for sq in candidates
        if (fragments.from_file is None or file_of(sq) == fragments.from_file)
        and (fragments.from_rank is None or rank_of(sq) == fragments.from_rank)
    ]


def resolve(
    token: str, position: Position, castle_markers: str = DEFAULT_CASTLE_MARKERS
) -> ResolvedMove:
    """Resolve *token* against *position* without mutating it."""
    return MoveResolver(position, castle_markers).resolve(token)
