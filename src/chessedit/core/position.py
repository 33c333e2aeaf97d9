"""Position — board plus side to move, with the move executor."""

from __future__ import annotations

from chessedit.core.board import Board
from chessedit.core.enums import CastleSide, Color, PieceType
from chessedit.core.errors import BadMove
from chessedit.core.move import CastleMove, Move, ResolvedMove
from chessedit.core.piece import Piece
from chessedit.core.types import make_square

# (king_to_file, rook_from_file, rook_to_file)
_CASTLE_FILES: dict[CastleSide, tuple[int, int, int]] = {
    CastleSide.KINGSIDE: (6, 7, 5),
    CastleSide.QUEENSIDE: (2, 0, 3),
}
_KING_FILE = 4


class Position:
    """Board and the side whose turn it is.

    Only :meth:`apply` mutates a position once it is built; undo snapshots
    are kept by the owner (see :class:`chessedit.game.session.GameSession`).
    """

    __slots__ = ("board", "side_to_move")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move

    # ── Move execution ───────────────────────────────────────────────────

    def apply(self, move: ResolvedMove) -> None:
        """Execute a resolved *move* and hand the turn to the other side."""
        if isinstance(move, CastleMove):
            self._castle(move)
        else:
            self._move_piece(move)
        self.toggle_side()

    def _move_piece(self, move: Move) -> None:
        self.board[move.to_sq] = Piece(move.color, move.piece_type)
        self.board[move.from_sq] = None

    def _castle(self, move: CastleMove) -> None:
        rank = move.color.home_rank
        king_to, rook_from, rook_to = _CASTLE_FILES[move.side]
        king_sq = make_square(_KING_FILE, rank)
        rook_sq = make_square(rook_from, rank)

        king = self.board[king_sq]
        rook = self.board[rook_sq]
        if king != Piece(move.color, PieceType.KING) or rook != Piece(
            move.color, PieceType.ROOK
        ):
            raise BadMove(f"Cannot castle {move}: king or rook missing")

        self.board[make_square(king_to, rank)] = king
        self.board[make_square(rook_to, rank)] = rook
        self.board[king_sq] = None
        self.board[rook_sq] = None

    def toggle_side(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(board=self.board.copy(), side_to_move=self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
