"""Tests for Position and the move executor."""

from collections.abc import Callable

import pytest

from chessedit.core.enums import CastleSide, Color, PieceType
from chessedit.core.errors import BadMove
from chessedit.core.board import Board
from chessedit.core.move import CastleMove, Move
from chessedit.core.notation import position_to_fen
from chessedit.core.piece import Piece
from chessedit.core.position import Position
from chessedit.core.types import E2, E4, G1, parse_square

PositionFactory = Callable[[str], Position]


class TestApplyMove:
    def test_normal_move(self, start_position: Position) -> None:
        start_position.apply(Move(PieceType.PAWN, Color.WHITE, E2, E4))
        assert start_position.board[E2] is None
        assert start_position.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert start_position.side_to_move == Color.BLACK

    def test_capture_replaces_piece(self, position: PositionFactory) -> None:
        pos = position("8/8/8/3p4/4P3/8/8/8 w")
        pos.apply(Move(PieceType.PAWN, Color.WHITE, E4, parse_square("d5")))
        assert position_to_fen(pos) == "8/8/8/3P4/8/8/8/8 b"

    def test_black_piece_is_lowercase(self, position: PositionFactory) -> None:
        pos = position("8/8/8/8/8/8/8/6n1 b")
        pos.apply(Move(PieceType.KNIGHT, Color.BLACK, G1, parse_square("f3")))
        assert position_to_fen(pos) == "8/8/8/8/8/5n2/8/8 w"

    def test_side_alternates(self, start_position: Position) -> None:
        start_position.apply(Move(PieceType.KNIGHT, Color.WHITE, G1, parse_square("f3")))
        start_position.apply(
            Move(PieceType.KNIGHT, Color.BLACK, parse_square("g8"), parse_square("f6"))
        )
        assert start_position.side_to_move == Color.WHITE


class TestApplyCastle:
    def test_white_kingside(self, position: PositionFactory) -> None:
        pos = position("8/8/8/8/8/8/8/4K2R w")
        pos.apply(CastleMove(Color.WHITE, CastleSide.KINGSIDE))
        assert position_to_fen(pos) == "8/8/8/8/8/8/8/5RK1 b"

    def test_white_queenside(self, position: PositionFactory) -> None:
        pos = position("8/8/8/8/8/8/8/R3K3 w")
        pos.apply(CastleMove(Color.WHITE, CastleSide.QUEENSIDE))
        assert position_to_fen(pos) == "8/8/8/8/8/8/8/2KR4 b"

    def test_black_queenside(self, position: PositionFactory) -> None:
        pos = position("r3k3/8/8/8/8/8/8/8 b")
        pos.apply(CastleMove(Color.BLACK, CastleSide.QUEENSIDE))
        assert position_to_fen(pos) == "2kr4/8/8/8/8/8/8/8 w"

    def test_black_kingside(self, position: PositionFactory) -> None:
        pos = position("4k2r/8/8/8/8/8/8/8 b")
        pos.apply(CastleMove(Color.BLACK, CastleSide.KINGSIDE))
        assert position_to_fen(pos) == "5rk1/8/8/8/8/8/8/8 w"

    def test_missing_rook_leaves_position_alone(
        self, position: PositionFactory
    ) -> None:
        pos = position("8/8/8/8/8/8/8/4K3 w")
        with pytest.raises(BadMove):
            pos.apply(CastleMove(Color.WHITE, CastleSide.KINGSIDE))
        assert position_to_fen(pos) == "8/8/8/8/8/8/8/4K3 w"


class TestPositionUtilities:
    def test_default_is_initial_layout(self) -> None:
        pos = Position()
        assert pos.side_to_move == Color.WHITE
        assert pos.board == Board.initial()

    def test_copy_independence(self, start_position: Position) -> None:
        copy = start_position.copy()
        assert copy == start_position
        copy.apply(Move(PieceType.PAWN, Color.WHITE, E2, E4))
        assert copy != start_position
        assert start_position.board[E2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_equality_includes_side(self, start_position: Position) -> None:
        other = start_position.copy()
        other.toggle_side()
        assert other != start_position
