"""Tests for GameSession."""

import pytest

from chessedit.core.enums import CastleSide, Color
from chessedit.core.errors import BadMove, MalformedBoard, MoveError
from chessedit.core.move import CastleMove
from chessedit.core.notation import EMPTY_FEN, STARTING_FEN
from chessedit.game.session import GameSession

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b"


class TestSessionMoves:
    def test_starts_at_initial_layout(self, session: GameSession) -> None:
        assert session.fen == STARTING_FEN
        assert not session.can_undo

    def test_play(self, session: GameSession) -> None:
        move = session.play("e4")
        assert str(move) == "e2e4"
        assert session.fen == AFTER_E4
        assert session.can_undo

    def test_failed_move_changes_nothing(self, session: GameSession) -> None:
        with pytest.raises(MoveError):
            session.play("e5")
        assert session.fen == STARTING_FEN
        assert not session.can_undo

    def test_resolve_is_read_only(self, session: GameSession) -> None:
        session.resolve("Nf3")
        assert session.fen == STARTING_FEN

    def test_castle(self) -> None:
        session = GameSession()
        session.load("r3k2r/8/8/8/8/8/8/R3K2R b")
        assert session.play("O-O-O") == CastleMove(Color.BLACK, CastleSide.QUEENSIDE)
        assert session.play("O-O") == CastleMove(Color.WHITE, CastleSide.KINGSIDE)
        assert session.fen == "2kr3r/8/8/8/8/8/8/R4RK1 b"

    def test_custom_castle_markers(self) -> None:
        session = GameSession(castle_markers="O")
        session.load("8/8/8/8/8/8/8/4K2R w")
        with pytest.raises(BadMove):
            session.play("0-0")
        session.play("O-O")
        assert session.fen == "8/8/8/8/8/8/8/5RK1 b"


class TestSessionUndo:
    def test_undo_restores(self, session: GameSession) -> None:
        session.play("e4")
        assert session.undo()
        assert session.fen == STARTING_FEN

    def test_single_slot(self, session: GameSession) -> None:
        session.play("e4")
        session.play("e5")
        assert session.undo()
        assert session.fen == AFTER_E4
        assert not session.undo()
        assert session.fen == AFTER_E4

    def test_deeper_history(self) -> None:
        session = GameSession(undo_limit=3)
        for token in ("e4", "e5", "Nf3", "Nc6"):
            session.play(token)
        assert len(session.history) == 3
        assert session.undo()
        assert session.undo()
        assert session.undo()
        assert session.fen == AFTER_E4
        assert not session.undo()

    def test_no_history(self) -> None:
        session = GameSession(undo_limit=0)
        session.play("e4")
        assert not session.undo()
        assert session.fen == AFTER_E4

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError, match="undo_limit"):
            GameSession(undo_limit=-1)


class TestSessionBoardReplacement:
    def test_clear_and_undo(self, session: GameSession) -> None:
        session.clear()
        assert session.fen == EMPTY_FEN
        session.undo()
        assert session.fen == STARTING_FEN

    def test_reset(self, session: GameSession) -> None:
        session.play("e4")
        session.reset()
        assert session.fen == STARTING_FEN
        session.undo()
        assert session.fen == AFTER_E4

    def test_load(self, session: GameSession) -> None:
        session.load("8/8/8/8/8/8/8/4K3 b KQkq - 0 1")
        assert session.fen == "8/8/8/8/8/8/8/4K3 b"

    def test_malformed_load_keeps_state(self, session: GameSession) -> None:
        session.play("e4")
        with pytest.raises(MalformedBoard):
            session.load("8/8/8 w")
        assert session.fen == AFTER_E4
        assert session.undo()
        assert session.fen == STARTING_FEN

    def test_sessions_are_independent(self) -> None:
        first = GameSession()
        second = GameSession()
        first.play("e4")
        assert second.fen == STARTING_FEN
