"""Tests for the command-line entry point."""

import io
from pathlib import Path

import pytest

from chessedit.app import build_parser, main
from chessedit.config import EditorSettings


class TestArguments:
    def test_defaults(self) -> None:
        settings = EditorSettings.from_args(build_parser().parse_args([]))
        assert settings == EditorSettings()

    def test_options(self) -> None:
        args = build_parser().parse_args(
            ["--unicode", "--undo-limit", "5", "--save-path", "x.fen", "--log-level", "debug"]
        )
        settings = EditorSettings.from_args(args)
        assert settings.use_unicode
        assert settings.undo_limit == 5
        assert settings.save_path == "x.fen"
        assert settings.log_level == "DEBUG"


class TestMain:
    def test_runs_until_quit(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("e4\nfen\nquit\n"))
        assert main([]) == 0
        assert "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b" in capsys.readouterr().out

    def test_loads_position_file(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        board_file = tmp_path / "start.fen"
        board_file.write_text("8/8/8/8/8/8/8/4K2R w KQkq - 0 1\nignored\n", encoding="utf-8")
        monkeypatch.setattr("sys.stdin", io.StringIO("O-O\nfen\n"))
        assert main([str(board_file)]) == 0
        assert "8/8/8/8/8/8/8/5RK1 b" in capsys.readouterr().out

    def test_missing_position_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.fen")]) == 1

    def test_malformed_position_file(self, tmp_path: Path) -> None:
        board_file = tmp_path / "bad.fen"
        board_file.write_text("not a board\n", encoding="utf-8")
        assert main([str(board_file)]) == 1

    def test_negative_undo_limit(self) -> None:
        assert main(["--undo-limit", "-1"]) == 2
