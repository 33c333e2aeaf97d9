"""Line-oriented command loop around a :class:`GameSession`."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from chessedit.cli.render import prompt, render_board
from chessedit.config import EditorSettings
from chessedit.core.errors import MalformedBoard, MoveError
from chessedit.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = (
    "help\tThis text\n"
    "quit\tExit this program\n"
    "reset\tReset to the starting position\n"
    "clear\tEmpty the board\n"
    "undo\tGo back to the previous position\n"
    "unicode\tUse Unicode symbols\n"
    "ascii\tUse ASCII characters\n"
    "fen\tOutput the position as a board string\n"
    "save [file]\tWrite the board string to a file\n"
    "load <file>\tRead a board string from a file\n"
    "Anything else is a move, e.g. e4, Nf3, exd5, Rad1, O-O\n"
)

_QUIT_WORDS = frozenset({"quit", "exit"})


class CommandLoop:
    """Reads commands and move tokens, prints the board after each one."""

    def __init__(
        self,
        session: GameSession,
        settings: EditorSettings | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._session = session
        self._settings = settings if settings is not None else EditorSettings()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "help": self._help,
            "reset": lambda _args: self._session.reset(),
            "clear": lambda _args: self._session.clear(),
            "undo": self._undo,
            "unicode": lambda _args: self._set_unicode(True),
            "ascii": lambda _args: self._set_unicode(False),
            "fen": lambda _args: self._write(self._session.fen + "\n"),
            "save": self._save,
            "load": self._load,
        }

    @property
    def session(self) -> GameSession:
        return self._session

    def run(self) -> None:
        """Process input until ``quit``/``exit`` or end of input."""
        self._show()
        for raw in self._in:
            line = raw.strip()
            if line in _QUIT_WORDS:
                break
            if line:
                self.execute(line)
            self._show()

    def execute(self, line: str) -> None:
        """Run one command or move line."""
        word, *args = line.split()
        handler = self._commands.get(word)
        if handler is not None:
            handler(args)
            return
        self._move(line)

    # ── Commands ─────────────────────────────────────────────────────────

    def _move(self, token: str) -> None:
        try:
            move = self._session.play(token)
        except MoveError as exc:
            self._write(f'"{token}" is not a valid move.\n{exc}\n')
            return
        _LOGGER.info("%s -> %s", token, move)

    def _undo(self, _args: list[str]) -> None:
        if not self._session.undo():
            self._write("Nothing to undo.\n")

    def _help(self, _args: list[str]) -> None:
        self._write(HELP_TEXT)

    def _set_unicode(self, enabled: bool) -> None:
        self._settings.use_unicode = enabled

    def _save(self, args: list[str]) -> None:
        path = Path(args[0] if args else self._settings.save_path)
        try:
            path.write_text(self._session.fen + "\n", encoding="utf-8")
        except OSError as exc:
            _LOGGER.warning("Failed to save %s: %s", path, exc)
            self._write(f"Could not save to {path}: {exc}\n")
            return
        self._write(f"Saved to {path}\n")

    def _load(self, args: list[str]) -> None:
        if not args:
            self._write("Usage: load <file>\n")
            return
        path = Path(args[0])
        try:
            self._session.load(read_board_file(path))
        except OSError as exc:
            _LOGGER.warning("Failed to read %s: %s", path, exc)
            self._write(f"Could not read {path}: {exc}\n")
        except MalformedBoard as exc:
            self._write(f"Bad board in {path}: {exc}\n")

    # ── Output ───────────────────────────────────────────────────────────

    def _show(self) -> None:
        position = self._session.position
        self._write(render_board(position, self._settings.use_unicode))
        self._write(prompt(position))
        self._out.flush()

    def _write(self, text: str) -> None:
        self._out.write(text)


def read_board_file(path: Path) -> str:
    """First line of *path*; board files hold a single board string."""
    with path.open(encoding="utf-8") as fh:
        return fh.readline().strip()
