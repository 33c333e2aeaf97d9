"""Application entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from chessedit.cli.repl import CommandLoop, read_board_file
from chessedit.config import EditorSettings
from chessedit.core.errors import MalformedBoard
from chessedit.core.notation import STARTING_FEN, position_from_fen
from chessedit.game.session import GameSession

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = EditorSettings()
    parser = argparse.ArgumentParser(
        prog="chessedit",
        description="Edit a board position by typing algebraic moves.",
    )
    parser.add_argument(
        "position_file",
        nargs="?",
        type=Path,
        help="file whose first line is the starting board string",
    )
    parser.add_argument(
        "--unicode", action="store_true", help="draw pieces with Unicode glyphs"
    )
    parser.add_argument(
        "--undo-limit",
        type=int,
        default=defaults.undo_limit,
        help="number of positions kept for undo (default: %(default)s)",
    )
    parser.add_argument(
        "--save-path",
        default=defaults.save_path,
        help="default file for the save command (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch the editor. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = EditorSettings.from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.undo_limit < 0:
        _LOGGER.error("--undo-limit must be >= 0")
        return 2

    try:
        if args.position_file is not None:
            position = position_from_fen(read_board_file(args.position_file))
        else:
            position = position_from_fen(STARTING_FEN)
    except (OSError, MalformedBoard) as exc:
        _LOGGER.error("Cannot load %s: %s", args.position_file, exc)
        return 1

    session = GameSession(
        undo_limit=settings.undo_limit,
        castle_markers=settings.castle_markers,
        position=position,
    )
    CommandLoop(session, settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
