"""User-configurable editor settings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from chessedit.core.notation.san import DEFAULT_CASTLE_MARKERS


@dataclass
class EditorSettings:
    """All user-configurable settings."""

    # Display
    use_unicode: bool = False

    # Session
    undo_limit: int = 1  # snapshots kept for ``undo``
    save_path: str = "game.fen"

    # Notation
    castle_markers: str = DEFAULT_CASTLE_MARKERS

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> EditorSettings:
        """Build settings from parsed command-line options."""
        settings = cls()
        settings.use_unicode = args.unicode
        settings.undo_limit = args.undo_limit
        settings.save_path = args.save_path
        settings.log_level = args.log_level.upper()
        return settings
