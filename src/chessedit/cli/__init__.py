"""Terminal command layer."""

from chessedit.cli.render import render_board
from chessedit.cli.repl import CommandLoop

__all__ = ["CommandLoop", "render_board"]
