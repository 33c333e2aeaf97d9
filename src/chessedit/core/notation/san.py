"""Tokenizer for partial algebraic move tokens.

Accepts the SAN-like grammar::

    [piece] [from_file] [from_rank] [x] to_file [to_rank] [annotations]

plus castling tokens made of castle markers and ``-`` separators. Any field
except ``to_file`` may be missing; the resolver fills the gaps from the
board. Trailing annotations (``+``, ``#``, ``=Q``, ``e.p.``) are ignored.
"""

from __future__ import annotations

from chessedit.core.enums import CastleSide, PieceType
from chessedit.core.notation.models import PIECE_LETTERS, CastleRequest, MoveFragments
from chessedit.core.types import FILES, RANKS

DEFAULT_CASTLE_MARKERS = "O0o"
CASTLE_SEPARATORS = "-"
_ANNOTATIONS = "+#!?"
# (origin file, origin rank) attempts, greedy first
_ORIGIN_ATTEMPTS = ((True, True), (True, False), (False, True), (False, False))


def parse_move_token(
    token: str, castle_markers: str = DEFAULT_CASTLE_MARKERS
) -> MoveFragments | CastleRequest | None:
    """Split *token* into move fragments.

    Returns a :class:`CastleRequest` for castling tokens, :class:`MoveFragments`
    for everything else (blank when nothing matched), or ``None`` for a
    castling token with the wrong number of markers.
    """
    if token and token[0] in castle_markers:
        return parse_castle_token(token, castle_markers)
    return parse_fragments(token)


def parse_castle_token(
    token: str, castle_markers: str = DEFAULT_CASTLE_MARKERS
) -> CastleRequest | None:
    """``O-O`` → kingside, ``O-O-O`` → queenside, anything else → ``None``."""
    body = token.rstrip(_ANNOTATIONS)
    if not body or any(ch not in castle_markers + CASTLE_SEPARATORS for ch in body):
        return None
    count = sum(1 for ch in body if ch in castle_markers)
    if count == 2:
        return CastleRequest(CastleSide.KINGSIDE)
    if count == 3:
        return CastleRequest(CastleSide.QUEENSIDE)
    return None


def parse_fragments(token: str) -> MoveFragments:
    """Match the general move grammar against the start of *token*.

    Optional origin fields are tried greedily and given up when the
    mandatory destination file would otherwise be missing, so ``e4`` is a
    destination while ``e2e4`` carries an origin.
    """
    piece_type = None
    rest = token
    if rest and rest[0] in PIECE_LETTERS:
        piece_type = PIECE_LETTERS[rest[0]]
        rest = rest[1:]

    for take_file, take_rank in _ORIGIN_ATTEMPTS:
        fragments = _match_from(rest, piece_type, take_file, take_rank)
        if fragments is not None:
            return fragments
    return MoveFragments()


def _match_from(
    text: str, piece_type: PieceType | None, take_file: bool, take_rank: bool
) -> MoveFragments | None:
    pos = 0
    from_file = from_rank = None
    if take_file:
        if not _char_in(text, pos, FILES):
            return None
        from_file = FILES.index(text[pos])
        pos += 1
    if take_rank:
        if not _char_in(text, pos, RANKS):
            return None
        from_rank = RANKS.index(text[pos])
        pos += 1

    capture = _char_in(text, pos, "x")
    if capture:
        pos += 1

    if not _char_in(text, pos, FILES):
        return None
    to_file = FILES.index(text[pos])
    pos += 1

    to_rank = None
    if _char_in(text, pos, RANKS):
        to_rank = RANKS.index(text[pos])

    return MoveFragments(
        piece_type=piece_type,
        from_file=from_file,
        from_rank=from_rank,
        capture=capture,
        to_file=to_file,
        to_rank=to_rank,
    )


def _char_in(text: str, pos: int, allowed: str) -> bool:
    return pos < len(text) and text[pos] in allowed
