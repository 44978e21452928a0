"""Notation package: FEN / SAN parsing and serialization."""

from chessline.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessline.core.notation.models import SanIntent
from chessline.core.notation.san import match_move, move_to_san, move_to_uci, parse_san

__all__ = [
    "STARTING_FEN",
    "SanIntent",
    "position_from_fen",
    "position_to_fen",
    "parse_san",
    "match_move",
    "move_to_san",
    "move_to_uci",
]
