"""Rule-engine layer: python-chess behind the notation helpers and rules backend.

Quick start::

    from chessline.core import ChessRules, STARTING_FEN

    rules = ChessRules()
    board = rules.decode(STARTING_FEN)
    applied = rules.apply(board, rules.parse("e4"))
    print(rules.human_notation(applied), rules.encode(applied.after))
"""

from chessline.core.notation import (
    STARTING_FEN,
    SanIntent,
    match_move,
    move_to_san,
    move_to_uci,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chessline.core.rules import AppliedMove, ChessRules

__all__ = [
    # Rules backend
    "AppliedMove",
    "ChessRules",
    # Notation
    "STARTING_FEN",
    "SanIntent",
    "match_move",
    "move_to_san",
    "move_to_uci",
    "parse_san",
    "position_from_fen",
    "position_to_fen",
]
