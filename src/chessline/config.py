"""Builder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class BuilderOptions:
    """Settings for decoding root positions.

    Args:
        chess960: Decode root FENs as Chess960 positions (Shredder/X-FEN
            castling fields, king-takes-rook castling moves).
        validate_positions: Reject FENs that parse but describe a board
            that cannot occur in a game (missing kings, pawns on the back
            rank, the side not to move in check, ...).
    """

    chess960: bool = False
    validate_positions: bool = True
