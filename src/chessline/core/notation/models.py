"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

import chess


@dataclass(slots=True, frozen=True)
class SanIntent:
    """What a SAN string asks for, before it is checked against a position.

    ``castling`` is ``"O-O"`` or ``"O-O-O"`` for castling moves, in which case
    the square fields are ``None``.
    """

    text: str
    piece_type: chess.PieceType | None = None
    to_square: chess.Square | None = None
    from_file: int | None = None
    from_rank: int | None = None
    promotion: chess.PieceType | None = None
    castling: str | None = None

    @property
    def is_castling(self) -> bool:
        return self.castling is not None
