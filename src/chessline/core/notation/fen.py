"""FEN parsing and serialization."""

from __future__ import annotations

import chess

STARTING_FEN = chess.STARTING_FEN


def position_from_fen(
    fen: str, *, chess960: bool = False, validate: bool = True
) -> chess.Board:
    """Parse a FEN string into a :class:`chess.Board`.

    Raises:
        ValueError: malformed FEN, or (with *validate*) a board that cannot
            arise in a legal game.
    """
    if not isinstance(fen, str) or not fen.strip():
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    board = chess.Board(" ".join(parts), chess960=chess960)

    if validate:
        status = board.status()
        if status != chess.STATUS_VALID:
            raise ValueError(f"Invalid FEN position ({status!r}): {fen!r}")

    return board


def position_to_fen(board: chess.Board) -> str:
    """Serialise a board to canonical six-field FEN."""
    return board.fen()
