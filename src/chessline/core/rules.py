"""Default rules backend built on python-chess."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from chessline.core.notation import (
    SanIntent,
    match_move,
    move_to_san,
    move_to_uci,
    parse_san,
    position_from_fen,
    position_to_fen,
)
from chessline.config import BuilderOptions


@dataclass(slots=True, frozen=True)
class AppliedMove:
    """A legal move together with the boards before and after it.

    Both boards are private copies; neither is shared with the caller's
    input board.
    """

    before: chess.Board
    move: chess.Move
    after: chess.Board


class ChessRules:
    """Stateless adapter exposing python-chess through the rules contract."""

    __slots__ = ("_options",)

    def __init__(self, options: BuilderOptions | None = None) -> None:
        self._options = options or BuilderOptions()

    def decode(self, text: str) -> chess.Board:
        return position_from_fen(
            text,
            chess960=self._options.chess960,
            validate=self._options.validate_positions,
        )

    def encode(self, board: chess.Board) -> str:
        return position_to_fen(board)

    def parse(self, move_text: str) -> SanIntent:
        return parse_san(move_text)

    def apply(self, board: chess.Board, intent: SanIntent) -> AppliedMove:
        """Play *intent* on a copy of *board*.

        Raises:
            ValueError: the intent matches no legal move, or more than one.
        """
        move = match_move(board, intent)
        before = board.copy(stack=False)
        after = board.copy(stack=False)
        after.push(move)
        return AppliedMove(before=before, move=move, after=after)

    def machine_notation(self, applied: AppliedMove) -> str:
        return move_to_uci(applied.move)

    def human_notation(self, applied: AppliedMove) -> str:
        return move_to_san(applied.before, applied.move)
