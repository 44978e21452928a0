"""Collaborator contract used by :class:`~chessline.lines.builder.LineBuilder`.

The builder never touches chess rules directly; everything goes through
a :class:`RulesBackend`.  Failures are reported by raising ``ValueError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import chess

    from chessline.core.notation.models import SanIntent
    from chessline.core.rules import AppliedMove


class RulesBackend(Protocol):
    """Protocol for the rule engine and notation parser."""

    def decode(self, text: str) -> chess.Board: ...

    def encode(self, board: chess.Board) -> str: ...

    def parse(self, move_text: str) -> SanIntent: ...

    def apply(self, board: chess.Board, intent: SanIntent) -> AppliedMove: ...

    def machine_notation(self, applied: AppliedMove) -> str: ...

    def human_notation(self, applied: AppliedMove) -> str: ...
