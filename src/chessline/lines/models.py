"""Declarations, resolved results and error kinds for the line builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

import chess

from chessline.lines.addressing import LineId, SlotAddress


class BuilderError(StrEnum):
    """Error kinds recorded against a line root or a move slot."""

    ROOT_ALREADY_DEFINED = "Root already defined"
    MOVE_ALREADY_DEFINED = "Move already defined"
    INVALID_POSITION = "Cannot read position"
    ROOT_MISSING_FOR_SLOT = "Line has no position"
    PREDECESSOR_UNRESOLVED = "Move has no previous move"
    UNPARSABLE_MOVE = "Cannot read move"
    ILLEGAL_MOVE = "Cannot make move"
    INTERNAL_INCONSISTENCY = "Internal inconsistency"


@dataclass(slots=True, frozen=True)
class RootDeclaration:
    """Starting position of a line, as given by the caller."""

    line_id: LineId
    fen: str


@dataclass(slots=True, frozen=True)
class MoveDeclaration:
    """A move declared at a slot.

    ``branch_from`` only redirects where this slot looks for its
    predecessor; it does not change which line the move belongs to.
    """

    address: SlotAddress
    move_text: str
    branch_from: LineId | None = None

    @property
    def line_id(self) -> LineId:
        return self.address.line_id

    @property
    def move_index(self) -> int:
        return self.address.move_index

    @property
    def predecessor_line(self) -> LineId:
        return self.branch_from if self.branch_from is not None else self.line_id


@dataclass(slots=True, frozen=True)
class ResolvedPosition:
    """A decoded board and its canonical FEN.

    The board is owned by the builder and must not be mutated.
    """

    board: chess.Board
    fen: str


@dataclass(slots=True, frozen=True)
class ResolvedMove:
    """Result of playing a declared move."""

    move: chess.Move
    after: ResolvedPosition
    uci: str
    san: str

    @property
    def machine_notation(self) -> str:
        return self.uci

    @property
    def human_notation(self) -> str:
        return self.san
