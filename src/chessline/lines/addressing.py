"""Canonical addresses for move slots."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

LineId = Hashable
MoveIndex = int


@dataclass(frozen=True, slots=True)
class SlotAddress:
    """A (line, move index) pair; the unit of resolution."""

    line_id: LineId
    move_index: MoveIndex

    def __str__(self) -> str:
        return f"{self.line_id}#{self.move_index}"


def address(line_id: LineId, move_index: MoveIndex) -> SlotAddress:
    """Return the :class:`SlotAddress` for *line_id* and *move_index*.

    Equal inputs give equal, equally hashed addresses, so results can be
    used as dict keys without interning.
    """
    return SlotAddress(line_id, move_index)
