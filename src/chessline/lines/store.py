"""Declaration store: the raw root and move declarations of a build session."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessline.lines.addressing import LineId, MoveIndex, SlotAddress, address
from chessline.lines.defaults import DefaultMap, list_map
from chessline.lines.models import BuilderError, MoveDeclaration, RootDeclaration

_LOGGER = logging.getLogger(__name__)


class DeclarationStore:
    """Holds declarations and their error lists.

    Each root and each slot may be declared once; later attempts are
    recorded as errors and the first value is kept.  The per-line
    inheritance ancestor (``parents``) is a separate table that every
    ``declare_move`` call with ``branch_from`` overwrites.
    """

    __slots__ = ("_roots", "_moves", "_parents", "_root_errors", "_slot_errors")

    def __init__(self) -> None:
        self._roots: dict[LineId, RootDeclaration] = {}
        self._moves: dict[SlotAddress, MoveDeclaration] = {}
        self._parents: dict[LineId, LineId] = {}
        self._root_errors: DefaultMap[LineId, list[BuilderError]] = list_map()
        self._slot_errors: DefaultMap[SlotAddress, list[BuilderError]] = list_map()

    # ── Declarations ─────────────────────────────────────────────────────

    def declare_root(self, line_id: LineId, fen: str) -> None:
        if line_id in self._roots:
            self.root_error(line_id, BuilderError.ROOT_ALREADY_DEFINED)
            return
        self._roots[line_id] = RootDeclaration(line_id, fen)

    def declare_move(
        self,
        line_id: LineId,
        move_index: MoveIndex,
        move_text: str,
        branch_from: LineId | None = None,
    ) -> None:
        if isinstance(move_index, bool) or not isinstance(move_index, int):
            raise ValueError(f"Move index must be an int, got {move_index!r}")
        if move_index < 1:
            raise ValueError(f"Move index must be >= 1, got {move_index}")

        kp = address(line_id, move_index)
        if kp in self._moves:
            self.slot_error(kp, BuilderError.MOVE_ALREADY_DEFINED)
        else:
            self._moves[kp] = MoveDeclaration(kp, move_text, branch_from)

        if branch_from is not None:
            previous = self._parents.get(line_id)
            if previous is not None and previous != branch_from:
                _LOGGER.debug(
                    "Line %r now branches from %r (was %r)",
                    line_id,
                    branch_from,
                    previous,
                )
            self._parents[line_id] = branch_from

    # ── Errors ───────────────────────────────────────────────────────────

    def root_error(self, line_id: LineId, error: BuilderError) -> None:
        _LOGGER.debug("Line %r: %s", line_id, error)
        self._root_errors.get(line_id).append(error)

    def slot_error(self, kp: SlotAddress, error: BuilderError) -> None:
        _LOGGER.debug("Slot %s: %s", kp, error)
        self._slot_errors.get(kp).append(error)

    def root_errors(self, line_id: LineId) -> list[BuilderError]:
        return list(self._root_errors.peek(line_id) or ())

    def slot_errors(self, kp: SlotAddress) -> list[BuilderError]:
        return list(self._slot_errors.peek(kp) or ())

    def has_slot_errors(self, kp: SlotAddress) -> bool:
        return bool(self._slot_errors.peek(kp))

    # ── Queries ──────────────────────────────────────────────────────────

    def root(self, line_id: LineId) -> RootDeclaration | None:
        return self._roots.get(line_id)

    def move(self, kp: SlotAddress) -> MoveDeclaration | None:
        return self._moves.get(kp)

    def parent_of(self, line_id: LineId) -> LineId | None:
        return self._parents.get(line_id)

    def roots(self) -> Iterator[RootDeclaration]:
        return iter(list(self._roots.values()))

    def addresses(self) -> Iterator[SlotAddress]:
        return iter(list(self._moves))
