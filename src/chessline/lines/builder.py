"""Line builder: resolves declared moves into positions, lazily and once.

A line is a sequence of moves keyed by ``(line_id, move_index)``.  Move 1
is played from the line's root position; move *n* is played from the
position after move *n - 1*.  A declaration may carry ``branch_from``,
in which case its predecessor is looked up in that line instead, which
lets a variation share a prefix with another line without repeating it.

Every problem is recorded against the root or slot where it happened
and the build carries on; see :class:`~chessline.lines.models.BuilderError`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

import chess

from chessline.config import BuilderOptions
from chessline.core.rules import ChessRules
from chessline.lines.addressing import LineId, MoveIndex, SlotAddress, address
from chessline.lines.models import (
    BuilderError,
    ResolvedMove,
    ResolvedPosition,
    RootDeclaration,
)
from chessline.lines.store import DeclarationStore

if TYPE_CHECKING:
    from chessline.lines.interfaces import RulesBackend

_LOGGER = logging.getLogger(__name__)


class LineBuilder:
    """Collects line declarations and resolves them against a rules backend.

    Not thread-safe: declarations, :meth:`build` and the read accessors
    must run on one thread (or behind the caller's own lock).
    """

    __slots__ = ("_rules", "_store", "_root_positions", "_moves")

    def __init__(
        self,
        options: BuilderOptions | None = None,
        rules: RulesBackend | None = None,
    ) -> None:
        self._rules: RulesBackend = rules or ChessRules(options)
        self._store = DeclarationStore()
        self._root_positions: dict[LineId, ResolvedPosition] = {}
        self._moves: dict[SlotAddress, ResolvedMove] = {}

    @property
    def store(self) -> DeclarationStore:
        return self._store

    # ── Declarations ─────────────────────────────────────────────────────

    def declare_root(self, line_id: LineId, fen: str) -> None:
        """Set the starting position of *line_id* (first declaration wins)."""
        self._store.declare_root(line_id, fen)

    def declare_move(
        self,
        line_id: LineId,
        move_index: MoveIndex,
        move_text: str,
        branch_from: LineId | None = None,
    ) -> None:
        """Declare the SAN move played at *move_index* of *line_id*.

        With *branch_from*, this slot's predecessor is taken from that line,
        and *line_id* is registered as inheriting from it for :meth:`lookup`.
        """
        self._store.declare_move(line_id, move_index, move_text, branch_from)

    # ── Build ────────────────────────────────────────────────────────────

    def build(self) -> None:
        """Decode every root, then resolve every declared slot.

        Safe to call again: finished roots and slots are left alone and
        anything declared since the previous call gets resolved.
        """
        for root in self._store.roots():
            self._build_root(root)

        for kp in self._store.addresses():
            self.resolve(kp)

        _LOGGER.debug(
            "Built %d root(s) and %d move(s)",
            len(self._root_positions),
            len(self._moves),
        )

    def _build_root(self, root: RootDeclaration) -> None:
        if root.line_id in self._root_positions:
            return
        if BuilderError.INVALID_POSITION in self._store.root_errors(root.line_id):
            return

        try:
            board = self._rules.decode(root.fen)
        except ValueError as exc:
            _LOGGER.debug("Line %r: cannot decode %r: %s", root.line_id, root.fen, exc)
            self._store.root_error(root.line_id, BuilderError.INVALID_POSITION)
            return

        self._root_positions[root.line_id] = ResolvedPosition(
            board=board, fen=self._rules.encode(board)
        )

    def resolve(self, kp: SlotAddress) -> ResolvedMove | None:
        """Resolve the move at *kp*, following its predecessors as needed.

        Returns ``None`` if the slot cannot be resolved; the reason is in
        :meth:`slot_errors`.  A slot that has failed once is never retried.
        """
        resolved = self._moves.get(kp)
        if resolved is not None:
            return resolved

        if self._store.has_slot_errors(kp):
            return None

        line = self._store.move(kp)
        if line is None:
            self._store.slot_error(kp, BuilderError.INTERNAL_INCONSISTENCY)
            return None

        if line.move_index == 1:
            before = self._root_positions.get(line.predecessor_line)
            if before is None:
                self._store.slot_error(kp, BuilderError.ROOT_MISSING_FOR_SLOT)
                return None
            board = before.board
        else:
            pre_kp = address(line.predecessor_line, line.move_index - 1)
            pre_move = self.resolve(pre_kp)
            if pre_move is None:
                self._store.slot_error(kp, BuilderError.PREDECESSOR_UNRESOLVED)
                return None
            board = pre_move.after.board

        return self._resolve_with_board(kp, line.move_text, board)

    def _resolve_with_board(
        self, kp: SlotAddress, move_text: str, board: chess.Board
    ) -> ResolvedMove | None:
        try:
            intent = self._rules.parse(move_text)
        except ValueError:
            self._store.slot_error(kp, BuilderError.UNPARSABLE_MOVE)
            return None

        try:
            applied = self._rules.apply(board, intent)
        except ValueError as exc:
            _LOGGER.debug("Slot %s: %s", kp, exc)
            self._store.slot_error(kp, BuilderError.ILLEGAL_MOVE)
            return None

        after = ResolvedPosition(
            board=applied.after, fen=self._rules.encode(applied.after)
        )
        resolved = ResolvedMove(
            move=applied.move,
            after=after,
            uci=self._rules.machine_notation(applied),
            san=self._rules.human_notation(applied),
        )
        self._moves[kp] = resolved
        return resolved

    # ── Read accessors ───────────────────────────────────────────────────

    def root_declaration(self, line_id: LineId) -> RootDeclaration | None:
        return self._store.root(line_id)

    def root_result(self, line_id: LineId) -> ResolvedPosition | None:
        return self._root_positions.get(line_id)

    def root_errors(self, line_id: LineId) -> list[BuilderError]:
        return self._store.root_errors(line_id)

    def slot_errors(
        self, line_id: LineId, move_index: MoveIndex
    ) -> list[BuilderError]:
        return self._store.slot_errors(address(line_id, move_index))

    def slot_result(
        self, line_id: LineId, move_index: MoveIndex
    ) -> ResolvedMove | None:
        """The move resolved at exactly this slot, ignoring inheritance."""
        return self._moves.get(address(line_id, move_index))

    def parent_of(self, line_id: LineId) -> LineId | None:
        return self._store.parent_of(line_id)

    def lookup(self, line_id: LineId, move_index: MoveIndex) -> ResolvedMove | None:
        """The move that applies at this slot, inherited from ancestors if needed.

        A move declared on *line_id* itself always wins over its ancestors'.
        An ancestor chain that loops back on itself ends the search.
        """
        seen: set[LineId] = set()
        current: LineId | None = line_id
        while current is not None:
            if current in seen:
                _LOGGER.warning(
                    "Branch cycle through line %r while looking up move %d of %r",
                    current,
                    move_index,
                    line_id,
                )
                return None
            seen.add(current)

            resolved = self._moves.get(address(current, move_index))
            if resolved is not None:
                return resolved
            current = self._store.parent_of(current)
        return None

    def iter_line(self, line_id: LineId) -> Iterator[ResolvedMove]:
        """Yield the moves that apply to *line_id* from move 1 up to the first gap."""
        move_index = 1
        while True:
            resolved = self.lookup(line_id, move_index)
            if resolved is None:
                return
            yield resolved
            move_index += 1
