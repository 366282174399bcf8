"""Shot resolution: the board mutation engine.

A shot walks Validate -> Resolve -> Remove -> Respawn -> Compact -> Refill and
finally reports to the score. A rejected shot leaves the board untouched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from esper import World

from candyclean.components.board import Board
from candyclean.components.cell import Cell, SpecialKind
from candyclean.components.game_state import GameMode
from candyclean.errors import NoMatch, OutOfBounds, ShootError
from candyclean.events.bus import (
    EventBus,
    EVENT_BOARD_COMPACTED,
    EVENT_BOARD_REFILLED,
    EVENT_CELLS_CLEARED,
    EVENT_SHOOT_REJECTED,
    EVENT_SHOOT_RESOLVED,
    EVENT_SPECIAL_DETONATED,
    EVENT_SPECIAL_SPAWNED,
    EVENT_TILE_CLICK,
)
from candyclean.systems.board_ops import (
    blank_cells,
    columns_with_blanks,
    compact_height,
    compact_width,
    get_board,
    has_match,
    refill_blank_cells,
    run_extents,
    run_positions,
    settle_columns,
    special_kind_for_run,
    world_random,
)
from candyclean.utils.game_state import get_game_state

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(slots=True)
class ShotOutcome:
    row: int
    col: int
    cleared: List[Position] = field(default_factory=list)
    spawned: Optional[SpecialKind] = None
    detonations: int = 0
    refilled: List[Position] = field(default_factory=list)


@dataclass(slots=True)
class _Cascade:
    """Bookkeeping shared by every detonation of one top-level shot."""
    cleared: List[Position] = field(default_factory=list)
    swept_rows: List[int] = field(default_factory=list)
    detonations: int = 0


class ShootSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        state = get_game_state(self.world)
        if state is not None and state.mode != GameMode.PLAYING:
            return
        try:
            self.shoot(row, col)
        except ShootError as exc:
            # Penalty already applied through EVENT_SHOOT_REJECTED.
            logger.debug("Click shot rejected: %s", exc)

    def shoot(self, row: int, col: int) -> ShotOutcome:
        """Fire at (row, col).

        Raises OutOfBounds or NoMatch after the score penalty has been applied;
        the board is unchanged in that case.
        """
        board = get_board(self.world)
        try:
            self._validate(board, row, col)
        except ShootError as exc:
            self.event_bus.emit(EVENT_SHOOT_REJECTED, row=row, col=col, reason=exc.reason)
            raise

        outcome = ShotOutcome(row=row, col=col)
        if board.cells[row][col].is_special():
            self._resolve_special(board, row, col, outcome)
        else:
            self._resolve_plain(board, row, col, outcome)

        outcome.refilled = refill_blank_cells(board, world_random(self.world))
        if outcome.refilled:
            self.event_bus.emit(EVENT_BOARD_REFILLED, positions=outcome.refilled)
        self.event_bus.emit(
            EVENT_SHOOT_RESOLVED,
            row=row,
            col=col,
            cleared=len(outcome.cleared),
            spawned=outcome.spawned,
        )
        return outcome

    @staticmethod
    def _validate(board: Board, row: int, col: int) -> None:
        if not board.in_bounds(row, col):
            raise OutOfBounds(row, col, board.rows, board.cols)
        if not has_match(board, row, col):
            raise NoMatch(row, col)

    # ------------------------------------------------------------------
    # Plain cells
    # ------------------------------------------------------------------
    def _resolve_plain(self, board: Board, row: int, col: int, outcome: ShotOutcome) -> None:
        extents = run_extents(board, row, col)
        color = board.cells[row][col].color

        cleared = blank_cells(board, run_positions(extents, row, col))
        outcome.cleared.extend(cleared)
        self.event_bus.emit(EVENT_CELLS_CLEARED, positions=cleared, origin=(row, col))

        kind = special_kind_for_run(extents, board.rows)
        if kind is not SpecialKind.NONE:
            board.cells[row][col] = Cell(color=color, special=kind)
            outcome.spawned = kind
            logger.debug("Spawned %s special at (%d, %d)", kind.name, row, col)
            self.event_bus.emit(EVENT_SPECIAL_SPAWNED, row=row, col=col, kind=kind, color=color)

        compact_width(board, row, extents.left, extents.right)
        compact_height(board, col, extents.top, extents.bottom)
        self.event_bus.emit(
            EVENT_BOARD_COMPACTED,
            columns=list(range(extents.left, extents.right + 1)),
        )

    # ------------------------------------------------------------------
    # Special cells
    # ------------------------------------------------------------------
    def _resolve_special(self, board: Board, row: int, col: int, outcome: ShotOutcome) -> None:
        cascade = _Cascade()
        self._detonate(board, row, col, cascade, depth=0)
        outcome.cleared.extend(cascade.cleared)
        outcome.detonations = cascade.detonations

        for swept_row in cascade.swept_rows:
            compact_width(board, swept_row, 0, board.cols - 1)
        # Nested detonations can leave blanks in several rows of one column,
        # which a single upward pass does not settle.
        columns = columns_with_blanks(board)
        settle_columns(board, columns)
        if columns:
            self.event_bus.emit(EVENT_BOARD_COMPACTED, columns=columns)

    def _detonate(self, board: Board, row: int, col: int, cascade: _Cascade, depth: int) -> None:
        cell = board.cells[row][col]
        kind = cell.special
        cascade.detonations += 1
        logger.debug("Detonating %s special at (%d, %d), depth %d", kind.name, row, col, depth)
        self.event_bus.emit(EVENT_SPECIAL_DETONATED, row=row, col=col, kind=kind, depth=depth)

        if kind is SpecialKind.ALL_BOARD:
            # Every cell goes, specials included, without chaining.
            self._clear(blank_cells(board, board.positions()), (row, col), cascade)
            return

        # The origin is consumed first so a chain can never come back to it.
        self._clear(blank_cells(board, [(row, col)]), (row, col), cascade)
        if kind in (SpecialKind.ROW, SpecialKind.ROW_AND_COLUMN):
            self._sweep(board, [(row, c) for c in range(board.cols)], (row, col), cascade, depth)
            cascade.swept_rows.append(row)
        if kind in (SpecialKind.COLUMN, SpecialKind.ROW_AND_COLUMN):
            self._sweep(board, [(r, col) for r in range(board.rows)], (row, col), cascade, depth)

    def _sweep(
        self,
        board: Board,
        positions: List[Position],
        origin: Position,
        cascade: _Cascade,
        depth: int,
    ) -> None:
        plain: List[Position] = []
        for row, col in positions:
            cell = board.cells[row][col]
            if cell.is_blank():
                continue
            if cell.is_special():
                # The nested detonation credits its own cells.
                self._detonate(board, row, col, cascade, depth + 1)
            else:
                cell.set_to_blank()
                plain.append((row, col))
        self._clear(plain, origin, cascade)

    def _clear(self, positions: List[Position], origin: Position, cascade: _Cascade) -> None:
        if not positions:
            return
        cascade.cleared.extend(positions)
        self.event_bus.emit(EVENT_CELLS_CLEARED, positions=positions, origin=origin)
