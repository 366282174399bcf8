from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from esper import World

from candyclean.components.board import Board
from candyclean.components.cell import Cell, SpecialKind
from candyclean.components.score import ScoreState
from candyclean.constants import MINIMUM_CELLS_FOR_SPECIAL

Position = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class RunExtents:
    """Inclusive bounds of the runs crossing a selected cell."""
    left: int
    right: int
    top: int
    bottom: int

    @property
    def horizontal(self) -> int:
        return self.right - self.left + 1

    @property
    def vertical(self) -> int:
        return self.bottom - self.top + 1


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def get_score(world: World) -> ScoreState:
    for _, score in world.get_component(ScoreState):
        return score
    raise RuntimeError("ScoreState not found")


def world_random(world: World) -> random.Random:
    rng = getattr(world, "random", None)
    if rng is None:
        rng = random.Random()
        setattr(world, "random", rng)
    return rng


def leftmost(board: Board, row: int, col: int) -> int:
    line = board.cells[row]
    before = col
    while before > 0 and line[before].color_equals(line[before - 1]):
        before -= 1
    return before


def rightmost(board: Board, row: int, col: int) -> int:
    line = board.cells[row]
    after = col
    while after < board.cols - 1 and line[after].color_equals(line[after + 1]):
        after += 1
    return after


def topmost(board: Board, row: int, col: int) -> int:
    cells = board.cells
    before = row
    while before > 0 and cells[before][col].color_equals(cells[before - 1][col]):
        before -= 1
    return before


def bottommost(board: Board, row: int, col: int) -> int:
    cells = board.cells
    after = row
    while after < board.rows - 1 and cells[after][col].color_equals(cells[after + 1][col]):
        after += 1
    return after


def run_extents(board: Board, row: int, col: int) -> RunExtents:
    return RunExtents(
        left=leftmost(board, row, col),
        right=rightmost(board, row, col),
        top=topmost(board, row, col),
        bottom=bottommost(board, row, col),
    )


def has_match(board: Board, row: int, col: int) -> bool:
    """Return True if the cell can be shot: a run longer than one, or a special."""
    if not board.in_bounds(row, col):
        return False
    if board.cells[row][col].is_special():
        return True
    extents = run_extents(board, row, col)
    return extents.horizontal > 1 or extents.vertical > 1


def find_playable_cells(board: Board) -> List[Position]:
    return [(row, col) for row, col in board.positions() if has_match(board, row, col)]


def has_any_move(board: Board) -> bool:
    return any(has_match(board, row, col) for row, col in board.positions())


def run_positions(extents: RunExtents, row: int, col: int) -> List[Position]:
    """Cells covered by the horizontal and vertical runs, each listed once."""
    positions = {(row, c) for c in range(extents.left, extents.right + 1)}
    positions.update((r, col) for r in range(extents.top, extents.bottom + 1))
    return sorted(positions)


def blank_cells(board: Board, positions: Iterable[Position]) -> List[Position]:
    """Blank every listed cell that is not already blank; return those blanked."""
    blanked: List[Position] = []
    for row, col in positions:
        cell = board.cells[row][col]
        if cell.is_blank():
            continue
        cell.set_to_blank()
        blanked.append((row, col))
    return blanked


def special_kind_for_run(extents: RunExtents, dimension: int) -> SpecialKind:
    """Pick the special block earned by a cleared run; first rule that applies wins."""
    horizontal = extents.horizontal
    vertical = extents.vertical
    minimum = MINIMUM_CELLS_FOR_SPECIAL
    if horizontal == dimension and vertical == dimension:
        return SpecialKind.ALL_BOARD
    if horizontal >= minimum and vertical >= minimum:
        return SpecialKind.ROW_AND_COLUMN
    if horizontal >= minimum:
        return SpecialKind.ROW
    if vertical >= minimum:
        return SpecialKind.COLUMN
    return SpecialKind.NONE


def compact_width(board: Board, row: int, left: int, right: int) -> None:
    """Lift the blanks of columns left..right one pass upward, starting at row."""
    for r in range(row, 0, -1):
        for c in range(left, right + 1):
            if board.cells[r][c].is_blank():
                board.swap((r, c), (r - 1, c))


def compact_height(board: Board, col: int, top: int, bottom: int) -> None:
    """Lift every blank found in rows top..bottom of a single column to the top."""
    for r in range(top, bottom + 1):
        if board.cells[r][col].is_blank():
            compact_width(board, r, col, col)


def columns_with_blanks(board: Board) -> List[int]:
    return [
        col for col in range(board.cols)
        if any(board.cells[row][col].is_blank() for row in range(board.rows))
    ]


def settle_columns(board: Board, columns: Iterable[int]) -> None:
    """Full gravity for whole columns; a no-op on already settled columns."""
    for col in columns:
        compact_height(board, col, 0, board.rows - 1)


def refill_blank_cells(board: Board, rng: random.Random) -> List[Position]:
    """Replace every blank cell with a fresh random one; scans the whole board."""
    spawned: List[Position] = []
    for row, col in board.positions():
        if board.cells[row][col].is_blank():
            board.cells[row][col] = Cell.random(rng, board.color_count)
            spawned.append((row, col))
    return spawned


def debug_dump(board: Board) -> str:
    """Letters only, one word per row."""
    return " ".join(board.letters())
