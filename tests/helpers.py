from __future__ import annotations

import random
from itertools import cycle
from typing import Sequence

from candyclean.components.board import Board
from candyclean.components.cell import Cell, SpecialKind
from candyclean.components.color import color_of
from candyclean.events.bus import EventBus
from candyclean.game import Game, new_layout_game


class SequenceRandom(random.Random):
    """Random source whose randrange replays the given values in a loop."""

    def __init__(self, values: Sequence[int]):
        super().__init__(0)
        self._values = cycle(values)

    def randrange(self, start, stop=None, step=1):
        return next(self._values)


def layout_game(
    layout: Sequence[str],
    color_count: int = 4,
    objective: int = 500,
    refill: Sequence[int] = (4,),
    event_bus: EventBus | None = None,
) -> Game:
    """Game on a fixed layout whose refills draw the given palette indices."""
    return new_layout_game(
        layout,
        color_count,
        objective,
        rng=SequenceRandom(refill),
        event_bus=event_bus,
    )


def place_special(board: Board, row: int, col: int, kind: SpecialKind, letter: str | None = None) -> None:
    color = color_of(letter) if letter else board.cells[row][col].color
    board.cells[row][col] = Cell(color=color, special=kind)


def specials(board: Board) -> dict[tuple[int, int], SpecialKind]:
    return {
        (row, col): board.cells[row][col].special
        for row, col in board.positions()
        if board.cells[row][col].is_special()
    }
