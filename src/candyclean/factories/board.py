"""Builders for fresh boards: random fill or a pre-designed letter layout."""
from __future__ import annotations

import random
from typing import List, Sequence

from candyclean.components.board import Board
from candyclean.components.cell import Cell
from candyclean.constants import MAX_COLORS, MAX_DIMENSIONS, MIN_COLORS, MIN_DIMENSIONS
from candyclean.errors import BoardConfigError, CandyCleanError, InvalidColorCount, InvalidDimensions


def _color_count_error(color_count: int) -> InvalidColorCount | None:
    if MIN_COLORS <= color_count <= MAX_COLORS:
        return None
    return InvalidColorCount(
        f"You are not able to play with this number of colors: {color_count}. "
        f"The number of colors must be between {MIN_COLORS} and {MAX_COLORS}"
    )


def validate_board_config(rows: int, cols: int, color_count: int) -> None:
    """Check every constraint and raise one error listing all violations."""
    errors: List[CandyCleanError] = []
    for label, size in (("rows", rows), ("columns", cols)):
        if not MIN_DIMENSIONS <= size <= MAX_DIMENSIONS:
            errors.append(InvalidDimensions(
                f"You are not able to play with this board size: {size} {label}. "
                f"The size must be between {MIN_DIMENSIONS} and {MAX_DIMENSIONS}"
            ))
    color_error = _color_count_error(color_count)
    if color_error is not None:
        errors.append(color_error)
    if errors:
        raise BoardConfigError(errors)


def build_random_board(rows: int, cols: int, color_count: int, rng: random.Random) -> Board:
    validate_board_config(rows, cols, color_count)
    cells = [[Cell.random(rng, color_count) for _ in range(cols)] for _ in range(rows)]
    return Board(rows=rows, cols=cols, color_count=color_count, cells=cells)


def build_board_from_layout(layout: Sequence[str], color_count: int) -> Board:
    """Build a board from equal-length rows of letters.

    E is empty, R G Y B P C W are the playable colors and anything else is
    empty. The layout may be rectangular and is not held to the size bounds.
    """
    errors: List[CandyCleanError] = []
    if not layout or not layout[0]:
        errors.append(InvalidDimensions("A board layout needs at least one non-empty row"))
    elif any(len(line) != len(layout[0]) for line in layout):
        errors.append(InvalidDimensions("Every row of a board layout must have the same length"))
    color_error = _color_count_error(color_count)
    if color_error is not None:
        errors.append(color_error)
    if errors:
        raise BoardConfigError(errors)
    cells = [[Cell.from_letter(letter) for letter in line] for line in layout]
    return Board(rows=len(layout), cols=len(layout[0]), color_count=color_count, cells=cells)
