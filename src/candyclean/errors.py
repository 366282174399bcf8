"""Exceptions raised at the boundary of the board engine.

Every condition here is recoverable: the caller decides whether to retry,
prompt again or give up.
"""
from __future__ import annotations

from typing import Sequence


class CandyCleanError(Exception):
    """Base class for all game errors."""


class ShootError(CandyCleanError):
    """A shot was rejected. The board is left untouched."""

    reason = "rejected"

    def __init__(self, row: int, col: int, message: str):
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBounds(ShootError):
    reason = "out_of_bounds"

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            row,
            col,
            f"The selected spot ({row}, {col}) is outside of the board boundaries. "
            f"The current board size is {rows} x {cols}",
        )
        self.rows = rows
        self.cols = cols


class NoMatch(ShootError):
    reason = "no_match"

    def __init__(self, row: int, col: int):
        super().__init__(
            row,
            col,
            f"The selected block ({row}, {col}) doesn't have any surrounding blocks with the same color",
        )


class InvalidDimensions(CandyCleanError, ValueError):
    """Board size outside the allowed bounds, or a malformed layout."""


class InvalidColorCount(CandyCleanError, ValueError):
    """Number of colors outside the allowed bounds."""


class BoardConfigError(CandyCleanError, ValueError):
    """Aggregates every problem found in a board configuration."""

    def __init__(self, errors: Sequence[CandyCleanError]):
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))

    def has(self, kind: type[CandyCleanError]) -> bool:
        return any(isinstance(error, kind) for error in self.errors)
