"""Candy Clean: a shoot-to-clear colored grid puzzle."""

from candyclean.errors import (
    BoardConfigError,
    CandyCleanError,
    InvalidColorCount,
    InvalidDimensions,
    NoMatch,
    OutOfBounds,
    ShootError,
)
from candyclean.game import Game, new_layout_game, new_random_game

__all__ = [
    "BoardConfigError",
    "CandyCleanError",
    "Game",
    "InvalidColorCount",
    "InvalidDimensions",
    "NoMatch",
    "OutOfBounds",
    "ShootError",
    "new_layout_game",
    "new_random_game",
]
