"""Wiring of the board, shot, score and flow systems behind one facade."""
from __future__ import annotations

import random
from typing import Optional, Sequence

from esper import World

from candyclean.components.board import Board
from candyclean.components.game_state import GameMode
from candyclean.components.score import ScoreState
from candyclean.constants import DEFAULT_OBJECTIVE
from candyclean.events.bus import EventBus
from candyclean.rendering.text import render_board_text
from candyclean.systems.board import BoardSystem
from candyclean.systems.board_ops import debug_dump, has_any_move, has_match
from candyclean.systems.game_flow_system import GameFlowSystem
from candyclean.systems.score_system import ScoreSystem
from candyclean.systems.shoot import ShootSystem, ShotOutcome
from candyclean.world import create_world


class Game:
    """One playing session: an ECS world plus the systems that drive it.

    The same instance can be restarted with another board; systems are
    created once and stay subscribed to the shared event bus.
    """

    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        *,
        rng: Optional[random.Random] = None,
        initial_mode: GameMode = GameMode.PLAYING,
        world: Optional[World] = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = world or create_world(initial_mode, rng=rng)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.score_system = ScoreSystem(self.world, self.event_bus)
        self.shoot_system = ShootSystem(self.world, self.event_bus)
        self.flow_system = GameFlowSystem(self.world, self.event_bus)

    def start_random(self, rows: int, cols: int, color_count: int, objective: int = DEFAULT_OBJECTIVE) -> Board:
        # Build first so a rejected configuration leaves the current game alone.
        board = self.board_system.new_random_board(rows, cols, color_count)
        self.score_system.reset(objective)
        return board

    def start_layout(self, layout: Sequence[str], color_count: int, objective: int = DEFAULT_OBJECTIVE) -> Board:
        board = self.board_system.load_layout(layout, color_count)
        self.score_system.reset(objective)
        return board

    @property
    def board(self) -> Board:
        return self.board_system.board

    @property
    def score(self) -> ScoreState:
        return self.score_system.score

    def shoot(self, row: int, col: int) -> ShotOutcome:
        return self.shoot_system.shoot(row, col)

    def has_match(self, row: int, col: int) -> bool:
        return has_match(self.board, row, col)

    def has_any_move(self) -> bool:
        return has_any_move(self.board)

    def is_objective_reached(self) -> bool:
        return self.score.is_objective_reached()

    def debug_dump(self) -> str:
        return debug_dump(self.board)

    def render(self) -> str:
        return render_board_text(self.board, self.score)


def new_random_game(
    rows: int,
    cols: int,
    color_count: int,
    objective: int = DEFAULT_OBJECTIVE,
    *,
    rng: Optional[random.Random] = None,
    event_bus: Optional[EventBus] = None,
) -> Game:
    """Start a game on a randomly filled board.

    Raises BoardConfigError listing every invalid setting.
    """
    game = Game(event_bus, rng=rng)
    game.start_random(rows, cols, color_count, objective)
    return game


def new_layout_game(
    layout: Sequence[str],
    color_count: int,
    objective: int = DEFAULT_OBJECTIVE,
    *,
    rng: Optional[random.Random] = None,
    event_bus: Optional[EventBus] = None,
) -> Game:
    """Start a game on a pre-designed board given as rows of color letters."""
    game = Game(event_bus, rng=rng)
    game.start_layout(layout, color_count, objective)
    return game
