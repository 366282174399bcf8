import logging
from typing import Optional, Sequence

from esper import World

from candyclean.components.board import Board
from candyclean.events.bus import EventBus, EVENT_BOARD_READY, EVENT_DIFFICULTY_SELECTED
from candyclean.factories.board import build_board_from_layout, build_random_board
from candyclean.systems.board_ops import debug_dump, world_random
from candyclean.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity and installs freshly built boards on it."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.board_entity: Optional[int] = None
        self.event_bus.subscribe(EVENT_DIFFICULTY_SELECTED, self.on_difficulty_selected)

    @property
    def board(self) -> Board:
        if self.board_entity is None:
            raise RuntimeError("Board not found")
        return self.world.component_for_entity(self.board_entity, Board)

    def on_difficulty_selected(self, sender, **kwargs):
        preset = kwargs.get('preset')
        if preset is None:
            return
        state = get_game_state(self.world)
        if state is not None:
            state.difficulty = preset.name
        logger.info(
            "Starting %s game: %dx%d board, %d colors, objective %d",
            preset.name, preset.dimensions, preset.dimensions, preset.colors, preset.objective,
        )
        self.new_random_board(preset.dimensions, preset.dimensions, preset.colors)

    def new_random_board(self, rows: int, cols: int, color_count: int) -> Board:
        board = build_random_board(rows, cols, color_count, world_random(self.world))
        return self._install(board)

    def load_layout(self, layout: Sequence[str], color_count: int) -> Board:
        board = build_board_from_layout(layout, color_count)
        state = get_game_state(self.world)
        if state is not None:
            state.difficulty = None
        return self._install(board)

    def _install(self, board: Board) -> Board:
        if self.board_entity is None:
            self.board_entity = self.world.create_entity(board)
        else:
            # add_component replaces the previous Board on the same entity
            self.world.add_component(self.board_entity, board)
        logger.debug("Board ready %dx%d: %s", board.rows, board.cols, debug_dump(board))
        self.event_bus.emit(
            EVENT_BOARD_READY,
            rows=board.rows,
            cols=board.cols,
            color_count=board.color_count,
        )
        return board
