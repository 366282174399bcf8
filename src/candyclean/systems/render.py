from typing import List, Optional

from esper import World

from candyclean.components.board import Board
from candyclean.components.game_state import GameMode
from candyclean.components.score import ScoreState
from candyclean.constants import TOP_MARGIN
from candyclean.events.bus import (
    EventBus,
    EVENT_BOARD_READY,
    EVENT_OBJECTIVE_REACHED,
    EVENT_SHOOT_REJECTED,
    EVENT_SHOOT_RESOLVED,
)
from candyclean.rendering.board_renderer import BoardRenderer, TileRect
from candyclean.ui.layout import compute_board_geometry
from candyclean.utils.game_state import get_game_state

REJECTION_MESSAGES = {
    "out_of_bounds": "That spot is outside the board",
    "no_match": "No surrounding blocks with the same color",
}


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_BOARD_READY, self.on_board_ready)
        self.event_bus.subscribe(EVENT_SHOOT_RESOLVED, self.on_shoot_resolved)
        self.event_bus.subscribe(EVENT_SHOOT_REJECTED, self.on_shoot_rejected)
        self.event_bus.subscribe(EVENT_OBJECTIVE_REACHED, self.on_objective_reached)
        self.status: str = ""
        self._board_renderer = BoardRenderer()
        self._last_tile_layout: List[TileRect] = []

    def on_board_ready(self, sender, **kwargs):
        self.status = ""

    def on_shoot_resolved(self, sender, **kwargs):
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.WON:
            # The winning shot keeps the win prompt.
            return
        spawned = kwargs.get('spawned')
        self.status = f"Special block: {spawned.name.replace('_', ' ').lower()}" if spawned else ""

    def on_shoot_rejected(self, sender, **kwargs):
        self.status = REJECTION_MESSAGES.get(kwargs.get('reason'), "Invalid shot")

    def on_objective_reached(self, sender, **kwargs):
        self.status = "You won! Press Enter to choose a new level"

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: if no active Arcade window (unit tests), skip actual draw calls but still build layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.MENU:
            return
        board = self._component(Board)
        if board is None:
            return
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.rows, board.cols
        )
        self._last_tile_layout = self._board_renderer.layout(board, tile_size, start_x, start_y)
        self._board_renderer.render(arcade, board, self._last_tile_layout, headless)
        if headless:
            return
        headline = self.headline()
        text_y = self.window.height - TOP_MARGIN / 2
        if headline:
            arcade.draw_text(
                headline,
                self.window.width / 2,
                text_y + 12,
                arcade.color.WHITE,
                14,
                anchor_x="center",
                anchor_y="center",
            )
        if self.status:
            arcade.draw_text(
                self.status,
                self.window.width / 2,
                text_y - 12,
                arcade.color.ANTIQUE_WHITE,
                12,
                anchor_x="center",
                anchor_y="center",
            )

    def headline(self) -> str:
        """Difficulty name (when one was picked) followed by the score line."""
        score: Optional[ScoreState] = self._component(ScoreState)
        if score is None:
            return ""
        state = get_game_state(self.world)
        if state is not None and state.difficulty:
            return f"{state.difficulty}  {score.describe()}"
        return score.describe()

    def _component(self, component_type):
        for _, component in self.world.get_component(component_type):
            return component
        return None
