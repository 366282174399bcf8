from candyclean.components.board import Board
from candyclean.components.game_state import GameMode
from candyclean.constants import MOUSE_BUTTON_LEFT
from candyclean.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from candyclean.ui.layout import cell_at_point
from candyclean.utils.game_state import get_game_state


class InputSystem:
    """Translates left clicks over the board into tile clicks."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != MOUSE_BUTTON_LEFT:
            return
        if not self._playing(kwargs.get('mode')):
            return
        board = self._board()
        if board is None:
            return
        cell = cell_at_point(x, y, self.window.width, self.window.height, board.rows, board.cols)
        if cell is None:
            return
        row, col = cell
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def _playing(self, mode=None) -> bool:
        # The mode at press time wins: a menu click may already have started a game.
        if mode is None:
            state = get_game_state(self.world)
            if state is None:
                return True
            mode = state.mode
        return mode == GameMode.PLAYING

    def _board(self):
        for _, board in self.world.get_component(Board):
            return board
        return None
