import logging

from esper import World

from candyclean.components.game_state import GameMode
from candyclean.events.bus import (
    EventBus,
    EVENT_BOARD_READY,
    EVENT_OBJECTIVE_REACHED,
    EVENT_SCORE_CHANGED,
)
from candyclean.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Moves the game between playing and won.

    Victory depends on the score objective only; running out of moves never
    ends the game.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_BOARD_READY, self.on_board_ready)
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)

    def on_board_ready(self, sender, **kwargs):
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def on_score_changed(self, sender, **kwargs):
        points = kwargs.get('points', 0)
        objective = kwargs.get('objective')
        if objective is None or points < objective:
            return
        state = get_game_state(self.world)
        if state is None or state.mode != GameMode.PLAYING:
            return
        set_game_mode(self.world, self.event_bus, GameMode.WON)
        logger.info("Objective reached: %d/%d points", points, objective)
        self.event_bus.emit(EVENT_OBJECTIVE_REACHED, points=points, objective=objective)
