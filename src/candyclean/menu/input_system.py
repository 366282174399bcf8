"""Input handling for the difficulty menu."""
from typing import Optional

from esper import World

from candyclean.components.game_state import GameMode
from candyclean.config import DifficultyPreset
from candyclean.events.bus import (
    EVENT_DIFFICULTY_SELECTED,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from candyclean.menu.components import MenuButton
from candyclean.menu.factory import clear_menu
from candyclean.utils.game_state import get_game_state

# arcade.key.KEY_1 .. KEY_9 and NUM_1 .. NUM_9, avoided as imports to keep loose coupling.
KEY_1 = 49
NUM_1 = 65457


class MenuInputSystem:
    """Processes input events while the game is in the menu mode."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        self.handle_mouse_press(float(x), float(y))

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol is None:
            return
        self.handle_key_press(int(symbol))

    def handle_mouse_press(self, x: float, y: float) -> None:
        """Start the game whose button was clicked."""
        if not self._menu_active():
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._select(menu_button.preset)
                return

    def handle_key_press(self, symbol: int) -> None:
        """Digit keys pick the preset with the same number."""
        if not self._menu_active():
            return
        hotkey = self._hotkey_for(symbol)
        if hotkey is None:
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if menu_button.enabled and menu_button.hotkey == hotkey:
                self._select(menu_button.preset)
                return

    def _select(self, preset: DifficultyPreset) -> None:
        clear_menu(self.world)
        self._event_bus.emit(EVENT_DIFFICULTY_SELECTED, preset=preset)

    def _menu_active(self) -> bool:
        state = get_game_state(self.world)
        return state is not None and state.mode == GameMode.MENU

    @staticmethod
    def _hotkey_for(symbol: int) -> Optional[int]:
        for base in (KEY_1, NUM_1):
            if base <= symbol < base + 9:
                return symbol - base + 1
        return None

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )
