"""Arcade window for Candy Clean.

Sets up the ECS world, event bus and systems, then forwards window input to
the bus.
"""
from __future__ import annotations

import random

from arcade import Window, color, run, set_background_color

from candyclean.components.game_state import GameMode
from candyclean.config import DEMO_COLORS, DEMO_LAYOUT, DifficultyPreset, GameConfig
from candyclean.events.bus import EVENT_DIFFICULTY_SELECTED, EVENT_KEY_PRESS, EVENT_MOUSE_PRESS
from candyclean.game import Game
from candyclean.menu.factory import spawn_difficulty_menu
from candyclean.menu.input_system import MenuInputSystem
from candyclean.menu.render_system import MenuRenderSystem
from candyclean.systems.input import InputSystem
from candyclean.systems.render import RenderSystem
from candyclean.utils.game_state import get_game_state, set_game_mode

# arcade.key.ENTER, NUM_ENTER and ESCAPE
RETURN_KEYS = (65293, 65421, 65307)


class CandyCleanWindow(Window):
    def __init__(self, config: GameConfig):
        display = config.display
        super().__init__(display.width, display.height, display.caption, resizable=True)
        rng = random.Random(config.seed) if config.seed is not None else None
        self.game = Game(rng=rng, initial_mode=GameMode.MENU)
        self.event_bus = self.game.event_bus
        self.world = self.game.world
        self.presets = config.menu_presets()

        # Interface systems
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)

        set_background_color(color.BLACK)
        preset = config.resolved()
        if config.demo:
            self.game.start_layout(DEMO_LAYOUT, DEMO_COLORS, config.demo_objective())
        elif preset is None:
            spawn_difficulty_menu(self.world, self.width, self.height, self.presets)
        else:
            self.start(preset)

    def start(self, preset: DifficultyPreset) -> None:
        self.event_bus.emit(EVENT_DIFFICULTY_SELECTED, preset=preset)

    def back_to_menu(self) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.MENU)
        spawn_difficulty_menu(self.world, self.width, self.height, self.presets)

    def on_draw(self):
        self.clear()
        state = get_game_state(self.world)
        if state and state.mode == GameMode.MENU:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        state = get_game_state(self.world)
        mode = state.mode if state else None
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, mode=mode)

    def on_key_press(self, symbol: int, modifiers: int):
        state = get_game_state(self.world)
        if state and state.mode == GameMode.WON and symbol in RETURN_KEYS:
            self.back_to_menu()
            return
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main(config: GameConfig | None = None):
    CandyCleanWindow(config or GameConfig())
    run()


if __name__ == "__main__":
    main()
