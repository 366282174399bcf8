"""Draws the difficulty menu: title, one button per preset and a key hint."""
import arcade
from esper import World

from candyclean.components.game_state import GameMode
from candyclean.menu.components import MenuBackground, MenuButton
from candyclean.utils.game_state import get_game_state

HINT = "Click a level or press its number"


class MenuRenderSystem:
    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.MENU:
            return
        for _, background in self.world.get_component(MenuBackground):
            self._draw_background(background)
        for _, button in self.world.get_component(MenuButton):
            self._draw_button(button)

    def _draw_background(self, background: MenuBackground) -> None:
        width, height = self.window.width, self.window.height
        arcade.draw_lrbt_rectangle_filled(0, width, 0, height, background.color)
        arcade.draw_text(
            background.title, width / 2, height - 60, arcade.color.WHITE, 32,
            anchor_x="center", anchor_y="center", bold=True,
        )
        arcade.draw_text(
            HINT, width / 2, 30, arcade.color.LIGHT_GRAY, 12,
            anchor_x="center", anchor_y="center",
        )

    @staticmethod
    def _draw_button(button: MenuButton) -> None:
        left = button.x - button.width / 2
        bottom = button.y - button.height / 2
        if button.enabled:
            fill, ink = arcade.color.DARK_SLATE_BLUE, arcade.color.WHITE
        else:
            fill, ink = arcade.color.GRAY_BLUE, arcade.color.SILVER
        arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill)
        arcade.draw_lbwh_rectangle_outline(left, bottom, button.width, button.height, ink, border_width=2)
        # Label on the upper half, objective underneath.
        arcade.draw_text(
            button.label, button.x, button.y + 8, ink, 14,
            anchor_x="center", anchor_y="center", bold=True,
        )
        arcade.draw_text(
            f"objective {button.preset.objective} points", button.x, button.y - 12, ink, 10,
            anchor_x="center", anchor_y="center",
        )
