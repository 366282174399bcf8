"""Factory helpers for creating the difficulty menu entities."""
from typing import Sequence

from esper import World

from candyclean.config import PRESETS, DifficultyPreset
from candyclean.menu.components import MenuBackground, MenuButton, MenuTag

BUTTON_SPACING = 64.0


def spawn_difficulty_menu(
    world: World,
    width: int,
    height: int,
    presets: Sequence[DifficultyPreset] = PRESETS,
) -> None:
    """Create the menu background and one button per difficulty preset, top to bottom."""
    center_x = width / 2
    top_y = height / 2 + BUTTON_SPACING * (len(presets) - 1) / 2

    world.create_entity(MenuBackground(), MenuTag())

    for index, preset in enumerate(presets):
        label = f"{index + 1}. {preset.name}  ({preset.dimensions}x{preset.dimensions}, {preset.colors} colors)"
        world.create_entity(
            MenuButton(
                label=label,
                preset=preset,
                hotkey=index + 1,
                x=center_x,
                y=top_y - index * BUTTON_SPACING,
            ),
            MenuTag(),
        )


def clear_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    to_delete = {ent for ent, _ in world.get_component(MenuTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)
