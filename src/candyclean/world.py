import random

from esper import World

from candyclean.components.game_state import GameMode, GameState


def create_world(
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the ECS world with its shared random source and game state.

    The random source is injected so tests can drive board generation with a
    deterministic sequence.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    return world
