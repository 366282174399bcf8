from candyclean.components.game_state import GameMode
from candyclean.events.bus import EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from candyclean.game import Game
from candyclean.menu.components import MenuButton
from candyclean.menu.factory import spawn_difficulty_menu
from candyclean.menu.input_system import MenuInputSystem
from candyclean.systems.input import InputSystem
from candyclean.ui.layout import cell_at_point, cell_origin, compute_board_geometry

from tests.helpers import SequenceRandom, layout_game


class DummyWindow:
    def __init__(self, width=900, height=760):
        self.width = width
        self.height = height


def _center(window, rows, cols, row, col):
    tile, start_x, start_y = compute_board_geometry(window.width, window.height, rows, cols)
    left, bottom = cell_origin(row, col, rows, tile, start_x, start_y)
    return left + tile / 2, bottom + tile / 2


def test_row_zero_is_drawn_at_the_top():
    tile, start_x, start_y = compute_board_geometry(900, 760, 3, 3)
    _, top_bottom = cell_origin(0, 0, 3, tile, start_x, start_y)
    _, last_bottom = cell_origin(2, 0, 3, tile, start_x, start_y)
    assert top_bottom > last_bottom
    assert last_bottom == start_y


def test_cell_at_point_inverts_cell_origin():
    window = DummyWindow()
    for row, col in [(0, 0), (2, 1), (4, 4)]:
        x, y = _center(window, 5, 5, row, col)
        assert cell_at_point(x, y, window.width, window.height, 5, 5) == (row, col)
    assert cell_at_point(0, 0, window.width, window.height, 5, 5) is None


def test_tiles_never_shrink_below_minimum():
    tile, _, _ = compute_board_geometry(100, 100, 35, 35)
    assert tile == 12


def test_mouse_press_translates_to_tile_click():
    game = layout_game(["RRG", "GBY", "YGB"])
    window = DummyWindow()
    InputSystem(game.event_bus, window, game.world)
    received = {}
    game.event_bus.subscribe(EVENT_TILE_CLICK, lambda sender, **kw: received.update(kw))
    x, y = _center(window, 3, 3, 0, 1)
    game.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert received == {"row": 0, "col": 1}
    assert game.score.points == 20


def test_right_click_and_misses_are_ignored():
    game = layout_game(["RRG", "GBY", "YGB"])
    window = DummyWindow()
    InputSystem(game.event_bus, window, game.world)
    received = []
    game.event_bus.subscribe(EVENT_TILE_CLICK, lambda sender, **kw: received.append(kw))
    x, y = _center(window, 3, 3, 0, 0)
    game.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    game.event_bus.emit(EVENT_MOUSE_PRESS, x=2, y=window.height - 2, button=1)
    assert received == []


def test_rejected_click_applies_penalty_without_raising():
    game = layout_game(["RRG", "GBY", "YGB"], refill=[3])
    game.shoot(0, 0)
    window = DummyWindow()
    InputSystem(game.event_bus, window, game.world)
    x, y = _center(window, 3, 3, 2, 2)
    game.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert game.score.points == 10


def test_menu_click_does_not_shoot_the_new_board():
    game = Game(rng=SequenceRandom([1]), initial_mode=GameMode.MENU)
    window = DummyWindow()
    MenuInputSystem(game.world, game.event_bus)
    InputSystem(game.event_bus, window, game.world)
    spawn_difficulty_menu(game.world, window.width, window.height)
    clicks = []
    game.event_bus.subscribe(EVENT_TILE_CLICK, lambda sender, **kw: clicks.append(kw))
    button = next(b for _, b in game.world.get_component(MenuButton) if b.hotkey == 1)

    game.event_bus.emit(EVENT_MOUSE_PRESS, x=button.x, y=button.y, button=1, mode=GameMode.MENU)

    assert game.board.rows == 7
    assert clicks == []
    assert game.score.points == 0
