import pytest

from candyclean.components.cell import SpecialKind
from candyclean.errors import NoMatch, OutOfBounds, ShootError
from candyclean.events.bus import (
    EVENT_BOARD_REFILLED,
    EVENT_CELLS_CLEARED,
    EVENT_SHOOT_REJECTED,
    EVENT_SHOOT_RESOLVED,
    EVENT_SPECIAL_DETONATED,
    EVENT_SPECIAL_SPAWNED,
    EventBus,
)

from tests.helpers import layout_game, place_special, specials


def _capture(bus, name):
    received = []

    def handler(sender, **payload):
        received.append(payload)

    bus.subscribe(name, handler)
    return received


def test_isolated_cell_is_rejected():
    game = layout_game(["RGB", "RBY", "GYB"])
    with pytest.raises(NoMatch) as excinfo:
        game.shoot(0, 1)
    assert excinfo.value.reason == "no_match"
    assert game.board.letters() == ["RGB", "RBY", "GYB"]


@pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 1), (1, -1)])
def test_out_of_bounds_is_rejected(row, col):
    game = layout_game(["RGB", "RBY", "GYB"])
    with pytest.raises(OutOfBounds) as excinfo:
        game.shoot(row, col)
    assert isinstance(excinfo.value, ShootError)
    assert (excinfo.value.row, excinfo.value.col) == (row, col)
    assert game.board.letters() == ["RGB", "RBY", "GYB"]


def test_rejected_shot_applies_penalty():
    bus = EventBus()
    rejected = _capture(bus, EVENT_SHOOT_REJECTED)
    game = layout_game(["RRG", "GBY", "YGB"], refill=[3], event_bus=bus)
    game.shoot(0, 0)
    assert game.score.points == 20
    assert game.score.streak == 1

    with pytest.raises(NoMatch):
        game.shoot(2, 2)
    assert game.score.points == 10
    assert game.score.streak == 0
    assert game.score.multiplier == 1
    assert rejected == [{"row": 2, "col": 2, "reason": "no_match"}]


def test_penalty_never_goes_negative():
    game = layout_game(["RGB", "RBY", "GYB"])
    with pytest.raises(ShootError):
        game.shoot(5, 5)
    assert game.score.points == 0


def test_horizontal_run_compacts_and_refills():
    game = layout_game(["RGY", "BBY", "RGG"], refill=[6], color_count=6)
    outcome = game.shoot(1, 0)
    assert outcome.cleared == [(1, 0), (1, 1)]
    assert outcome.spawned is None
    assert outcome.refilled == [(0, 0), (0, 1)]
    assert game.board.letters() == ["CCY", "RGY", "RGG"]
    assert game.score.points == 20


def test_vertical_run_settles_column():
    game = layout_game(["RGB", "YGB", "YRR"], refill=[4])
    outcome = game.shoot(1, 0)
    assert outcome.cleared == [(1, 0), (2, 0)]
    assert game.board.letters() == ["BGB", "BGB", "RRR"]


def test_cross_run_credits_shared_cell_once():
    game = layout_game(["GRBY", "RRRG", "GRBY", "YBGB"], refill=[3])
    outcome = game.shoot(1, 1)
    assert sorted(outcome.cleared) == [(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)]
    assert game.score.points == 50
    assert not any(cell.is_blank() for line in game.board.cells for cell in line)


def test_full_row_spawns_row_special():
    bus = EventBus()
    spawned = _capture(bus, EVENT_SPECIAL_SPAWNED)
    game = layout_game(["RRRRR", "BBRRR", "BBBBB", "GGBBB", "BBGGG"], event_bus=bus)
    outcome = game.shoot(0, 0)
    assert outcome.spawned is SpecialKind.ROW
    assert specials(game.board) == {(0, 0): SpecialKind.ROW}
    assert game.board.cells[0][0].letter == "R"
    assert spawned[0]["kind"] is SpecialKind.ROW
    assert not any(cell.is_blank() for line in game.board.cells for cell in line)
    assert game.has_any_move()
    assert game.score.points == 50


def test_cross_of_four_spawns_row_and_column_special():
    game = layout_game(["GBRGB", "BGRBG", "RRRRG", "GBRGB", "BGBGB"])
    outcome = game.shoot(2, 2)
    assert outcome.spawned is SpecialKind.ROW_AND_COLUMN
    assert len(outcome.cleared) == 7
    assert list(specials(game.board).values()) == [SpecialKind.ROW_AND_COLUMN]
    assert not any(cell.is_blank() for line in game.board.cells for cell in line)


def test_row_special_sweeps_its_row():
    bus = EventBus()
    detonated = _capture(bus, EVENT_SPECIAL_DETONATED)
    game = layout_game(["RGB", "YRG", "BYR"], refill=[3], event_bus=bus)
    place_special(game.board, 1, 1, SpecialKind.ROW)
    outcome = game.shoot(1, 1)
    assert sorted(outcome.cleared) == [(1, 0), (1, 1), (1, 2)]
    assert outcome.detonations == 1
    assert detonated[0]["kind"] is SpecialKind.ROW
    assert game.board.letters() == ["YYY", "RGB", "BYR"]
    assert specials(game.board) == {}
    assert game.score.points == 30


def test_column_special_sweeps_its_column():
    game = layout_game(["RGB", "YRG", "BYR"], refill=[2])
    place_special(game.board, 0, 2, SpecialKind.COLUMN)
    outcome = game.shoot(0, 2)
    assert sorted(outcome.cleared) == [(0, 2), (1, 2), (2, 2)]
    assert game.board.letters() == ["RGG", "YRG", "BYG"]


def test_nested_specials_chain_once_each():
    bus = EventBus()
    cleared = _capture(bus, EVENT_CELLS_CLEARED)
    resolved = _capture(bus, EVENT_SHOOT_RESOLVED)
    game = layout_game(["RGB", "YRG", "BYR"], refill=[4], event_bus=bus)
    place_special(game.board, 1, 1, SpecialKind.ROW)
    place_special(game.board, 1, 2, SpecialKind.COLUMN)
    outcome = game.shoot(1, 1)
    assert outcome.detonations == 2
    assert sorted(outcome.cleared) == [(0, 2), (1, 0), (1, 1), (1, 2), (2, 2)]
    assert sum(len(payload["positions"]) for payload in cleared) == 5
    assert game.board.letters() == ["BBB", "RGB", "BYB"]
    assert game.score.points == 50
    # Nested detonations do not count as separate shots.
    assert len(resolved) == 1
    assert game.score.streak == 1


def test_specials_pointing_at_each_other_terminate():
    game = layout_game(["RGB", "YRG", "BYR"], refill=[3])
    place_special(game.board, 1, 0, SpecialKind.ROW_AND_COLUMN)
    place_special(game.board, 1, 2, SpecialKind.ROW_AND_COLUMN)
    place_special(game.board, 0, 0, SpecialKind.ROW)
    outcome = game.shoot(1, 0)
    assert outcome.detonations == 3
    assert len(outcome.cleared) == len(set(outcome.cleared))
    assert not any(cell.is_blank() for line in game.board.cells for cell in line)


def test_full_cross_spawns_all_board_and_clears_everything():
    bus = EventBus()
    refilled = _capture(bus, EVENT_BOARD_REFILLED)
    game = layout_game(["RRR", "RRR", "RRR"], refill=[3], event_bus=bus)
    outcome = game.shoot(1, 1)
    assert outcome.spawned is SpecialKind.ALL_BOARD
    # The special falls to the bottom row and both blanks above it refill.
    assert game.board.letters() == ["YYY", "RYR", "RRR"]
    assert specials(game.board) == {(2, 1): SpecialKind.ALL_BOARD}
    assert game.score.points == 50

    outcome = game.shoot(2, 1)
    assert len(outcome.cleared) == 9
    assert outcome.refilled == [(row, col) for row in range(3) for col in range(3)]
    assert game.board.letters() == ["YYY", "YYY", "YYY"]
    assert game.score.points == 140
    assert game.score.streak == 2
    assert len(refilled) == 2


def test_streak_multiplier_applies_to_later_shots():
    game = layout_game(["RRG", "GBY", "YGB"], refill=[1, 1, 2, 3, 4])
    game.score.streak = 4
    game.shoot(0, 0)
    assert game.score.multiplier == 2
    assert game.score.points == 20
