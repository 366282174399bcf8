import random

from candyclean.components.cell import Cell, SpecialKind
from candyclean.components.color import EMPTY, ColorToken

from tests.helpers import SequenceRandom


def test_default_cell_is_blank():
    cell = Cell()
    assert cell.is_blank()
    assert not cell.is_special()
    assert cell.letter == "E"


def test_set_to_blank_drops_special():
    cell = Cell(ColorToken.RED, SpecialKind.ROW)
    cell.set_to_blank()
    assert cell.color is EMPTY
    assert cell.special is SpecialKind.NONE


def test_color_equals_requires_same_special_status():
    plain = Cell(ColorToken.RED)
    other_plain = Cell(ColorToken.RED)
    row_special = Cell(ColorToken.RED, SpecialKind.ROW)
    column_special = Cell(ColorToken.RED, SpecialKind.COLUMN)
    assert plain.color_equals(other_plain)
    assert not plain.color_equals(row_special)
    assert row_special.color_equals(column_special)
    assert not plain.color_equals(Cell(ColorToken.BLUE))


def test_blank_cells_never_match():
    assert not Cell().color_equals(Cell())
    assert not Cell().color_equals(Cell(ColorToken.RED))


def test_random_cell_draws_playable_index():
    rng = SequenceRandom([1, 3])
    assert Cell.random(rng, 3).color is ColorToken.RED
    assert Cell.random(rng, 3).color is ColorToken.YELLOW


def test_random_cell_range_never_includes_empty():
    rng = random.Random(7)
    drawn = {Cell.random(rng, 2).color for _ in range(200)}
    assert drawn == {ColorToken.RED, ColorToken.GREEN}
