import pytest

from candyclean.config import DEMO_LAYOUT, PRESETS, DisplayConfig, GameConfig, preset_by_name, preset_slug
from candyclean.constants import DEFAULT_OBJECTIVE


def test_presets_table():
    summary = [(p.name, p.dimensions, p.colors, p.objective) for p in PRESETS]
    assert summary == [
        ("Easy", 7, 3, 100),
        ("Medium", 12, 3, 200),
        ("Hard", 15, 4, 350),
        ("Very Hard", 18, 5, 500),
        ("Extreme", 21, 6, 900),
        ("Insane", 30, 7, 1900),
    ]


def test_preset_lookup_by_name_or_slug():
    assert preset_by_name("very-hard").name == "Very Hard"
    assert preset_by_name("Very Hard").dimensions == 18
    assert preset_by_name("EASY") is PRESETS[0]
    assert preset_slug(PRESETS[3]) == "very-hard"
    with pytest.raises(ValueError):
        preset_by_name("nightmare")


def test_empty_config_defers_to_menu():
    assert GameConfig().resolved() is None


def test_overrides_apply_on_top_of_preset():
    config = GameConfig(preset=preset_by_name("hard"), colors=6, objective=50)
    resolved = config.resolved()
    assert (resolved.name, resolved.dimensions, resolved.colors, resolved.objective) == ("Hard", 15, 6, 50)


def test_custom_config_without_preset():
    resolved = GameConfig(size=10).resolved()
    assert resolved.name == "Custom"
    assert resolved.dimensions == 10
    assert resolved.colors == PRESETS[0].colors
    assert resolved.objective == DEFAULT_OBJECTIVE


def test_display_defaults():
    display = DisplayConfig()
    assert (display.width, display.height) == (900, 760)
    assert display.caption == "Candy Clean"


def test_objective_override_reaches_menu_presets():
    config = GameConfig(objective=30)
    assert config.resolved() is None
    presets = config.menu_presets()
    assert [p.objective for p in presets] == [30] * len(PRESETS)
    assert [p.dimensions for p in presets] == [p.dimensions for p in PRESETS]
    assert GameConfig().menu_presets() == PRESETS


def test_demo_layout_is_square_board():
    assert len(DEMO_LAYOUT) == 15
    assert {len(row) for row in DEMO_LAYOUT} == {15}
    assert GameConfig(demo=True).demo_objective() == 80
    assert GameConfig(demo=True, objective=10).demo_objective() == 10
