"""Configuration helpers for Candy Clean."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from candyclean.constants import DEFAULT_OBJECTIVE, WINDOW_HEIGHT, WINDOW_WIDTH


@dataclass(frozen=True)
class DifficultyPreset:
    """Board size, color count and score objective for one difficulty level."""

    name: str
    dimensions: int
    colors: int
    objective: int


PRESETS: Tuple[DifficultyPreset, ...] = (
    DifficultyPreset("Easy", 7, 3, 100),
    DifficultyPreset("Medium", 12, 3, 200),
    DifficultyPreset("Hard", 15, 4, 350),
    DifficultyPreset("Very Hard", 18, 5, 500),
    DifficultyPreset("Extreme", 21, 6, 900),
    DifficultyPreset("Insane", 30, 7, 1900),
)


# Built-in 15x15 board, 4 colors, objective 80.
DEMO_LAYOUT: Tuple[str, ...] = (
    "GBBBBBBBBBBBBBR",
    "GRRRRRRRRRRRRPR",
    "GRRRPPPPPPPRPRR",
    "GRRRPRRRRRRPRRR",
    "GRRRPRRRRRPRRRR",
    "GRRRPRRRRPRRRRR",
    "GRRRPRRRPRRRRRR",
    "GRRRPRRPRRRRRRR",
    "GRRRPRPRRRRRRRR",
    "GRRRRPRRRRRRRRR",
    "GRRRPRRRRRRRRRR",
    "GRRPRRRRRRRRRRR",
    "GRPRRRRRRRRRRRR",
    "GPRRRRRRRRRRRRR",
    "RRRRRRRRRRRRRRR",
)
DEMO_COLORS = 4
DEMO_OBJECTIVE = 80


def preset_slug(preset: DifficultyPreset) -> str:
    return preset.name.lower().replace(" ", "-")


def preset_by_name(name: str) -> DifficultyPreset:
    """Look a preset up by display name or slug, ignoring case."""

    wanted = name.strip().lower().replace("_", "-")
    for preset in PRESETS:
        if wanted in (preset.name.lower(), preset_slug(preset)):
            return preset
    raise ValueError(f"Unknown difficulty '{name}'")


@dataclass(frozen=True)
class DisplayConfig:
    """Visual settings for the arcade window."""

    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    caption: str = "Candy Clean"


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration structure for one session."""

    preset: Optional[DifficultyPreset] = None
    size: Optional[int] = None
    colors: Optional[int] = None
    objective: Optional[int] = None
    seed: Optional[int] = None
    demo: bool = False
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def resolved(self) -> Optional[DifficultyPreset]:
        """Combine the preset with explicit overrides; None means ask the player."""

        base = self.preset
        if base is None:
            if self.size is None and self.colors is None:
                return None
            base = replace(PRESETS[0], name="Custom", objective=DEFAULT_OBJECTIVE)
        return replace(
            base,
            dimensions=self.size if self.size is not None else base.dimensions,
            colors=self.colors if self.colors is not None else base.colors,
            objective=self.objective if self.objective is not None else base.objective,
        )

    def menu_presets(self, presets: Sequence[DifficultyPreset] = PRESETS) -> Tuple[DifficultyPreset, ...]:
        """Presets offered by the menus, with the objective override applied."""

        if self.objective is None:
            return tuple(presets)
        return tuple(replace(preset, objective=self.objective) for preset in presets)

    def demo_objective(self) -> int:
        return self.objective if self.objective is not None else DEMO_OBJECTIVE
