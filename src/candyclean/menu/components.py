"""Components used by the difficulty menu."""
from dataclasses import dataclass

from candyclean.config import DifficultyPreset


@dataclass
class MenuButton:
    """Interactive button displayed in the difficulty menu."""
    label: str
    preset: DifficultyPreset
    hotkey: int
    x: float
    y: float
    width: float = 320.0
    height: float = 52.0
    enabled: bool = True


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (20, 30, 50)
    title: str = "Candy Clean"


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
