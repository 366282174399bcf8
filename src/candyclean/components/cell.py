from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

from candyclean.components.color import EMPTY, ColorToken, color_of


class SpecialKind(Enum):
    """Detonation pattern carried by a cell."""
    NONE = auto()
    ROW = auto()
    COLUMN = auto()
    ROW_AND_COLUMN = auto()
    ALL_BOARD = auto()


SPECIAL_MARKERS = {
    SpecialKind.NONE: " ",
    SpecialKind.ROW: "-",
    SpecialKind.COLUMN: "|",
    SpecialKind.ROW_AND_COLUMN: "+",
    SpecialKind.ALL_BOARD: "*",
}


@dataclass(slots=True)
class Cell:
    """Single board slot.

    A cell whose color is the empty token is blank whatever its special kind;
    clearing always drops the special kind back to NONE.
    """
    color: ColorToken = EMPTY
    special: SpecialKind = SpecialKind.NONE

    @classmethod
    def from_letter(cls, letter: str) -> "Cell":
        return cls(color=color_of(letter))

    @classmethod
    def random(cls, rng: random.Random, color_count: int) -> "Cell":
        # Indices 1..color_count; 0 is the reserved empty token.
        return cls(color=color_of(rng.randrange(1, color_count + 1)))

    @property
    def letter(self) -> str:
        return self.color.letter

    def is_blank(self) -> bool:
        return self.color is EMPTY

    def is_special(self) -> bool:
        return self.special is not SpecialKind.NONE

    def set_to_blank(self) -> None:
        self.color = EMPTY
        self.special = SpecialKind.NONE

    def color_equals(self, other: "Cell") -> bool:
        """Run-walking equality: same token and same special/plain status.

        Blank cells never extend a run.
        """
        if self.is_blank() or other.is_blank():
            return False
        return self.color is other.color and self.is_special() == other.is_special()
