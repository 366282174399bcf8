"""Fixed color palette shared by every cell.

Tokens are compared by identity. BLACK is reserved as the empty marker and is
never produced as a playable color.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class ColorToken(Enum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def __lt__(self, other: "ColorToken") -> bool:
        if not isinstance(other, ColorToken):
            return NotImplemented
        return self.value < other.value

    @property
    def letter(self) -> str:
        return LETTERS[self.value]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return RGB[self]

    @property
    def ansi(self) -> str:
        return ANSI_BACKGROUND[self]


EMPTY = ColorToken.BLACK

# Index i of LETTERS is the letter of ColorToken(i).
LETTERS = "ERGYBPCW"
LETTER_TO_COLOR: Dict[str, ColorToken] = {letter: ColorToken(index) for index, letter in enumerate(LETTERS)}

RGB: Dict[ColorToken, Tuple[int, int, int]] = {
    ColorToken.BLACK: (0, 0, 0),
    ColorToken.RED: (200, 50, 50),
    ColorToken.GREEN: (70, 170, 70),
    ColorToken.YELLOW: (220, 200, 60),
    ColorToken.BLUE: (60, 90, 200),
    ColorToken.PURPLE: (160, 70, 170),
    ColorToken.CYAN: (60, 180, 190),
    ColorToken.WHITE: (225, 225, 225),
}

ANSI_RESET = "\u001b[0m"
ANSI_BACKGROUND: Dict[ColorToken, str] = {
    token: f"\u001b[{40 + token.value}m" for token in ColorToken
}


def color_of(code: str | int) -> ColorToken:
    """Map a letter code or a palette index to its token.

    Anything unrecognised maps to the empty token.
    """
    if isinstance(code, bool):
        return EMPTY
    if isinstance(code, int):
        if 0 <= code < len(LETTERS):
            return ColorToken(code)
        return EMPTY
    if isinstance(code, str):
        return LETTER_TO_COLOR.get(code, EMPTY)
    return EMPTY


def colors_equal(a: ColorToken, b: ColorToken) -> bool:
    return a is b


def playable_colors(color_count: int) -> list[ColorToken]:
    """Colors that random generation draws from for the given color count."""
    return [ColorToken(index) for index in range(1, color_count + 1)]
