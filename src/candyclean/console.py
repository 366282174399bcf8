"""Text-mode shell: the board is printed with ANSI colors and shots are typed in."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence, TextIO

from candyclean.config import PRESETS, DifficultyPreset
from candyclean.errors import ShootError
from candyclean.game import Game

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


class ConsoleShell:
    """Runs one game on the given streams until it is won or abandoned."""

    def __init__(self, game: Game, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.game = game
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def run(self) -> bool:
        """Return True when the objective was reached, False when the player left."""
        self._write("Welcome to the Candy Clean Game!\n")
        logger.debug("Starting board: %s", self.game.debug_dump())
        while True:
            self._write(self.game.render())
            if not self.game.has_any_move():
                self._write("No block can be shot right now, keep trying or quit.\n")
            row = self._read_int("Introduce a row to shoot: ")
            if row is None:
                return False
            col = self._read_int("Introduce a column to shoot: ")
            if col is None:
                return False
            try:
                self.game.shoot(row, col)
                logger.debug("Valid shot at (%d, %d)", row, col)
            except ShootError as exc:
                logger.warning("%s", exc)
                self._write(f"{exc}\n")
            if self.game.is_objective_reached():
                self._write("You won\n")
                self._write(self.game.render())
                return True

    def _read_int(self, prompt: str) -> Optional[int]:
        """Prompt until a number is typed; None on end of input or a quit word."""
        while True:
            self._write(prompt)
            line = self.stdin.readline()
            if not line:
                return None
            text = line.strip()
            if text.lower() in QUIT_WORDS:
                return None
            try:
                return int(text)
            except ValueError:
                self._write(f"{text} is not a number.\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()


def choose_preset(
    stdin: TextIO,
    stdout: TextIO,
    presets: Sequence[DifficultyPreset] = PRESETS,
) -> Optional[DifficultyPreset]:
    """Ask for a difficulty level; None when the player picks 0 or input ends."""
    lines = ["What level do you want to play? Select an option", "0 - Exit"]
    lines.extend(f"{index} - {preset.name}" for index, preset in enumerate(presets, start=1))
    while True:
        stdout.write("\n".join(lines) + "\n")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        text = line.strip()
        try:
            option = int(text)
        except ValueError:
            stdout.write(f"{text} is not a number.\n")
            continue
        if option == 0:
            return None
        if 1 <= option <= len(presets):
            return presets[option - 1]
        stdout.write(f"{option} is not an option.\n")
