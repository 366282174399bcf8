from dataclasses import dataclass

from candyclean.constants import (
    ADDITION_SCORE,
    DEFAULT_OBJECTIVE,
    STREAK_BIG_BONUS,
    STREAK_BIG_BONUS_EVERY,
    STREAK_BONUS,
    STREAK_BONUS_EVERY,
)


@dataclass
class ScoreState:
    """Points, objective, multiplier and hit streak of the current game.

    Knows nothing about the board; ScoreSystem feeds it board outcomes.
    """
    objective: int = DEFAULT_OBJECTIVE
    points: int = 0
    multiplier: int = 1
    streak: int = 0
    addition: int = ADDITION_SCORE

    def add_points(self, cells: int = 1) -> int:
        if cells <= 0:
            return 0
        gained = self.addition * self.multiplier * cells
        self.points += gained
        return gained

    def advance_streak(self) -> None:
        self.streak += 1
        # Both bonuses apply when both moduli hit.
        if self.streak % STREAK_BONUS_EVERY == 0:
            self.multiplier += STREAK_BONUS
        if self.streak % STREAK_BIG_BONUS_EVERY == 0:
            self.multiplier += STREAK_BIG_BONUS

    def penalize(self) -> int:
        self.multiplier = 1
        self.streak = 0
        before = self.points
        self.points = max(0, self.points - self.addition)
        return self.points - before

    def is_objective_reached(self) -> bool:
        return self.points >= self.objective

    def describe(self) -> str:
        return (
            f"Score = {self.points}  Objective = {self.objective}  "
            f"Multiplier = x{self.multiplier}  Current streak = {self.streak}"
        )
