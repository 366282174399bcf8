from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from candyclean.components.cell import Cell

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Row-major grid of cells owned by the board entity.

    color_count only drives random generation (initial fill and refill).
    """
    rows: int
    cols: int
    color_count: int
    cells: List[List[Cell]] = field(default_factory=list)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def positions(self) -> Iterator[Position]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def letters(self) -> List[str]:
        return ["".join(cell.letter for cell in line) for line in self.cells]

    def swap(self, a: Position, b: Position) -> None:
        (ar, ac), (br, bc) = a, b
        self.cells[ar][ac], self.cells[br][bc] = self.cells[br][bc], self.cells[ar][ac]
