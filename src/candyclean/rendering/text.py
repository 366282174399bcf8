"""Console rendering of the board with ANSI background colors."""
from __future__ import annotations

from typing import List, Optional

from candyclean.components.board import Board
from candyclean.components.cell import SPECIAL_MARKERS, Cell
from candyclean.components.color import ANSI_RESET
from candyclean.components.score import ScoreState


def render_cell(cell: Cell) -> str:
    marker = SPECIAL_MARKERS[cell.special]
    return f"{cell.color.ansi}{marker * 2}{ANSI_RESET}"


def render_board_text(board: Board, score: Optional[ScoreState] = None) -> str:
    """Return the board with row and column indices, one line per row."""
    lines: List[str] = []
    if score is not None:
        lines.append(score.describe())
        lines.append("")

    if board.cols > 10:
        tens = ["  "]
        for col in range(board.cols):
            if col == 10:
                tens.append("|")
            tens.append(f"{col // 10}|" if col >= 10 else "  ")
        lines.append("".join(tens))

    lines.append("  " + "".join(f"|{col % 10}" for col in range(board.cols)) + "|")

    for row, line in enumerate(board.cells):
        cells = "".join(render_cell(cell) for cell in line)
        lines.append(f"{row:>2}|{cells}")
    return "\n".join(lines) + "\n"
