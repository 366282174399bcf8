from __future__ import annotations

from typing import List, Tuple

from candyclean.components.board import Board
from candyclean.components.cell import SPECIAL_MARKERS, SpecialKind
from candyclean.constants import TILE_PADDING
from candyclean.ui.layout import cell_origin

# (row, col, left, bottom, size)
TileRect = Tuple[int, int, float, float, float]


class BoardRenderer:
    """Draws the cells as filled squares, specials get their marker on top."""

    def __init__(self, padding: int = TILE_PADDING):
        self._padding = padding

    def layout(self, board: Board, tile_size: float, start_x: float, start_y: float) -> List[TileRect]:
        rects: List[TileRect] = []
        for row, col in board.positions():
            left, bottom = cell_origin(row, col, board.rows, tile_size, start_x, start_y)
            rects.append((row, col, left, bottom, tile_size))
        return rects

    def render(self, arcade, board: Board, rects: List[TileRect], headless: bool) -> None:
        if headless:
            return
        pad = self._padding
        for row, col, left, bottom, size in rects:
            cell = board.cells[row][col]
            arcade.draw_lrbt_rectangle_filled(
                left + pad,
                left + size - pad,
                bottom + pad,
                bottom + size - pad,
                cell.color.rgb,
            )
            if cell.special is SpecialKind.NONE or cell.is_blank():
                continue
            arcade.draw_lrbt_rectangle_outline(
                left + pad,
                left + size - pad,
                bottom + pad,
                bottom + size - pad,
                arcade.color.WHITE,
                border_width=2,
            )
            arcade.draw_text(
                SPECIAL_MARKERS[cell.special],
                left + size / 2,
                bottom + size / 2,
                arcade.color.BLACK,
                max(8, int(size * 0.5)),
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
