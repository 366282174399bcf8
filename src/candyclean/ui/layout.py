from typing import Optional, Tuple

from candyclean.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    MIN_TILE_SIZE,
    TOP_MARGIN,
)


def compute_board_geometry(window_width: float, window_height: float, rows: int, cols: int):
    """Return (tile_size, start_x, start_y) for a board of rows x cols.

    start_x/start_y is the bottom-left corner of the board. Shared by the
    renderer and the input mapping so clicks land on the drawn cells.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_origin(row: int, col: int, rows: int, tile_size: float, start_x: float, start_y: float) -> Tuple[float, float]:
    """Bottom-left corner of a cell. Row 0 is drawn at the top of the board."""
    left = start_x + col * tile_size
    bottom = start_y + (rows - 1 - row) * tile_size
    return left, bottom


def cell_at_point(
    x: float,
    y: float,
    window_width: float,
    window_height: float,
    rows: int,
    cols: int,
) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row = rows - 1 - int((y - start_y) // tile_size)
    if 0 <= row < rows and 0 <= col < cols:
        return row, col
    return None
