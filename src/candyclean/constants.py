# ============================================================================
# BOARD BOUNDS
# ============================================================================
MIN_DIMENSIONS = 3
MAX_DIMENSIONS = 35
MIN_COLORS = 2
MAX_COLORS = 7

# Shortest run (on either axis) that leaves a special block behind.
MINIMUM_CELLS_FOR_SPECIAL = 4


# ============================================================================
# SCORING
# ============================================================================
ADDITION_SCORE = 10
DEFAULT_OBJECTIVE = 500
STREAK_BONUS_EVERY = 5
STREAK_BONUS = 1
STREAK_BIG_BONUS_EVERY = 15
STREAK_BIG_BONUS = 3


# ============================================================================
# WINDOW & LAYOUT
# ============================================================================
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 760
BOTTOM_MARGIN = 20
# Room above the board for the score line.
TOP_MARGIN = 70
MIN_TILE_SIZE = 12
TILE_PADDING = 2

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.95

# Arcade mouse button ids.
MOUSE_BUTTON_LEFT = 1
