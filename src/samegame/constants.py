GRID_COLS = 21
GRID_ROWS = 14
TILE_SIZE = 46
BOTTOM_MARGIN = 50

# Default palette: color label -> RGB used by the renderer.
TOKEN_COLORS = {
    'purple': (128, 64, 170),
    'cyan':   (60, 190, 210),
    'green':  (70, 170, 80),
    'yellow': (225, 200, 70),
    'red':    (200, 60, 60),
}
DEFAULT_PALETTE = tuple(TOKEN_COLORS.keys())

# Scoring: removing n tokens earns n*n; while fewer than BONUS_THRESHOLD tokens
# remain the bonus is (BONUS_THRESHOLD - remaining) * BONUS_MULTIPLIER.
MIN_REMOVABLE_CLUSTER = 2
BONUS_THRESHOLD = 50
BONUS_MULTIPLIER = 100

# Redeal attempts when a playable initial board is requested.
MAX_DEAL_ATTEMPTS = 200

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.85

# Score label anchored to the top-right corner.
SCORE_LABEL_RIGHT_MARGIN = 44
SCORE_LABEL_TOP_MARGIN = 68
SCORE_LABEL_WIDTH = 240
SCORE_LABEL_HEIGHT = 36

# Selection spin (radians per second) and the damping applied once deselected.
SPIN_VELOCITY = 5.0
SPIN_DAMPING = 3.0
SPIN_STOP_VELOCITY = 0.05
FALL_DURATION = 0.18
