from samegame.constants import (
    GRID_COLS, GRID_ROWS, TILE_SIZE, BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT,
    SCORE_LABEL_RIGHT_MARGIN, SCORE_LABEL_TOP_MARGIN, SCORE_LABEL_WIDTH, SCORE_LABEL_HEIGHT,
)

def compute_board_geometry(window_width: int, window_height: int, cols: int = GRID_COLS, rows: int = GRID_ROWS):
    """Return (tile_size, start_x, start_y) for a board dealt at cols x rows.

    Geometry follows the dealt size, not the shrinking matrix, so tokens keep
    their screen size and the board stays anchored bottom-left as columns go.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w / max(cols, 1), max_board_h / max(rows, 1), TILE_SIZE))
    if tile_size < 12:
        tile_size = 12
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def pixel_to_cell(x: float, y: float, window_width: int, window_height: int,
                  cols: int = GRID_COLS, rows: int = GRID_ROWS):
    """Map a window point to (col, row) on the dealt grid, or None when outside it."""
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, cols, rows)
    if x < start_x or x >= start_x + cols * tile_size:
        return None
    if y < start_y or y >= start_y + rows * tile_size:
        return None
    return int((x - start_x) // tile_size), int((y - start_y) // tile_size)


def cell_center(col: float, row: float, window_width: int, window_height: int,
                cols: int = GRID_COLS, rows: int = GRID_ROWS):
    tile_size, start_x, start_y = compute_board_geometry(window_width, window_height, cols, rows)
    return start_x + col * tile_size + tile_size / 2, start_y + row * tile_size + tile_size / 2


def score_label_rect(window_width: int, window_height: int):
    """(left, bottom, width, height) of the score label in the top-right corner."""
    left = window_width - SCORE_LABEL_RIGHT_MARGIN - SCORE_LABEL_WIDTH
    bottom = window_height - SCORE_LABEL_TOP_MARGIN
    return left, bottom, SCORE_LABEL_WIDTH, SCORE_LABEL_HEIGHT
