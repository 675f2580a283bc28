"""Exceptions raised by the board engine."""


class SameGameError(Exception):
    """Base class for board engine errors."""


class InvalidDimensionError(SameGameError, ValueError):
    """Raised when a board is requested with a non-positive size or no colors."""

    def __init__(self, num_cols: int, num_rows: int, message: str | None = None):
        self.num_cols = num_cols
        self.num_rows = num_rows
        super().__init__(message or f"Board dimensions must be positive, got {num_cols}x{num_rows}")


class IndexOutOfBoundsError(SameGameError, IndexError):
    """Raised for a coordinate outside the current board."""

    def __init__(self, x: int, y: int, num_cols: int, num_rows: int):
        self.x = x
        self.y = y
        self.num_cols = num_cols
        self.num_rows = num_rows
        super().__init__(f"Cell ({x}, {y}) outside board of {num_cols}x{num_rows}")
