from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from samegame.errors import IndexOutOfBoundsError, InvalidDimensionError

T = TypeVar("T")


class OptionalMatrix(Generic[T]):
    """Column-major grid where every cell holds a value or ``None``.

    ``x`` indexes columns (left to right), ``y`` indexes rows (bottom to top).
    The matrix only ever shrinks: compaction drops empty cells toward ``y = 0``
    and removes columns that end up empty, but every column always keeps the
    same length as the others.
    """

    __slots__ = ("_grid",)

    def __init__(self, num_cols: int, num_rows: int, init: Callable[[int, int], Optional[T]]):
        if num_cols <= 0 or num_rows <= 0:
            raise InvalidDimensionError(num_cols, num_rows)
        self._grid: List[List[Optional[T]]] = [
            [init(x, y) for y in range(num_rows)] for x in range(num_cols)
        ]

    @classmethod
    def create(cls, num_cols: int, num_rows: int, init: Callable[[int, int], Optional[T]]) -> "OptionalMatrix[T]":
        return cls(num_cols, num_rows, init)

    @property
    def num_cols(self) -> int:
        return len(self._grid)

    @property
    def num_rows(self) -> int:
        return len(self._grid[0]) if self._grid else 0

    @property
    def is_empty(self) -> bool:
        return not self._grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.num_cols and 0 <= y < self.num_rows

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexOutOfBoundsError(x, y, self.num_cols, self.num_rows)

    def get(self, x: int, y: int) -> Optional[T]:
        self._check(x, y)
        return self._grid[x][y]

    def set(self, x: int, y: int, value: Optional[T]) -> None:
        self._check(x, y)
        self._grid[x][y] = value

    def __getitem__(self, pos: Tuple[int, int]) -> Optional[T]:
        return self.get(*pos)

    def __setitem__(self, pos: Tuple[int, int], value: Optional[T]) -> None:
        self.set(pos[0], pos[1], value)

    def for_each_xy(self, visit: Callable[[int, int], None]) -> None:
        """Call visit(x, y) for every cell, empty or not."""
        for x in range(self.num_cols):
            for y in range(self.num_rows):
                visit(x, y)

    def for_each_cell(self, visit: Callable[[T], None]) -> None:
        """Call visit(value) for each occupied cell, column by column, bottom to top."""
        for column in self._grid:
            for cell in column:
                if cell is not None:
                    visit(cell)

    def cells(self) -> Iterator[Tuple[int, int, T]]:
        """Yield (x, y, value) for occupied cells in the same order as for_each_cell."""
        for x, column in enumerate(self._grid):
            for y, cell in enumerate(column):
                if cell is not None:
                    yield x, y, cell

    def all_satisfy(self, predicate: Callable[[Optional[T]], bool]) -> bool:
        return all(predicate(cell) for column in self._grid for cell in column)

    def occupied_count(self) -> int:
        return sum(1 for column in self._grid for cell in column if cell is not None)

    def columns(self) -> List[List[Optional[T]]]:
        """Return a shallow copy of the columns (bottom cell first)."""
        return [list(column) for column in self._grid]

    def compact_down_and_left(self) -> None:
        """Drop occupied cells to the bottom of their column, then excise empty columns.

        Columns are padded with empty cells up to the tallest compacted column so
        they stay equal length. A single filter removes the empty columns.
        """
        packed = [[cell for cell in column if cell is not None] for column in self._grid]
        height = max((len(column) for column in packed), default=0)
        for column in packed:
            column.extend([None] * (height - len(column)))
        self._grid = [column for column in packed if any(cell is not None for cell in column)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalMatrix):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"OptionalMatrix({self.num_cols}x{self.num_rows})"
