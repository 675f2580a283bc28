from __future__ import annotations

from typing import Dict, Sequence, Tuple

from samegame.components.matrix import OptionalMatrix
from samegame.components.token import Token
from samegame.events.bus import EventBus
from samegame.systems.game_controller import GameController
from samegame.world import create_world


class DummyWindow:
    def __init__(self, width=1024, height=768):
        self.width = width
        self.height = height


def layout_dealer(colors: Dict[Tuple[int, int], str]):
    """Dealer returning the color listed for each (x, y)."""
    return lambda x, y: colors[(x, y)]


def columns_dealer(columns: Sequence[str]):
    """Dealer from strings, one per column, bottom cell first: ["RR", "RB"].

    A deal fills every cell, so '.' is rejected rather than dealt as a color.
    """
    if any('.' in column for column in columns):
        raise ValueError(f"Dealt columns cannot contain empty cells: {list(columns)}")
    return lambda x, y: columns[x][y]


def matrix_from_columns(columns: Sequence[str | Sequence[str | None]]) -> OptionalMatrix[Token]:
    """Build a token matrix from per-column color strings; '.' or None is an empty cell."""
    def _init(x, y):
        color = columns[x][y]
        if color is None or color == '.':
            return None
        return Token(color=color, x=x, y=y)
    return OptionalMatrix.create(len(columns), len(columns[0]), _init)


def colors_of(matrix: OptionalMatrix[Token]) -> list[str]:
    """Per-column color strings, '.' for empty cells."""
    return [''.join('.' if cell is None else cell.color for cell in column) for column in matrix.columns()]


def make_game(columns: Sequence[str]):
    dealer = columns_dealer(columns)
    bus = EventBus()
    world = create_world(bus)
    controller = GameController(world, bus)
    controller.start_game(len(columns), len(columns[0]), palette=sorted(set(''.join(columns))),
                          dealer=dealer)
    return bus, world, controller
