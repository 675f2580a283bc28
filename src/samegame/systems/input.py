from samegame.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_NEW_GAME_REQUEST,
    EVENT_DEBUG_DUMP_REQUEST,
)
from samegame.constants import GRID_COLS, GRID_ROWS
from samegame.ui.layout import pixel_to_cell, score_label_rect
from samegame.world import get_game_state

class InputSystem:
    """Translates raw mouse presses into board commands.

    controller is optional; without it the dealt size falls back to the default grid.
    """
    def __init__(self, event_bus: EventBus, window, world=None, controller=None):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.controller = controller
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button only (arcade.MOUSE_BUTTON_LEFT == 1).
        if button != 1:
            return
        left, bottom, width, height = score_label_rect(self.window.width, self.window.height)
        if left <= x <= left + width and bottom <= y <= bottom + height:
            self.event_bus.emit(EVENT_DEBUG_DUMP_REQUEST)
            return
        # A press during game over deals a new board, then acts on it like any other press.
        if self._game_over():
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        cols, rows = self._dealt_size()
        cell = pixel_to_cell(x, y, self.window.width, self.window.height, cols, rows)
        if cell is None:
            return
        self.event_bus.emit(EVENT_TILE_CLICK, x=cell[0], y=cell[1])

    def _game_over(self) -> bool:
        if self.world is None:
            return False
        return get_game_state(self.world).game_over

    def _dealt_size(self):
        if self.controller is None:
            return GRID_COLS, GRID_ROWS
        return self.controller.dealt_size
