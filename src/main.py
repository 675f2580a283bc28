"""Entry point for the SameGame board.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from samegame.world import create_world
from samegame.constants import GRID_ROWS, GRID_COLS
from samegame.events.bus import EVENT_TICK, EventBus, EVENT_MOUSE_PRESS
from samegame.systems.animation import AnimationSystem
from samegame.systems.game_controller import GameController
from samegame.systems.input import InputSystem
from samegame.systems.render import RenderSystem

class SameGameWindow(Window):
    def __init__(self):
        super().__init__(1024, 768, "SameGame")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Board systems
        self.game_controller = GameController(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus)

        # Interface systems
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.game_controller)
        self.input_system = InputSystem(self.event_bus, self, self.world, self.game_controller)

        set_background_color(color.BLACK)
        self.game_controller.start_game(GRID_COLS, GRID_ROWS)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = SameGameWindow()
    run()

if __name__ == "__main__":
    main()
