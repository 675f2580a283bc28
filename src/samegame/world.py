import random

from esper import World
from .events.bus import EventBus
from samegame.components.game_state import GameState


def create_world(event_bus: EventBus, rng: random.Random | None = None) -> World:
    """Create the esper world holding the singleton GameState.

    The event bus is accepted for symmetry with the systems' constructors; the
    board itself is created by GameController.start_game.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(GameState())
    return world


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    state = GameState()
    world.create_entity(state)
    return state
