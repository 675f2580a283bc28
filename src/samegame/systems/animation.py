from typing import Iterable, Tuple

from esper import World

from samegame.components.animation_fall import FallAnimation
from samegame.components.animation_spin import SpinAnimation
from samegame.components.board import Board
from samegame.constants import FALL_DURATION, SPIN_DAMPING, SPIN_STOP_VELOCITY, SPIN_VELOCITY
from samegame.events.bus import (
    EventBus,
    EVENT_TICK,
    EVENT_CLUSTER_SELECTED,
    EVENT_CLUSTER_DESELECTED,
    EVENT_GRAVITY_APPLIED,
    EVENT_GAME_STARTED,
)

class AnimationSystem:
    """Presentation-only state: selection spin and falling tokens.

    Reads board positions but never changes tokens, clusters or score.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_CLUSTER_SELECTED, self.on_cluster_selected)
        event_bus.subscribe(EVENT_CLUSTER_DESELECTED, self.on_cluster_deselected)
        event_bus.subscribe(EVENT_GRAVITY_APPLIED, self.on_gravity_applied)
        event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)

    def on_cluster_selected(self, sender, **kwargs):
        if not kwargs.get('active'):
            return
        for entity in self._entities_at(kwargs.get('positions', [])):
            if self.world.has_component(entity, SpinAnimation):
                spin = self.world.component_for_entity(entity, SpinAnimation)
                spin.velocity = SPIN_VELOCITY
                spin.damping = 0.0
            else:
                self.world.add_component(entity, SpinAnimation(velocity=SPIN_VELOCITY))

    def on_cluster_deselected(self, sender, **kwargs):
        for entity in self._entities_at(kwargs.get('positions', [])):
            if self.world.has_component(entity, SpinAnimation):
                self.world.component_for_entity(entity, SpinAnimation).damping = SPIN_DAMPING

    def on_gravity_applied(self, sender, **kwargs):
        for move in kwargs.get('moves', []):
            self.world.create_entity(FallAnimation(src=move['from'], dst=move['to'], color=move['color']))

    def on_game_started(self, sender, **kwargs):
        for entity, _ in list(self.world.get_component(FallAnimation)):
            self.world.delete_entity(entity, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for entity, spin in list(self.world.get_component(SpinAnimation)):
            spin.angle += spin.velocity * dt
            if spin.damping > 0:
                spin.velocity -= spin.velocity * min(1.0, spin.damping * dt)
                if abs(spin.velocity) < SPIN_STOP_VELOCITY:
                    self.world.remove_component(entity, SpinAnimation)
        for entity, fall in list(self.world.get_component(FallAnimation)):
            fall.linear = min(1.0, fall.linear + dt / FALL_DURATION)
            if fall.linear >= 1.0:
                self.world.delete_entity(entity, immediate=True)

    def _entities_at(self, positions: Iterable[Tuple[int, int]]):
        board = None
        for _, comp in self.world.get_component(Board):
            board = comp
            break
        if board is None:
            return []
        entities = []
        for x, y in positions:
            if not board.matrix.in_bounds(x, y):
                continue
            token = board.matrix.get(x, y)
            if token is not None:
                entities.append(token.entity)
        return entities
