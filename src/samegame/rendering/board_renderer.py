from __future__ import annotations

import math
from typing import TYPE_CHECKING

from samegame.components.animation_fall import FallAnimation
from samegame.components.animation_spin import SpinAnimation
from samegame.components.token import Token
from samegame.constants import TOKEN_COLORS

if TYPE_CHECKING:
    from samegame.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, tile_size: int, start_x: float, start_y: float, headless: bool) -> None:
        rs = self._rs
        world = rs.world
        fall_by_dst = {fall.dst: fall for _, fall in world.get_component(FallAnimation)}
        rs._last_tile_layout = {}

        for entity, token in world.get_component(Token):
            draw_col: float = token.x
            draw_row: float = token.y
            fall = fall_by_dst.get(token.position)
            if fall is not None:
                p = fall.linear
                p = 2 * p * p if p < 0.5 else -2 * p * p + 4 * p - 1
                draw_col = fall.src[0] + (fall.dst[0] - fall.src[0]) * p
                draw_row = fall.src[1] + (fall.dst[1] - fall.src[1]) * p
            draw_x = start_x + draw_col * tile_size + tile_size / 2
            draw_y = start_y + draw_row * tile_size + tile_size / 2
            radius = max(tile_size - self._padding, 4) / 2
            angle = 0.0
            if world.has_component(entity, SpinAnimation):
                angle = world.component_for_entity(entity, SpinAnimation).angle
            rs._last_tile_layout[token.position] = {
                "entity": entity,
                "center": (draw_x, draw_y),
                "radius": radius,
                "angle": angle,
            }
            if headless:
                continue
            color = TOKEN_COLORS.get(token.color, (200, 200, 200))
            arcade.draw_circle_filled(draw_x, draw_y, radius, color)
            # Highlight mark so rotation is visible on a plain disc.
            mark_x = draw_x + math.cos(angle) * radius * 0.55
            mark_y = draw_y + math.sin(angle) * radius * 0.55
            arcade.draw_circle_filled(mark_x, mark_y, radius * 0.22, (255, 255, 255, 150))
