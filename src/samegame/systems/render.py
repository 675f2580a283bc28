from esper import World

from samegame.events.bus import EventBus, EVENT_GAME_OVER, EVENT_GAME_STARTED
from samegame.rendering.board_renderer import BoardRenderer
from samegame.ui.layout import compute_board_geometry, score_label_rect
from samegame.world import get_game_state

PADDING = 4

class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, controller=None):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.controller = controller
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)
        self.show_game_over = False
        self._last_tile_layout: dict[tuple[int, int], dict] = {}
        self._board_renderer = BoardRenderer(self, padding=PADDING)

    def on_game_over(self, sender, **kwargs):
        self.show_game_over = True

    def on_game_started(self, sender, **kwargs):
        self.show_game_over = bool(kwargs.get('game_over'))

    def score_text(self) -> str:
        return f"Score: {get_game_state(self.world).total_score}"

    def tile_layout(self):
        return dict(self._last_tile_layout)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: with no active Arcade window, skip draw calls but still build layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if self.controller is not None:
            cols, rows = self.controller.dealt_size
            tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height, cols, rows)
        else:
            tile_size, start_x, start_y = compute_board_geometry(self.window.width, self.window.height)
        self._board_renderer.render(arcade, tile_size, start_x, start_y, headless)
        if headless:
            return
        left, bottom, width, height = score_label_rect(self.window.width, self.window.height)
        arcade.draw_text(
            self.score_text(),
            left + width,
            bottom + height / 2,
            arcade.color.WHITE,
            22,
            anchor_x="right",
            anchor_y="center",
        )
        if self.show_game_over:
            cx = self.window.width / 2
            cy = self.window.height / 2
            arcade.draw_lrbt_rectangle_filled(cx - 220, cx + 220, cy - 60, cy + 60, (0, 0, 0, 200))
            arcade.draw_text("GAME OVER", cx, cy + 12, arcade.color.WHITE, 40, anchor_x="center", anchor_y="center")
            arcade.draw_text("Click to play again", cx, cy - 32, arcade.color.LIGHT_GRAY, 16,
                             anchor_x="center", anchor_y="center")
