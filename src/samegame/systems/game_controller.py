from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from esper import World

from samegame.components.board import Board
from samegame.components.cluster_registry import ClusterInfo, ClusterRegistry
from samegame.components.game_state import GameMode, GameState
from samegame.components.matrix import OptionalMatrix
from samegame.components.token import Token, TokenView
from samegame.constants import DEFAULT_PALETTE, GRID_COLS, GRID_ROWS, MAX_DEAL_ATTEMPTS
from samegame.errors import IndexOutOfBoundsError, InvalidDimensionError
from samegame.events.bus import (
    EventBus,
    EVENT_BOARD_DUMPED,
    EVENT_CLUSTER_DESELECTED,
    EVENT_CLUSTER_REMOVED,
    EVENT_CLUSTER_SELECTED,
    EVENT_DEBUG_DUMP_REQUEST,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_GRAVITY_APPLIED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_CLICK,
)
from samegame.systems.board_ops import clear_tokens, compact_board
from samegame.systems.cluster_finder import find_clusters, is_removable, is_terminal
from samegame.systems.scoring import score_removal
from samegame.world import get_game_state

logger = logging.getLogger(__name__)

Dealer = Callable[[int, int], str]


class GameController:
    """Owns the board: deals, selects, removes, compacts, scores and detects game over.

    Every command runs to completion before any event is emitted, so listeners
    only ever see a board whose tokens, clusters and score agree.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = self.world.create_entity(ClusterRegistry())
        self._num_cols = GRID_COLS
        self._num_rows = GRID_ROWS
        self._palette: Tuple[str, ...] = DEFAULT_PALETTE
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self.event_bus.subscribe(EVENT_DEBUG_DUMP_REQUEST, self.on_debug_dump_request)

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    @property
    def registry(self) -> ClusterRegistry:
        return self.world.component_for_entity(self.board_entity, ClusterRegistry)

    @property
    def board(self) -> Optional[Board]:
        if self.world.has_component(self.board_entity, Board):
            return self.world.component_for_entity(self.board_entity, Board)
        return None

    @property
    def matrix(self) -> OptionalMatrix[Token]:
        board = self.board
        if board is None:
            raise RuntimeError("No game in progress; call start_game first")
        return board.matrix

    @property
    def num_cols(self) -> int:
        board = self.board
        return board.cols if board else 0

    @property
    def num_rows(self) -> int:
        board = self.board
        return board.rows if board else 0

    @property
    def dealt_size(self) -> Tuple[int, int]:
        """(cols, rows) the current game was dealt with."""
        return self._num_cols, self._num_rows

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start_game(
        self,
        num_cols: int = GRID_COLS,
        num_rows: int = GRID_ROWS,
        palette: Sequence[str] = DEFAULT_PALETTE,
        rng: random.Random | None = None,
        *,
        dealer: Dealer | None = None,
        ensure_playable: bool = False,
        max_deal_attempts: int = MAX_DEAL_ATTEMPTS,
    ) -> None:
        """Deal a fresh board and reset score and selection.

        dealer(x, y) picks each token's color; by default a uniform choice from
        palette using rng (or the world's random source). With ensure_playable
        the board is redealt until some cluster is removable, up to
        max_deal_attempts; the last deal is kept if none is.
        """
        if num_cols <= 0 or num_rows <= 0:
            raise InvalidDimensionError(num_cols, num_rows)
        colors = tuple(dict.fromkeys(palette))
        if dealer is None and not colors:
            raise InvalidDimensionError(num_cols, num_rows, "Palette must contain at least one color")
        if dealer is None:
            source = rng or getattr(self.world, "random", None) or random.Random()
            dealer = lambda x, y: source.choice(colors)

        attempts = max(1, max_deal_attempts) if ensure_playable else 1
        for attempt in range(attempts):
            matrix: OptionalMatrix[Token] = OptionalMatrix.create(
                num_cols, num_rows, lambda x, y: Token(color=dealer(x, y), x=x, y=y)
            )
            clusters = find_clusters(matrix)
            terminal = is_terminal(matrix, clusters)
            if not terminal:
                break
            if ensure_playable and attempt + 1 < attempts:
                logger.debug("Deal %d has no removable cluster; redealing", attempt + 1)
        else:
            if ensure_playable:
                logger.warning("No playable deal after %d attempts; keeping the last one", attempts)

        self._discard_token_entities()
        for _, _, token in matrix.cells():
            token.entity = self.world.create_entity(token)
        if self.board is None:
            self.world.add_component(self.board_entity, Board(matrix=matrix))
        else:
            self.board.matrix = matrix
        self.registry.members = clusters

        self._num_cols, self._num_rows = num_cols, num_rows
        self._palette = colors
        state = self.state
        state.reset(tokens_remaining=num_cols * num_rows)
        if terminal:
            state.mode = GameMode.GAME_OVER
        logger.debug(
            "Started %dx%d game with %d clusters%s",
            num_cols, num_rows, len(clusters), " (already over)" if terminal else "",
        )
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            cols=num_cols,
            rows=num_rows,
            tokens=state.tokens_remaining,
            game_over=state.game_over,
        )
        if terminal:
            self.event_bus.emit(EVENT_GAME_OVER, score=state.total_score, tokens_remaining=state.tokens_remaining)

    def restart(self) -> None:
        """Start a new game with the previous dimensions and palette."""
        self.start_game(self._num_cols, self._num_rows, self._palette or DEFAULT_PALETTE)

    def select_at(self, x: int, y: int) -> bool:
        """Select the cluster under (x, y). Returns True when the selection changed."""
        matrix = self.matrix
        token = matrix.get(x, y)
        state = self.state
        if state.game_over or token is None:
            return False
        previous = state.selection
        previous_positions = self.registry.positions(previous)
        state.selection = token.cluster_id
        size = self.registry.size_of(token.cluster_id)
        logger.debug("Selected cluster %d (%d tokens) at (%d, %d)", token.cluster_id, size, x, y)
        if previous is not None:
            self.event_bus.emit(
                EVENT_CLUSTER_DESELECTED,
                cluster_id=previous,
                positions=previous_positions,
                reason="reselect",
            )
        # Singletons are selectable but never active, since they cannot be removed.
        self.event_bus.emit(
            EVENT_CLUSTER_SELECTED,
            cluster_id=token.cluster_id,
            size=size,
            positions=self.registry.positions(token.cluster_id),
            active=is_removable(self.registry.members, token.cluster_id),
        )
        return True

    def remove_selected(self) -> bool:
        """Remove the selected cluster. Returns False (no-op) when nothing removable is selected."""
        state = self.state
        registry = self.registry
        if self.board is None or state.game_over:
            return False
        cluster_id = state.selection
        if not is_removable(registry.members, cluster_id):
            return False
        matrix = self.matrix
        members = list(registry.members[cluster_id])
        color = members[0].color
        size = len(members)

        positions = clear_tokens(matrix, members)
        for token in members:
            self.world.delete_entity(token.entity, immediate=True)
        state.tokens_remaining -= size
        delta = score_removal(size, state.tokens_remaining)
        state.cluster_score += delta.cluster_points
        state.bonus_score = delta.bonus_score
        moves = compact_board(matrix)
        state.selection = None
        registry.members = find_clusters(matrix)
        if is_terminal(matrix, registry.members):
            state.mode = GameMode.GAME_OVER

        logger.debug(
            "Removed cluster %d (%d %s tokens), %d remaining, score %d",
            cluster_id, size, color, state.tokens_remaining, state.total_score,
        )
        self.event_bus.emit(
            EVENT_CLUSTER_REMOVED,
            cluster_id=cluster_id,
            size=size,
            positions=positions,
            color=color,
        )
        self.event_bus.emit(
            EVENT_GRAVITY_APPLIED,
            moves=[{'from': move.source, 'to': move.target, 'color': move.color} for move in moves],
        )
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            cluster_score=state.cluster_score,
            bonus_score=state.bonus_score,
            total=state.total_score,
            delta=delta.cluster_points,
        )
        if state.game_over:
            logger.debug("Game over with score %d", state.total_score)
            self.event_bus.emit(EVENT_GAME_OVER, score=state.total_score, tokens_remaining=state.tokens_remaining)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def token_at(self, x: int, y: int) -> Optional[TokenView]:
        token = self.matrix.get(x, y)
        return token.view() if token is not None else None

    def cluster_info_at(self, x: int, y: int) -> Optional[ClusterInfo]:
        token = self.matrix.get(x, y)
        if token is None or token.cluster_id is None:
            return None
        return self.registry.info(token.cluster_id)

    def current_score(self) -> int:
        return self.state.total_score

    def is_game_over(self) -> bool:
        return self.state.game_over

    def dump(self) -> List[str]:
        """Textual listing of clusters then cells; the line format is kept stable for debugging."""
        lines = ["clusters"]
        for cluster_id in sorted(self.registry.members):
            members = self.registry.members[cluster_id]
            coords = " ".join(f"({token.x},{token.y})" for token in members)
            lines.append(f"cluster {cluster_id} size={len(members)} members={coords}")
        lines.append("cells")
        board = self.board
        if board is not None:
            def _cell_line(x: int, y: int) -> None:
                token = board.matrix.get(x, y)
                if token is None:
                    lines.append(f"{x} {y} -")
                else:
                    lines.append(f"{x} {y} {token.color} {token.cluster_id}")
            board.matrix.for_each_xy(_cell_line)
        return lines

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def on_tile_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or self.board is None:
            return
        try:
            token = self.matrix.get(x, y)
        except IndexOutOfBoundsError as exc:
            logger.debug("Ignoring click: %s", exc)
            return
        if token is None:
            return
        # Clicking inside the current selection removes it; anywhere else reselects.
        selection = self.state.selection
        if selection is not None and token.cluster_id == selection:
            self.remove_selected()
        else:
            self.select_at(x, y)

    def on_new_game_request(self, sender, **kwargs):
        self.restart()

    def on_debug_dump_request(self, sender, **kwargs):
        lines = self.dump()
        logger.info("Board dump:\n%s", "\n".join(lines))
        self.event_bus.emit(EVENT_BOARD_DUMPED, lines=lines)

    def _discard_token_entities(self) -> None:
        for entity, _ in list(self.world.get_component(Token)):
            self.world.delete_entity(entity, immediate=True)
