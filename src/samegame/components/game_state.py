"""Game state resource describing score, selection and the play/over mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component holding per-game score and selection.

    bonus_score is recomputed from the remaining token count after each removal,
    never accumulated.
    """
    mode: GameMode = GameMode.PLAYING
    cluster_score: int = 0
    bonus_score: int = 0
    tokens_remaining: int = 0
    selection: Optional[int] = None

    @property
    def game_over(self) -> bool:
        return self.mode == GameMode.GAME_OVER

    @property
    def total_score(self) -> int:
        return self.cluster_score + self.bonus_score

    def reset(self, tokens_remaining: int) -> None:
        self.mode = GameMode.PLAYING
        self.cluster_score = 0
        self.bonus_score = 0
        self.tokens_remaining = tokens_remaining
        self.selection = None
