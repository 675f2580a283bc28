from dataclasses import dataclass

from samegame.constants import BONUS_MULTIPLIER, BONUS_THRESHOLD


@dataclass(frozen=True, slots=True)
class ScoreDelta:
    """Result of one removal: points to add, and the bonus that replaces the old one."""
    cluster_points: int
    bonus_score: int


def cluster_points(cluster_size: int) -> int:
    return cluster_size * cluster_size


def bonus_points(tokens_remaining: int) -> int:
    return max(0, BONUS_THRESHOLD - tokens_remaining) * BONUS_MULTIPLIER


def score_removal(cluster_size: int, tokens_remaining: int) -> ScoreDelta:
    """Score a removal of cluster_size tokens that leaves tokens_remaining on the board."""
    return ScoreDelta(
        cluster_points=cluster_points(cluster_size),
        bonus_score=bonus_points(tokens_remaining),
    )
