"""Connected-component pass over the board.

Two tokens belong to the same cluster when a path of up/down/left/right
neighbours of the same color joins them. The pass is always run over the whole
board; cluster ids are never patched incrementally.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from samegame.components.matrix import OptionalMatrix
from samegame.components.token import Token
from samegame.constants import MIN_REMOVABLE_CLUSTER

NEIGHBOUR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def reset_clusters(matrix: OptionalMatrix[Token]) -> None:
    def _clear(token: Token) -> None:
        token.cluster_id = None
    matrix.for_each_cell(_clear)


def find_clusters(matrix: OptionalMatrix[Token]) -> Dict[int, List[Token]]:
    """Assign a cluster id to every token and return id -> members.

    Uses an explicit stack so large single-color regions never hit the
    recursion limit. A token is assigned exactly once, which is what stops the
    walk from looping on cycles in the adjacency graph.
    """
    reset_clusters(matrix)
    registry: Dict[int, List[Token]] = {}
    next_id = 0
    for seed in list(_occupied(matrix)):
        if seed.cluster_id is not None:
            continue
        cluster_id = next_id
        next_id += 1
        seed.cluster_id = cluster_id
        members = [seed]
        stack = [seed]
        while stack:
            current = stack.pop()
            for dx, dy in NEIGHBOUR_OFFSETS:
                nx, ny = current.x + dx, current.y + dy
                if not matrix.in_bounds(nx, ny):
                    continue
                neighbour = matrix.get(nx, ny)
                if neighbour is None or neighbour.cluster_id is not None:
                    continue
                if neighbour.color != seed.color:
                    continue
                neighbour.cluster_id = cluster_id
                members.append(neighbour)
                stack.append(neighbour)
        registry[cluster_id] = members
    return registry


def cluster_size(registry: Dict[int, List[Token]], cluster_id: Optional[int]) -> int:
    if cluster_id is None:
        return 0
    return len(registry.get(cluster_id, ()))


def is_removable(registry: Dict[int, List[Token]], cluster_id: Optional[int]) -> bool:
    return cluster_size(registry, cluster_id) >= MIN_REMOVABLE_CLUSTER


def is_terminal(matrix: OptionalMatrix[Token], registry: Dict[int, List[Token]]) -> bool:
    """True when no occupied cell belongs to a removable cluster (an empty board included)."""
    return matrix.all_satisfy(
        lambda token: token is None or not is_removable(registry, token.cluster_id)
    )


def _occupied(matrix: OptionalMatrix[Token]) -> List[Token]:
    tokens: List[Token] = []
    matrix.for_each_cell(tokens.append)
    return tokens
