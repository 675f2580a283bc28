from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from samegame.components.token import Token, TokenView


@dataclass(frozen=True, slots=True)
class ClusterInfo:
    cluster_id: int
    size: int
    members: Tuple[TokenView, ...]


@dataclass(slots=True)
class ClusterRegistry:
    """cluster id -> member tokens, rebuilt wholesale after every board change."""
    members: Dict[int, List[Token]] = field(default_factory=dict)

    def size_of(self, cluster_id: Optional[int]) -> int:
        if cluster_id is None:
            return 0
        return len(self.members.get(cluster_id, ()))

    def info(self, cluster_id: int) -> ClusterInfo:
        tokens = self.members[cluster_id]
        return ClusterInfo(
            cluster_id=cluster_id,
            size=len(tokens),
            members=tuple(token.view() for token in tokens),
        )

    def positions(self, cluster_id: Optional[int]) -> List[Tuple[int, int]]:
        if cluster_id is None:
            return []
        return [token.position for token in self.members.get(cluster_id, ())]
