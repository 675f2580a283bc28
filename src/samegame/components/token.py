from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True, eq=False)
class Token:
    """Colored occupant of one board cell.

    x/y always mirror the token's cell in the board matrix; GameController calls
    relocate after every compaction. cluster_id is None until the cluster pass
    assigns it. entity is the esper entity carrying this component.
    """
    color: str
    x: int
    y: int
    cluster_id: Optional[int] = None
    entity: int = -1

    def relocate(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def view(self) -> "TokenView":
        return TokenView(color=self.color, x=self.x, y=self.y)


@dataclass(frozen=True, slots=True)
class TokenView:
    """Read-only snapshot handed to callers outside the controller."""
    color: str
    x: int
    y: int
