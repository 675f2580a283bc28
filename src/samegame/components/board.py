from dataclasses import dataclass

from samegame.components.matrix import OptionalMatrix
from samegame.components.token import Token

@dataclass(slots=True)
class Board:
    """Board component; the matrix shrinks as columns are emptied."""
    matrix: OptionalMatrix[Token]

    @property
    def cols(self) -> int:
        return self.matrix.num_cols

    @property
    def rows(self) -> int:
        return self.matrix.num_rows
