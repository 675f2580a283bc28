from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from samegame.components.matrix import OptionalMatrix
from samegame.components.token import Token

Position = Tuple[int, int]


@dataclass(slots=True)
class GravityMove:
    source: Position
    target: Position
    color: str


def clear_tokens(matrix: OptionalMatrix[Token], tokens: List[Token]) -> List[Position]:
    """Empty the cells held by tokens and return the cleared positions.

    Every token is checked before any cell is cleared, so a token whose stored
    position is stale leaves the board untouched.
    """
    for token in tokens:
        if not matrix.in_bounds(token.x, token.y) or matrix.get(token.x, token.y) is not token:
            raise RuntimeError(f"Token {token.color} at {token.position} is not in its cell")
    for token in tokens:
        matrix.set(token.x, token.y, None)
    return [token.position for token in tokens]


def resync_positions(matrix: OptionalMatrix[Token]) -> None:
    """Make every token's stored coordinates match its cell."""
    for x, y, token in matrix.cells():
        token.relocate(x, y)


def compact_board(matrix: OptionalMatrix[Token]) -> List[GravityMove]:
    """Compact the matrix, relocate tokens, and report each token that moved."""
    before: Dict[int, Position] = {}
    for _, _, token in matrix.cells():
        before[id(token)] = token.position
    matrix.compact_down_and_left()
    resync_positions(matrix)
    moves: List[GravityMove] = []
    for x, y, token in matrix.cells():
        source = before[id(token)]
        if source != (x, y):
            moves.append(GravityMove(source=source, target=(x, y), color=token.color))
    return moves


def find_position_mismatches(matrix: OptionalMatrix[Token]) -> List[Tuple[Token, Position]]:
    """Tokens whose stored coordinates disagree with their cell."""
    return [(token, (x, y)) for x, y, token in matrix.cells() if token.position != (x, y)]


def column_packing_violations(matrix: OptionalMatrix[Token]) -> List[Position]:
    """Occupied cells with an empty cell somewhere below them, plus (x, -1) for fully empty columns."""
    violations: List[Position] = []
    for x, column in enumerate(matrix.columns()):
        if all(cell is None for cell in column):
            violations.append((x, -1))
            continue
        seen_gap = False
        for y, cell in enumerate(column):
            if cell is None:
                seen_gap = True
            elif seen_gap:
                violations.append((x, y))
    return violations
