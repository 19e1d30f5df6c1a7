# src/mazescore/engine/moves.py
# Action codes, their deltas, and in-bounds move enumeration.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..config import MazeConfig

# Action codes, in enumeration order
RIGHT, LEFT, DOWN, UP = 0, 1, 2, 3
ACTIONS: Tuple[int, ...] = (RIGHT, LEFT, DOWN, UP)

DX = (1, -1, 0, 0)
DY = (0, 0, 1, -1)

ACTION_NAMES = {
    RIGHT: "right",
    LEFT: "left",
    DOWN: "down",
    UP: "up",
}


@dataclass(frozen=True)
class Coord:
    x: int
    y: int

    def moved(self, action: int) -> "Coord":
        if action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}; expected one of {ACTIONS}")
        return Coord(self.x + DX[action], self.y + DY[action])

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


def in_bounds(pos: Coord, config: MazeConfig) -> bool:
    return 0 <= pos.x < config.width and 0 <= pos.y < config.height


def legal_moves(pos: Coord, config: MazeConfig) -> List[int]:
    """Actions whose destination stays on the board, in code order."""
    return [a for a in ACTIONS if in_bounds(pos.moved(a), config)]
