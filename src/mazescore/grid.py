from dataclasses import dataclass
from typing import List

@dataclass
class Board:
    width: int
    height: int
    buf: List[int]

    @classmethod
    def empty(cls, width: int, height: int) -> "Board":
        return cls(width=width, height=height, buf=[0] * (width * height))

    @classmethod
    def from_matrix(cls, rows: List[List[int]]) -> "Board":
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(r) != width for r in rows):
            raise ValueError("board rows must all have the same length")
        if any(v < 0 for r in rows for v in r):
            raise ValueError("cell points must be non-negative")
        return cls(width=width, height=height, buf=[v for r in rows for v in r])

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x},{y}) outside {self.width}x{self.height} board")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        if v < 0:
            raise ValueError(f"cell points must be non-negative, got {v}")
        self.buf[self.idx(x, y)] = v

    def collect(self, x: int, y: int) -> int:
        """Take the points at (x, y); the cell is left at 0."""
        i = self.idx(x, y)
        points = self.buf[i]
        self.buf[i] = 0
        return points

    def total(self) -> int:
        return sum(self.buf)

    def copy(self) -> "Board":
        return Board(width=self.width, height=self.height, buf=list(self.buf))

    def as_matrix(self) -> List[List[int]]:
        return [self.buf[y * self.width:(y + 1) * self.width] for y in range(self.height)]
