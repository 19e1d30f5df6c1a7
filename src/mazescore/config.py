from dataclasses import dataclass

# Reference seeds: one for board construction, one for action selection.
BOARD_SEED = 121321
ACTION_SEED = 0

@dataclass(frozen=True)
class MazeConfig:
    height: int = 3
    width: int = 4
    end_turn: int = 4
    # Cells draw next32() % (max_points + 1); must stay a single digit.
    max_points: int = 9

    def __post_init__(self) -> None:
        if self.height < 1 or self.width < 1:
            raise ValueError(f"board must be at least 1x1, got {self.width}x{self.height}")
        if self.end_turn < 0:
            raise ValueError(f"end_turn must be >= 0, got {self.end_turn}")
        if not (0 <= self.max_points <= 9):
            raise ValueError(f"max_points must be 0..9, got {self.max_points}")

    @property
    def cells(self) -> int:
        return self.height * self.width

# Board used by the reference traces (3 rows x 4 columns, 4 turns)
DEFAULT_CONFIG = MazeConfig()
