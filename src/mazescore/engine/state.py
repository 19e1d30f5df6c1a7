# src/mazescore/engine/state.py
# MazeState: board + turn + character + score, with the single forward transition.

from __future__ import annotations

from typing import List, Optional

from ..config import DEFAULT_CONFIG, MazeConfig
from ..grid import Board
from ..mapgen.generator import generate_board
from ..render.text import render_state
from .moves import ACTION_NAMES, ACTIONS, Coord, in_bounds, legal_moves


class MazeState:
    def __init__(self, seed: int, config: MazeConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.board, self.character = generate_board(seed, config)
        self.turn = 0
        self.score = 0

    @classmethod
    def from_parts(
        cls,
        board: Board,
        character: Coord,
        *,
        turn: int = 0,
        score: int = 0,
        config: Optional[MazeConfig] = None,
    ) -> "MazeState":
        """Build a state from explicit parts (tests, search roll-backs)."""
        if config is None:
            config = MazeConfig(height=board.height, width=board.width)
        if (board.width, board.height) != (config.width, config.height):
            raise ValueError(
                f"board is {board.width}x{board.height}, config wants {config.width}x{config.height}"
            )
        if not in_bounds(character, config):
            raise ValueError(f"character {character.as_tuple()} is off the board")
        if not (0 <= turn <= config.end_turn):
            raise ValueError(f"turn must be 0..{config.end_turn}, got {turn}")
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")
        if any(v > config.max_points for v in board.buf):
            raise ValueError(f"cell points must be 0..{config.max_points}, got {max(board.buf)}")

        state = cls.__new__(cls)
        state.config = config
        state.board = board
        state.character = character
        state.turn = turn
        state.score = score
        return state

    # ---- Queries ----
    def is_done(self) -> bool:
        return self.turn == self.config.end_turn

    def legal_actions(self) -> List[int]:
        # Position only; a terminal state still reports its moves.
        return legal_moves(self.character, self.config)

    def remaining_points(self) -> int:
        return self.board.total()

    # ---- Transition ----
    def advance(self, action: int) -> None:
        if self.is_done():
            raise RuntimeError(f"game is over at turn {self.turn}; no further moves")
        if action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}; expected one of {ACTIONS}")
        if action not in self.legal_actions():
            legal = ", ".join(ACTION_NAMES[a] for a in self.legal_actions())
            raise ValueError(
                f"cannot move {ACTION_NAMES[action]} from {self.character.as_tuple()}; legal: {legal}"
            )

        self.character = self.character.moved(action)
        self.score += self.board.collect(self.character.x, self.character.y)
        self.turn += 1

    def copy(self) -> "MazeState":
        return MazeState.from_parts(
            self.board.copy(),
            self.character,
            turn=self.turn,
            score=self.score,
            config=self.config,
        )

    # ---- Display ----
    def to_string(self) -> str:
        return render_state(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"MazeState(turn={self.turn}, score={self.score}, "
            f"character={self.character.as_tuple()}, board={self.board.as_matrix()})"
        )
