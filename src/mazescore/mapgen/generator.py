# src/mazescore/mapgen/generator.py
# Seeded board construction. Draw order: character row, character column, then cells.

from typing import Tuple

from ..config import DEFAULT_CONFIG, MazeConfig
from ..engine.moves import Coord
from ..grid import Board
from ..rng import MTRandom
from .placement import place_character, scatter_points


def generate_board(seed: int, config: MazeConfig = DEFAULT_CONFIG) -> Tuple[Board, Coord]:
    rng = MTRandom(seed & 0xFFFFFFFF)
    return build_board(rng, config)


def build_board(rng: MTRandom, config: MazeConfig = DEFAULT_CONFIG) -> Tuple[Board, Coord]:
    character = place_character(rng, config)
    board = Board.empty(config.width, config.height)
    scatter_points(board, rng, character, config)
    return board, character
