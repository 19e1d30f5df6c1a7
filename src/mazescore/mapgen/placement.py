from ..config import MazeConfig
from ..engine.moves import Coord
from ..grid import Board
from ..rng import MTRandom

def place_character(rng: MTRandom, config: MazeConfig) -> Coord:
    """
    Two draws, row first:
      y = next32() % height
      x = next32() % width
    """
    y = rng.below(config.height)
    x = rng.below(config.width)
    return Coord(x, y)

def scatter_points(board: Board, rng: MTRandom, skip: Coord, config: MazeConfig) -> None:
    """
    Row-major walk (y outer, x inner). Every cell except `skip` gets
    next32() % (max_points + 1). The skipped cell stays 0 and consumes no draw.
    """
    for y in range(config.height):
        for x in range(config.width):
            if x == skip.x and y == skip.y:
                continue
            board.set(x, y, rng.below(config.max_points + 1))
