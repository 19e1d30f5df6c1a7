import pytest

from mazescore.config import MazeConfig
from mazescore.grid import Board

def test_row_major_storage():
    b = Board.from_matrix([[1, 2, 3], [4, 5, 6]])
    assert (b.width, b.height) == (3, 2)
    assert b.get(2, 0) == 3
    assert b.get(0, 1) == 4
    assert b.as_matrix() == [[1, 2, 3], [4, 5, 6]]

def test_collect_zeroes_cell_once():
    b = Board.from_matrix([[0, 7], [2, 0]])
    assert b.collect(1, 0) == 7
    assert b.get(1, 0) == 0
    assert b.collect(1, 0) == 0
    assert b.total() == 2

def test_out_of_bounds_raises():
    b = Board.empty(4, 3)
    assert not b.in_bounds(4, 0)
    with pytest.raises(IndexError):
        b.get(4, 0)
    with pytest.raises(IndexError):
        b.collect(0, -1)

def test_ragged_and_negative_rejected():
    with pytest.raises(ValueError):
        Board.from_matrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        Board.from_matrix([[1, -2]])
    with pytest.raises(ValueError):
        Board.empty(2, 2).set(0, 0, -1)

def test_copy_is_independent():
    b = Board.from_matrix([[5, 5]])
    c = b.copy()
    c.collect(0, 0)
    assert b.get(0, 0) == 5

def test_config_validation():
    assert MazeConfig().cells == 12
    for bad in (dict(height=0), dict(width=0), dict(end_turn=-1), dict(max_points=10)):
        with pytest.raises(ValueError):
            MazeConfig(**bad)
