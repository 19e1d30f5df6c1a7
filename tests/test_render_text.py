from mazescore.config import MazeConfig
from mazescore.engine.moves import RIGHT, Coord
from mazescore.engine.play import iter_playout
from mazescore.engine.state import MazeState
from mazescore.grid import Board
from mazescore.render.text import render_state
from mazescore.rng import MTRandom

def test_exact_layout():
    s = MazeState.from_parts(
        Board.from_matrix([[3, 4, 5, 6], [7, 8, 9, 0], [1, 0, 2, 3]]),
        Coord(1, 2),
    )
    assert render_state(s) == "turn:\t0\nscore:\t0\n3456\n789.\n1@23\n"
    s.advance(RIGHT)
    assert str(s) == "turn:\t1\nscore:\t2\n3456\n789.\n1.@3\n"

def check_invariants(s):
    lines = s.to_string().splitlines()
    assert len(lines) == s.config.height + 2
    assert lines[0] == f"turn:\t{s.turn}"
    assert lines[1] == f"score:\t{s.score}"
    rows = lines[2:]
    assert sum(r.count("@") for r in rows) == 1
    for y, row in enumerate(rows):
        assert len(row) == s.config.width
        for x, ch in enumerate(row):
            if (x, y) == s.character.as_tuple():
                assert ch == "@"
            else:
                assert (ch == ".") == (s.board.get(x, y) == 0)

def test_invariants_hold_through_playouts():
    for seed in range(20):
        s = MazeState(seed)
        check_invariants(s)
        for _ in iter_playout(s, MTRandom(seed)):
            check_invariants(s)

def test_invariants_on_other_board_sizes():
    s = MazeState(8, MazeConfig(height=6, width=2, end_turn=3))
    check_invariants(s)
