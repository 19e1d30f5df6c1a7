# src/mazescore/render/text.py
# Plain-text snapshot: two header lines, then one line of glyphs per board row.

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..tiles import CHARACTER, glyph_for

if TYPE_CHECKING:
    from ..engine.state import MazeState


def glyph_rows(state: "MazeState") -> List[str]:
    rows = []
    for y in range(state.board.height):
        row = []
        for x in range(state.board.width):
            if state.character.x == x and state.character.y == y:
                row.append(CHARACTER)
            else:
                row.append(glyph_for(state.board.get(x, y)))
        rows.append("".join(row))
    return rows


def render_state(state: "MazeState") -> str:
    lines = [f"turn:\t{state.turn}", f"score:\t{state.score}"]
    lines.extend(glyph_rows(state))
    return "".join(line + "\n" for line in lines)
