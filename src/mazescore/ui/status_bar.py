from dataclasses import dataclass
from typing import Callable

from .hud import counter_digits

@dataclass
class StatusBarState:
    turn: int = 0
    end_turn: int = 0
    score: int = 0

def render_status_bar(
    screen, origin_xy: tuple[int,int], tile: int, width_tiles: int,
    get_tile_surface: Callable[[str], "pygame.Surface"],
    state: StatusBarState
) -> None:
    """
    Draw a 1-tile-high status bar using the digit glyph tiles.
    Does not mutate the game state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    w = width_tiles * tile
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, w, tile))
    font = pygame.font.SysFont(None, max(10, tile // 2))

    def label(x, text):
        img = font.render(text, True, (220,220,220))
        screen.blit(img, (ox + x, oy + (tile - img.get_height()) // 2))
        return x + img.get_width() + (tile // 4)

    def digits(x, value, nd):
        for d in counter_digits(value, nd):
            # '0' has no point tile; draw it as text
            if d == 0:
                img = font.render("0", True, (220,220,220))
                screen.blit(img, (ox + x + (tile - img.get_width()) // 2, oy + (tile - img.get_height()) // 2))
            else:
                screen.blit(get_tile_surface(str(d)), (ox + x, oy))
            x += tile
        return x

    x = tile // 4
    x = label(x, "TURN");  x = digits(x, state.turn, 2); x += tile // 4
    x = label(x, "/");     x = digits(x, state.end_turn, 2); x += tile // 2
    x = label(x, "SCORE"); x = digits(x, state.score, 3)
