# src/mazescore/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from ..tiles import EMPTY, glyph_color

class Tileset:
    """
    Cached glyph tiles:
      - one colored square per glyph ('@', '.', '1'..'9')
      - glyph text centred on the tile
      - returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, (tile_size * 2) // 3))

    @lru_cache(maxsize=64)
    def get(self, glyph: str) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(glyph_color(glyph))
        if glyph != EMPTY:
            txt = self.font.render(glyph, True, (0, 0, 0))
            r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
            img.blit(txt, r)
        return img

    @lru_cache(maxsize=256)
    def view(self, glyph: str, size: int) -> pygame.Surface:
        base = self.get(glyph)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
