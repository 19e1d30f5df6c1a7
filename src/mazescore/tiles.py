# Glyphs used by the text renderer (and as tile keys by the graphical ones)

CHARACTER = "@"
EMPTY = "."
DIGITS = "123456789"

def glyph_for(points: int) -> str:
    # Non-character cell: '.' when empty, else its single digit.
    if points < 0 or points > 9:
        raise ValueError(f"cell points must be 0..9, got {points}")
    return EMPTY if points == 0 else str(points)

def is_point_glyph(glyph: str) -> bool:
    return len(glyph) == 1 and glyph in DIGITS

def glyph_color(glyph: str):
    """RGBA fill for a glyph tile; shared by the pygame and PNG renderers."""
    if glyph == CHARACTER:
        return (255, 220, 0, 255)
    if glyph == EMPTY:
        return (40, 40, 40, 255)
    if is_point_glyph(glyph):
        # brighter green for richer cells
        return (0, 120 + 15 * int(glyph), 0, 255)
    return (200, 200, 255, 255)
