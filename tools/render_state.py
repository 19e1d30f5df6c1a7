#!/usr/bin/env python3
# Render a maze state to a PNG using Pillow.
# One colored tile per glyph; the glyph is drawn in the middle of the tile.

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from mazescore.config import ACTION_SEED, BOARD_SEED, MazeConfig
from mazescore.engine.play import iter_playout
from mazescore.engine.state import MazeState
from mazescore.render.text import glyph_rows
from mazescore.rng import MTRandom
from mazescore.tiles import EMPTY, glyph_color

def tile_image(glyph, tile_size, font):
    img = Image.new("RGBA", (tile_size, tile_size), color=glyph_color(glyph))
    if glyph != EMPTY:
        draw = ImageDraw.Draw(img)
        tw, th = draw.textlength(glyph, font=font), 8
        draw.text(((tile_size - tw) / 2, (tile_size - th) / 2), glyph, fill=(0, 0, 0, 255), font=font)
    return img

def render_png(state, out_png, tile_size=32, margin=0):
    rows = glyph_rows(state)
    font = ImageFont.load_default()
    header = 14
    w = state.board.width * tile_size + 2 * margin
    h = state.board.height * tile_size + 2 * margin + header
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 255))
    ImageDraw.Draw(canvas).text((margin + 2, 2), f"turn {state.turn}  score {state.score}", fill=(220, 220, 220, 255), font=font)
    cache = {}
    for y, row in enumerate(rows):
        for x, glyph in enumerate(row):
            if glyph not in cache:
                cache[glyph] = tile_image(glyph, tile_size, font)
            img = cache[glyph]
            x0 = margin + x * tile_size
            y0 = margin + header + y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=BOARD_SEED, help="Board construction seed")
    ap.add_argument("--action-seed", type=int, default=ACTION_SEED)
    ap.add_argument("--turns", type=int, default=0, help="Random-policy moves to take before rendering")
    ap.add_argument("--height", type=int, default=3)
    ap.add_argument("--width", type=int, default=4)
    ap.add_argument("--end-turn", type=int, default=4)
    ap.add_argument("--out", type=str, default="out/png/state.png")
    ap.add_argument("--tile", type=int, default=32, help="Tile size in pixels")
    args = ap.parse_args()

    try:
        config = MazeConfig(height=args.height, width=args.width, end_turn=args.end_turn)
    except ValueError as e:
        ap.error(str(e))
    state = MazeState(args.seed, config)
    rng = MTRandom(args.action_seed & 0xFFFFFFFF)
    if args.turns > 0:
        for step, _ in enumerate(iter_playout(state, rng), start=1):
            if step >= args.turns:
                break
    render_png(state, args.out, tile_size=args.tile)
    print(f"Wrote {args.out} (turn {state.turn}, score {state.score})")

if __name__ == "__main__":
    main()
