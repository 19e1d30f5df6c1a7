# tools/run_game.py
# Interactive viewer for MazeState.
# - Arrow keys / WASD take the matching move when it is legal; illegal keys are ignored.
# - Space takes one random-policy move from the action generator.
# - R rebuilds the board from the same seeds; Esc quits.

from __future__ import annotations

import argparse
from typing import Optional

import pygame

# Project imports
try:
    from mazescore.config import ACTION_SEED, BOARD_SEED, MazeConfig
    from mazescore.engine.moves import DOWN, LEFT, RIGHT, UP
    from mazescore.engine.play import random_step
    from mazescore.engine.state import MazeState
    from mazescore.render.tileset import Tileset
    from mazescore.render.text import glyph_rows
    from mazescore.rng import MTRandom
    from mazescore.ui.hud import status_text
    from mazescore.ui.status_bar import StatusBarState, render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

KEY_TO_ACTION = {
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_UP: UP, pygame.K_w: UP,
}

# Status bar needs about this many tiles of width
STATUS_BAR_TILES = 10


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Maze scoring game viewer")
    parser.add_argument("--seed", type=int, default=BOARD_SEED, help="board construction seed")
    parser.add_argument("--action-seed", type=int, default=ACTION_SEED, help="random-policy seed")
    parser.add_argument("--height", type=int, default=3)
    parser.add_argument("--width", type=int, default=4)
    parser.add_argument("--end-turn", type=int, default=4)
    parser.add_argument("--tile", type=int, default=64, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=30)
    args = parser.parse_args(argv)

    try:
        config = MazeConfig(height=args.height, width=args.width, end_turn=args.end_turn)
    except ValueError as e:
        parser.error(str(e))

    def fresh():
        return MazeState(args.seed, config), MTRandom(args.action_seed & 0xFFFFFFFF)

    state, action_rng = fresh()

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    tileset = Tileset(args.tile)
    w_px = max(config.width, STATUS_BAR_TILES) * args.tile
    h_px = (config.height + 1) * args.tile
    screen = pygame.display.set_mode((w_px, h_px))
    clock = pygame.time.Clock()

    def take(action: int) -> None:
        # Viewer-side guard: the engine raises on illegal or post-terminal moves.
        if state.is_done() or action not in state.legal_actions():
            return
        state.advance(action)
        print(state.to_string())

    print(state.to_string())
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    state, action_rng = fresh()
                    print(state.to_string())
                elif event.key == pygame.K_SPACE:
                    if random_step(state, action_rng):
                        print(state.to_string())
                elif event.key in KEY_TO_ACTION:
                    take(KEY_TO_ACTION[event.key])

        pygame.display.set_caption(f"mazescore seed {args.seed} - {status_text(state.turn, config.end_turn, state.score)}")

        # --- Rendering ---
        screen.fill((0, 0, 0))
        for y, row in enumerate(glyph_rows(state)):
            for x, glyph in enumerate(row):
                screen.blit(tileset.view(glyph, args.tile), (x * args.tile, y * args.tile))

        render_status_bar(
            screen, (0, config.height * args.tile), args.tile, w_px // args.tile,
            lambda glyph: tileset.view(glyph, args.tile),
            StatusBarState(turn=state.turn, end_turn=config.end_turn, score=state.score),
        )

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
