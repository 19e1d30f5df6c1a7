#!/usr/bin/env python3
# Console driver: random-policy playout printed turn by turn.
import argparse
from mazescore.config import ACTION_SEED, BOARD_SEED, MazeConfig
from mazescore.engine.play import play_game

def main(argv=None):
    ap = argparse.ArgumentParser(description="Play one maze game with the random policy")
    ap.add_argument("--seed", type=int, default=BOARD_SEED, help="Board construction seed")
    ap.add_argument("--action-seed", type=int, default=ACTION_SEED, help="Action selection seed")
    ap.add_argument("--height", type=int, default=3)
    ap.add_argument("--width", type=int, default=4)
    ap.add_argument("--end-turn", type=int, default=4)
    args = ap.parse_args(argv)

    try:
        config = MazeConfig(height=args.height, width=args.width, end_turn=args.end_turn)
    except ValueError as e:
        ap.error(str(e))
    play_game(args.seed, action_seed=args.action_seed, config=config)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
