#!/usr/bin/env python3
import argparse, csv, os
from mazescore.config import ACTION_SEED, MazeConfig
from mazescore.engine.play import play_game
from mazescore.mapgen.generator import generate_board

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def config_from(args):
    return MazeConfig(height=args.height, width=args.width, end_turn=args.end_turn)

def cmd_emit(args):
    board, character = generate_board(args.seed, config_from(args))
    write_tsv(board.as_matrix(), args.out, include_header=args.header)
    print(f"Wrote {args.out} (character at x={character.x} y={character.y})")

def cmd_trace(args):
    os.makedirs(args.outdir, exist_ok=True)
    config = config_from(args)
    for seed in args.seeds:
        chunks = []
        final = play_game(seed, action_seed=args.action_seed, config=config, emit=chunks.append)
        path = os.path.join(args.outdir, f"{seed}.txt")
        with open(path, 'w', encoding='utf-8') as f:
            f.write("\n".join(chunks))
        print(f"Wrote {path} (score {final.score})")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--height', type=int, default=3)
    p.add_argument('--width', type=int, default=4)
    p.add_argument('--end-turn', type=int, default=4)
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('trace')
    p2.add_argument('--seeds', type=int, nargs='+', required=True)
    p2.add_argument('--action-seed', type=int, default=ACTION_SEED)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_trace)
    args = p.parse_args()
    try:
        args.func(args)
    except ValueError as e:
        raise SystemExit(f"mazetool: {e}")

if __name__ == '__main__':
    main()
