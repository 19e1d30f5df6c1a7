# src/mazescore/engine/play.py
# Driver loop: print the state, take a random legal move, repeat until terminal.

from __future__ import annotations

from typing import Callable, Iterator

from ..config import ACTION_SEED, DEFAULT_CONFIG, MazeConfig
from ..rng import MTRandom
from .policy import random_action
from .state import MazeState


def iter_playout(state: MazeState, rng: MTRandom) -> Iterator[MazeState]:
    """Advance `state` in place with the random policy, yielding it after every step."""
    while not state.is_done():
        state.advance(random_action(state, rng))
        yield state


def play_game(
    seed: int,
    action_seed: int = ACTION_SEED,
    config: MazeConfig = DEFAULT_CONFIG,
    emit: Callable[[str], None] = print,
) -> MazeState:
    state = MazeState(seed, config)
    rng = MTRandom(action_seed & 0xFFFFFFFF)

    emit(state.to_string())
    for _ in iter_playout(state, rng):
        emit(state.to_string())
    return state


def random_step(state: MazeState, rng: MTRandom) -> bool:
    """Take one random-policy move if the game allows one; report whether it moved."""
    if state.is_done() or not state.legal_actions():
        return False
    state.advance(random_action(state, rng))
    return True
