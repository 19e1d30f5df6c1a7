# src/mazescore/engine/policy.py
# Random-policy action selection. Uses its own generator, never the board one.

from __future__ import annotations

from typing import TYPE_CHECKING

from ..rng import MTRandom

if TYPE_CHECKING:
    from .state import MazeState


def random_action(state: "MazeState", rng: MTRandom) -> int:
    legal = state.legal_actions()
    if not legal:
        raise ValueError(f"no legal action from {state.character.as_tuple()}")
    return legal[rng.below(len(legal))]
