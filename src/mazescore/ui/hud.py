from typing import Tuple

def counter_digits(value: int, nd: int = 3) -> Tuple[int, ...]:
    """
    Split a counter into `nd` zero-padded decimal digits, most significant
    first. Values wider than `nd` digits keep only the low digits, like a
    fixed-width odometer.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    if nd < 1:
        raise ValueError("nd must be >= 1")
    return tuple((value // 10 ** p) % 10 for p in range(nd - 1, -1, -1))

def status_text(turn: int, end_turn: int, score: int) -> str:
    """One-line caption for the viewer; mirrors the text renderer's header."""
    t = "".join(str(d) for d in counter_digits(turn, 2))
    e = "".join(str(d) for d in counter_digits(end_turn, 2))
    s = "".join(str(d) for d in counter_digits(score, 3))
    done = "  DONE" if turn >= end_turn else ""
    return f"TURN {t}/{e}  SCORE {s}{done}"
