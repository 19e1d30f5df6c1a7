from dataclasses import dataclass, field
from typing import List

# MT19937 (32-bit Mersenne Twister), seeded with the single-word init_genrand.
N = 624
M = 397
MATRIX_A = 0x9908B0DF
UPPER_MASK = 0x80000000
LOWER_MASK = 0x7FFFFFFF
MASK32 = 0xFFFFFFFF

def mt_seed(seed: int) -> List[int]:
    mt = [0] * N
    mt[0] = seed & MASK32
    for i in range(1, N):
        prev = mt[i - 1]
        mt[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & MASK32
    return mt

def mt_twist(mt: List[int]) -> None:
    """Regenerate all N words of state in place."""
    for i in range(N):
        y = (mt[i] & UPPER_MASK) | (mt[(i + 1) % N] & LOWER_MASK)
        v = mt[(i + M) % N] ^ (y >> 1)
        if y & 1:
            v ^= MATRIX_A
        mt[i] = v

def temper(y: int) -> int:
    y ^= y >> 11
    y ^= (y << 7) & 0x9D2C5680
    y ^= (y << 15) & 0xEFC60000
    y ^= y >> 18
    return y & MASK32

@dataclass
class MTRandom:
    seed: int
    mt: List[int] = field(init=False, repr=False)
    index: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.mt = mt_seed(self.seed)
        self.index = N  # forces a twist on the first draw

    def next32(self) -> int:
        if self.index >= N:
            mt_twist(self.mt)
            self.index = 0
        y = self.mt[self.index]
        self.index += 1
        return temper(y)

    def below(self, n: int) -> int:
        # Plain modulo reduction; reproduces the reference traces (slight bias is fine).
        if n <= 0:
            raise ValueError(f"below() needs n > 0, got {n}")
        return self.next32() % n
