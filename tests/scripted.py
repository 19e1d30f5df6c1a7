# Deterministic stand-in for MTRandom: replays a fixed list of 32-bit draws.

class ScriptedRandom:
    def __init__(self, draws):
        self.draws = list(draws)
        self.used = 0

    def next32(self):
        v = self.draws[self.used]
        self.used += 1
        return v

    def below(self, n):
        return self.next32() % n
