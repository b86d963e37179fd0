"""
Alea PRNG, the random source behind every Chance session.

Based on Johannes Baagøe's Alea algorithm. Seeds are hashed with Mash,
so any value with a string form (integers, strings) seeds the generator,
and the same seed yields the same sequence on every machine.
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class Mash:
    """Alea's string hash, folding characters into a 32-bit state."""

    def __init__(self):
        self.n = 0xEFC8249D  # 4022871197

    def __call__(self, data) -> float:
        for char in str(data):
            self.n += ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * 0x100000000  # 2^32
        return _uint32(self.n) * 2.3283064365386963e-10  # 2^-32


class AleaPRNG:
    """
    Seeded generator of uniform floats in [0, 1).

    State is three fractional registers plus a carry. Each call to
    random() advances the state by exactly one step.
    """

    def __init__(self, seed):
        """Initialize with a seed string or number."""
        self.seed = seed
        self.call_count = 0

        mash = Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(seed)
        if self.s2 < 0:
            self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def __repr__(self):
        return f"AleaPRNG(seed={self.seed!r}, call_count={self.call_count})"
