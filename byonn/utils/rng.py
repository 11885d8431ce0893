from .backend import xp

I32_MAX = 2**31 - 1
_U64_MASK = 2**64 - 1


class Rng:
    """Source of pseudo-random numbers injected into layers that need weights.

    The library never seeds or owns a generator; callers hand one in.
    Subclasses only have to provide ``next_u32``.
    """

    def next_u32(self) -> int:
        """Return the next value as a signed 32-bit integer."""
        raise NotImplementedError("Child class must implement next_u32()")

    def next_f32(self):
        # Roughly uniform in [-1, 1]
        return xp.float32(self.next_u32()) / xp.float32(I32_MAX)


class SimpleRng(Rng):
    """64-bit linear congruential generator.

    Returns the high 32 bits of the state reinterpreted as a signed integer.
    """

    def __init__(self, state: int = 73):
        self.state = state & _U64_MASK

    def next_u32(self) -> int:
        self.state = (self.state * 6364136223846793005 + 1) & _U64_MASK
        high = self.state >> 32
        return high - 2**32 if high >= 2**31 else high
