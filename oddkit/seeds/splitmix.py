"""
SplitMix64: expands a single 64-bit seed into generator state.

SplitMix64 is a Weyl-sequence counter followed by a two-round
xor-shift/multiply finaliser. It has no weak seeds: even 0 and 1 expand to
well-mixed words, which makes it the standard seeder for the xoshiro family.
"""

from __future__ import annotations

from oddkit._bits import u64

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
MIX_MULTIPLIER_1 = 0xBF58476D1CE4E5B9
MIX_MULTIPLIER_2 = 0x94D049BB133111EB


class SplitMix64:
    """
    Small-state 64-bit mixer.

    Each call to next_u64() advances the accumulator by the golden-ratio
    increment and returns a mixed copy of it.

    Example:
        sm = SplitMix64(0)
        sm.next_u64()  # 0xE220A8397B1DCDAF
    """

    def __init__(self, seed: int) -> None:
        self.state = u64(seed)

    def next_u64(self) -> int:
        """Advance the accumulator and return the next mixed word."""
        self.state = u64(self.state + GOLDEN_GAMMA)
        z = self.state
        z = u64((z ^ (z >> 30)) * MIX_MULTIPLIER_1)
        z = u64((z ^ (z >> 27)) * MIX_MULTIPLIER_2)
        return z ^ (z >> 31)

    def __repr__(self) -> str:
        return f"SplitMix64(state=0x{self.state:016X})"


def expand_seed(seed: int, words: int = 4) -> tuple[int, ...]:
    """
    Expand *seed* into *words* 64-bit words.

    Args:
        seed: Any integer; only its low 64 bits are used.
        words: Number of output words (default: 4, the xoshiro256 state size).

    Returns:
        A tuple of the first *words* outputs of a fresh SplitMix64(seed).
    """
    sm = SplitMix64(seed)
    return tuple(sm.next_u64() for _ in range(words))
