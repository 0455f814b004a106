"""
Xoshiro256StarStar: the 64-bit bit generator behind every draw.

xoshiro256** (Blackman & Vigna) keeps four 64-bit words of state and
produces one scrambled 64-bit output per step. The state transition is a
bijection on the non-zero state space, so a correctly seeded generator
never reaches the all-zero state.

Not suitable for cryptography: the state can be recovered from outputs.

Instances are not thread-safe. Give each thread or task its own generator
(see oddkit.context and oddkit.seeds.SeedPlan).
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from oddkit._bits import rotl64, u64
from oddkit.seeds.entropy import entropy_seed
from oddkit.seeds.splitmix import expand_seed

logger = logging.getLogger(__name__)

# Substituted when seed expansion yields the all-zero vector.
FALLBACK_STATE: tuple[int, int, int, int] = (
    0x9E3779B97F4A7C15,
    0xBF58476D1CE4E5B9,
    0x94D049BB133111EB,
    0xD1B54A32D192ED03,
)


class Xoshiro256StarStar:
    """
    Seedable xoshiro256** generator.

    Two generators seeded with the same value produce the same infinite
    stream of 64-bit words.

    Example:
        rng = Xoshiro256StarStar(1337)
        rng.next_u64()  # 0xAD0AA0A04F822EDC
        rng.next_u32()  # high 32 bits of the following draw
    """

    __slots__ = ("_s0", "_s1", "_s2", "_s3")

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the generator.

        Args:
            seed: A 64-bit seed (only the low 64 bits are used). If None,
                the generator is seeded from platform entropy.
        """
        self._s0 = self._s1 = self._s2 = self._s3 = 0
        self.seed(seed)

    def seed(self, seed: int | None = None) -> None:
        """
        Re-seed the generator, restarting its stream.

        Args:
            seed: A 64-bit seed, or None to draw one from platform entropy.
        """
        if seed is None:
            seed = entropy_seed()
            logger.debug("Seeding generator from entropy")
        words = expand_seed(seed, 4)
        if not any(words):
            words = FALLBACK_STATE
        self._s0, self._s1, self._s2, self._s3 = words

    @classmethod
    def from_state(cls, words: Iterable[int]) -> Xoshiro256StarStar:
        """
        Build a generator directly from four state words.

        Args:
            words: Four integers; each is reduced to 64 bits.

        Returns:
            A generator whose next draw continues from *words*.

        Raises:
            ValueError: If there are not exactly four words, or all are zero.
        """
        state = tuple(u64(int(w)) for w in words)
        if len(state) != 4:
            raise ValueError(f"xoshiro256** state needs 4 words, got {len(state)}")
        if not any(state):
            raise ValueError("xoshiro256** state must not be all zero")
        rng = cls.__new__(cls)
        rng._s0, rng._s1, rng._s2, rng._s3 = state
        return rng

    @property
    def state(self) -> tuple[int, int, int, int]:
        """The current four state words."""
        return (self._s0, self._s1, self._s2, self._s3)

    def next_u64(self) -> int:
        """Return the next 64-bit draw and advance the state."""
        s0, s1, s2, s3 = self._s0, self._s1, self._s2, self._s3

        result = u64(rotl64(u64(s1 * 5), 7) * 9)
        t = u64(s1 << 17)

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3

        s2 ^= t
        s3 = rotl64(s3, 45)

        self._s0, self._s1, self._s2, self._s3 = s0, s1, s2, s3
        return result

    def next_u32(self) -> int:
        """Return the upper 32 bits of the next 64-bit draw."""
        return self.next_u64() >> 32

    def draw_array(self, count: int) -> np.ndarray:
        """
        Draw *count* consecutive 64-bit values into a NumPy array.

        The stream advances exactly as *count* calls to next_u64() would.

        Returns:
            A ``uint64`` array of length *count*.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return np.fromiter(
            (self.next_u64() for _ in range(count)), dtype=np.uint64, count=count
        )

    def __repr__(self) -> str:
        words = ", ".join(f"0x{w:016X}" for w in self.state)
        return f"Xoshiro256StarStar(state=({words}))"
