"""
Fixed-denominator odds.

Every preset is an Odds value calling one_in() with a constant
denominator. Presets draw from the generator passed in, or from the
current scoped generator when none is given.
"""

from __future__ import annotations

from dataclasses import dataclass

from oddkit.context import current_generator
from oddkit.generator import Xoshiro256StarStar
from oddkit.sampling import one_in


@dataclass(frozen=True)
class Odds:
    """
    A "1 in N" chance.

    Attributes:
        denominator: N. Must be at least 1; Odds(1) is always true.

    Example:
        crit = Odds(20)
        if crit(rng):
            damage *= 2
    """

    denominator: int

    def __post_init__(self) -> None:
        if self.denominator < 1:
            raise ValueError(f"Odds denominator must be >= 1, got {self.denominator}")

    @property
    def probability(self) -> float:
        """The chance of a hit, ``1 / denominator``."""
        return 1.0 / self.denominator

    def __call__(self, rng: Xoshiro256StarStar | None = None) -> bool:
        """Roll once; True with probability ``1 / denominator``."""
        if rng is None:
            rng = current_generator()
        return one_in(rng, self.denominator)

    def __str__(self) -> str:
        return f"1 in {self.denominator}"


P2 = Odds(2)
P3 = Odds(3)
P4 = Odds(4)
P5 = Odds(5)
P6 = Odds(6)
P8 = Odds(8)
P10 = Odds(10)
P12 = Odds(12)
P16 = Odds(16)
P20 = Odds(20)
P25 = Odds(25)
P30 = Odds(30)
P50 = Odds(50)
P60 = Odds(60)
P100 = Odds(100)
P128 = Odds(128)
P256 = Odds(256)

PRESETS: dict[int, Odds] = {
    odds.denominator: odds
    for odds in (
        P2, P3, P4, P5, P6, P8, P10, P12, P16,
        P20, P25, P30, P50, P60, P100, P128, P256,
    )
}


def preset(denominator: int) -> Odds:
    """Return the preset for *denominator*, or a new Odds if there is none."""
    return PRESETS.get(denominator) or Odds(denominator)


def one_in_2(rng: Xoshiro256StarStar | None = None) -> bool:
    return P2(rng)


def one_in_5(rng: Xoshiro256StarStar | None = None) -> bool:
    return P5(rng)


def one_in_10(rng: Xoshiro256StarStar | None = None) -> bool:
    return P10(rng)


def one_in_25(rng: Xoshiro256StarStar | None = None) -> bool:
    return P25(rng)


def one_in_50(rng: Xoshiro256StarStar | None = None) -> bool:
    return P50(rng)


def one_in_100(rng: Xoshiro256StarStar | None = None) -> bool:
    return P100(rng)
