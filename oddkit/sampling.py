"""
Unbiased bounded sampling on top of a 64-bit bit generator.

Reducing a raw draw with ``x % bound`` over-represents small residues
whenever 2**64 is not a multiple of bound. The samplers here remove that
bias by rejecting the few draws that would cause it:

- Power-of-two bounds: mask the low bits of one draw (always unbiased).
- "lemire": multiply-high with rejection (Lemire, 2019). The high word of
  the 128-bit product ``x * bound`` is the sample; it is rejected only when
  the low word falls below ``2**64 mod bound``.
- "modulo": classic rejection below the largest multiple of bound, then
  reduce. Same distribution as "lemire", more retries in the worst case.

Both rejection loops have no retry cap. Each draw is rejected with
probability below ``bound / 2**64``, so the expected number of draws is
essentially 1 and the loop terminates with probability 1.
"""

from __future__ import annotations

import operator
from typing import Literal, Protocol

from oddkit._bits import MASK64

SamplingMethod = Literal["lemire", "modulo"]
SAMPLING_METHODS: tuple[str, ...] = ("lemire", "modulo")


class BitGenerator(Protocol):
    """Anything that yields uniformly distributed 64-bit words."""

    def next_u64(self) -> int:
        """Return the next 64-bit draw."""
        ...


def is_power_of_two(value: int) -> bool:
    """Return True if *value* is a positive power of two."""
    return value > 0 and (value & (value - 1)) == 0


def _check_bound(bound: int) -> int:
    try:
        bound = operator.index(bound)
    except TypeError:
        raise TypeError(f"bound must be an integer, got {type(bound).__name__}") from None
    if bound < 0 or bound > MASK64:
        raise ValueError(f"bound must be in [0, 2**64), got {bound}")
    return bound


def _lemire(rng: BitGenerator, bound: int) -> int:
    # 2**64 mod bound, computed as (-bound) mod bound in 64-bit arithmetic.
    threshold = ((-bound) & MASK64) % bound
    while True:
        m = rng.next_u64() * bound
        if (m & MASK64) >= threshold:
            return m >> 64


def _modulo(rng: BitGenerator, bound: int) -> int:
    limit = (MASK64 // bound) * bound
    while True:
        x = rng.next_u64()
        if x < limit:
            return x % bound


_SAMPLERS = {
    "lemire": _lemire,
    "modulo": _modulo,
}


def uniform_bounded(
    rng: BitGenerator, bound: int, method: SamplingMethod = "lemire"
) -> int:
    """
    Draw an integer uniformly from ``[0, bound)``.

    Args:
        rng: The generator to draw from. It is advanced by at least one draw
            unless bound is 0.
        bound: Exclusive upper limit in ``[0, 2**64)``. A bound of 0 is
            degenerate and returns 0 without drawing.
        method: "lemire" (default) or "modulo" for non-power-of-two bounds.

    Returns:
        An integer in ``[0, bound)``, or 0 when bound is 0.

    Raises:
        ValueError: If bound is outside the 64-bit unsigned range or the
            method is unknown.
        TypeError: If bound is not an integer.

    Example:
        rng = Xoshiro256StarStar(42)
        face = uniform_bounded(rng, 6) + 1
    """
    bound = _check_bound(bound)
    try:
        sampler = _SAMPLERS[method]
    except KeyError:
        raise ValueError(
            f"Unknown sampling method {method!r}. "
            f"Available methods: {', '.join(SAMPLING_METHODS)}"
        ) from None

    if bound == 0:
        return 0
    if is_power_of_two(bound):
        return rng.next_u64() & (bound - 1)
    return sampler(rng, bound)


def one_in(rng: BitGenerator, bound: int) -> bool:
    """
    Return True with probability ``1 / bound``.

    Bounds of 0 and 1 are treated as certainties and return True without
    drawing. "1 in 0" is kept as True for compatibility with existing
    callers even though it has no mathematical meaning.

    Raises:
        ValueError: If bound is outside the 64-bit unsigned range.
        TypeError: If bound is not an integer.
    """
    bound = _check_bound(bound)
    if bound <= 1:
        return True
    return uniform_bounded(rng, bound) == 0
