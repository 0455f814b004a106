"""
Fixed-width word helpers (internal).

Python integers are unbounded, so every 64-bit operation in the package
goes through these helpers to reduce results modulo 2**64.
"""

from __future__ import annotations

MASK64 = (1 << 64) - 1
MASK32 = (1 << 32) - 1


def u64(value: int) -> int:
    """Reduce an integer to its low 64 bits."""
    return value & MASK64


def rotl64(value: int, k: int) -> int:
    """Rotate a 64-bit word left by *k* bits (0 < k < 64)."""
    return ((value << k) & MASK64) | (value >> (64 - k))
