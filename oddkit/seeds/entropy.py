"""
Entropy seeding for non-deterministic generators.

Platform randomness quality varies, so several independent pulls are
combined with rotations instead of trusting a single one.
"""

from __future__ import annotations

import secrets

from oddkit._bits import rotl64

ENTROPY_SALT = 0xD6E8FEB86659FD93


def _pull_u64() -> int:
    return (secrets.randbits(32) << 32) ^ secrets.randbits(32)


def entropy_seed() -> int:
    """Return a fresh 64-bit seed mixed from three entropy pulls."""
    a = _pull_u64()
    b = _pull_u64()
    c = _pull_u64()
    return a ^ rotl64(b, 21) ^ rotl64(c, 43) ^ ENTROPY_SALT
