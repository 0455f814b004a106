"""
SeedBundle: named, independent generator streams from one root seed.

Systems that share a single generator become coupled through call order:
adding one draw in system A shifts every later draw in system B. A
SeedBundle hashes the root seed, a worker number and a stream name into a
separate 64-bit seed, so each system owns its own stream while the whole
run stays reproducible from the root.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from oddkit._bits import u64

if TYPE_CHECKING:
    from oddkit.generator import Xoshiro256StarStar


def derive_seed(root_seed: int, name: str, worker: int = 0) -> int:
    """
    Hash (root_seed, worker, name) into a 64-bit stream seed.

    SHA-256 keeps the result identical across platforms and processes,
    unlike the salted built-in hash().
    """
    if worker < 0:
        raise ValueError(f"worker must be non-negative, got {worker}")
    payload = (
        u64(root_seed).to_bytes(8, "big")
        + worker.to_bytes(4, "big")
        + name.encode("utf-8")
    )
    return int.from_bytes(hashlib.sha256(payload).digest()[:8], "big")


@dataclass(frozen=True)
class SeedBundle:
    """
    Root seed plus worker number; hands out one generator per stream name.

    Attributes:
        root_seed: Seed every stream is derived from.
        worker: Worker (thread, task, replicate) the bundle belongs to.

    Example:
        bundle = SeedBundle(root_seed=42)
        loot = bundle.generator("loot")
        spawns = bundle.generator("spawns")
    """

    root_seed: int
    worker: int = 0

    def __post_init__(self) -> None:
        if self.worker < 0:
            raise ValueError(f"worker must be non-negative, got {self.worker}")

    def derive(self, name: str) -> int:
        """The 64-bit seed of stream *name*."""
        return derive_seed(self.root_seed, name, self.worker)

    def generator(self, name: str = "default") -> Xoshiro256StarStar:
        """A fresh generator positioned at the start of stream *name*."""
        from oddkit.generator import Xoshiro256StarStar

        return Xoshiro256StarStar(self.derive(name))

    def for_worker(self, worker: int) -> SeedBundle:
        """The same root seed, bound to another worker."""
        return replace(self, worker=worker)
