"""
Seeds module: seed expansion, entropy, and deterministic derivation.

Provides:

- SplitMix64 / expand_seed: Expand one 64-bit seed into generator state
- entropy_seed: Non-deterministic seed from platform entropy
- SeedBundle / derive_seed: Named streams derived from a root seed
- SeedPlan: One generator per concurrent worker
"""

from oddkit.seeds.bundle import SeedBundle, derive_seed
from oddkit.seeds.entropy import entropy_seed
from oddkit.seeds.plan import SeedPlan
from oddkit.seeds.splitmix import SplitMix64, expand_seed

__all__ = [
    "SeedBundle",
    "SeedPlan",
    "SplitMix64",
    "derive_seed",
    "entropy_seed",
    "expand_seed",
]
