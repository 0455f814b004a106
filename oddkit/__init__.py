"""
oddkit: "1 in N" odds on a seedable xoshiro256** generator.

A Xoshiro256StarStar generator is seeded through SplitMix64 and produces a
reproducible stream of 64-bit words. uniform_bounded() turns that stream
into integers in [0, bound) without modulo bias, and one_in() answers
"did the 1 in N chance hit?".

Example:
    import oddkit

    rng = oddkit.Xoshiro256StarStar(1337)
    hits = sum(oddkit.one_in(rng, 100) for _ in range(1_000_000))

    # Named presets, drawing from an explicitly scoped generator
    with oddkit.generator_scope(seed=1337):
        if oddkit.P100():
            print("1% event")

    # Independent streams per system or worker
    bundle = oddkit.SeedBundle(root_seed=42)
    loot = bundle.generator("loot")
"""

__version__ = "0.1.0"

# Config
from oddkit.config import OddkitConfig

# Scoped generator
from oddkit.context import (
    NoGeneratorError,
    current_generator,
    generator_scope,
    reseed_current,
    use_generator,
)

# Generator
from oddkit.generator import Xoshiro256StarStar

# Presets
from oddkit.presets import (
    P2,
    P3,
    P4,
    P5,
    P6,
    P8,
    P10,
    P12,
    P16,
    P20,
    P25,
    P30,
    P50,
    P60,
    P100,
    P128,
    P256,
    PRESETS,
    Odds,
    one_in_2,
    one_in_5,
    one_in_10,
    one_in_25,
    one_in_50,
    one_in_100,
    preset,
)

# Sampling
from oddkit.sampling import SAMPLING_METHODS, is_power_of_two, one_in, uniform_bounded

# Seeds
from oddkit.seeds import SeedBundle, SeedPlan, SplitMix64, derive_seed, entropy_seed, expand_seed

# Statistics
from oddkit.stats import HitRate, UniformityReport, chi_squared_uniform, hit_rate

__all__ = [
    # Version
    "__version__",
    # Generator
    "Xoshiro256StarStar",
    # Seeds
    "SplitMix64",
    "expand_seed",
    "entropy_seed",
    "SeedBundle",
    "SeedPlan",
    "derive_seed",
    # Sampling
    "SAMPLING_METHODS",
    "uniform_bounded",
    "one_in",
    "is_power_of_two",
    # Presets
    "Odds",
    "PRESETS",
    "preset",
    "P2",
    "P3",
    "P4",
    "P5",
    "P6",
    "P8",
    "P10",
    "P12",
    "P16",
    "P20",
    "P25",
    "P30",
    "P50",
    "P60",
    "P100",
    "P128",
    "P256",
    "one_in_2",
    "one_in_5",
    "one_in_10",
    "one_in_25",
    "one_in_50",
    "one_in_100",
    # Scoped generator
    "use_generator",
    "generator_scope",
    "current_generator",
    "reseed_current",
    "NoGeneratorError",
    # Statistics
    "chi_squared_uniform",
    "hit_rate",
    "HitRate",
    "UniformityReport",
    # Config
    "OddkitConfig",
]
