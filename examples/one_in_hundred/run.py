"""
Minimal Working Example: a "1 in 100" chance rolled a million times.

Usage:
    python examples/one_in_hundred/run.py

This demonstrates the core oddkit workflow:
- Open a seeded generator scope
- Roll presets and ad-hoc odds against it
"""

import oddkit

TRIALS = 1_000_000

if __name__ == "__main__":
    # generator_scope(): every preset inside the block draws from this
    # generator. Seeding makes the whole run reproducible.
    with oddkit.generator_scope(seed=1337):
        hits = sum(1 for _ in range(TRIALS) if oddkit.P100())
        print(f"1 in 100 hits: {hits}")

        # one_in() also accepts any denominator directly
        if oddkit.one_in(oddkit.current_generator(), 37):
            print("Lucky 37 triggered.")
