"""
Example: one generator per worker thread.

Usage:
    python examples/worker_streams/run.py

Generators are not thread-safe. A SeedPlan derives an independent,
reproducible generator for each worker from a single base seed.
"""

from concurrent.futures import ThreadPoolExecutor

import oddkit

WORKERS = 4
TRIALS = 250_000


def count_crits(rng: oddkit.Xoshiro256StarStar) -> int:
    # Each worker opens its own scope; scopes never leak across threads.
    with oddkit.use_generator(rng):
        return sum(1 for _ in range(TRIALS) if oddkit.P20())


if __name__ == "__main__":
    plan = oddkit.SeedPlan(base=42, workers=WORKERS)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        counts = list(pool.map(count_crits, plan.generators("crits")))

    for worker, count in enumerate(counts):
        print(f"worker {worker}: {count} crits in {TRIALS:,} rolls")
    print(f"total: {sum(counts)} (expected about {WORKERS * TRIALS // 20})")
