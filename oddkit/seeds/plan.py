"""
SeedPlan: one independent generator per concurrent worker.

Generators are not thread-safe, so every thread or task that draws needs
its own. A SeedPlan fixes the number of workers up front and builds each
worker's generator from one base seed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from oddkit.seeds.bundle import SeedBundle

if TYPE_CHECKING:
    from oddkit.generator import Xoshiro256StarStar


class SeedPlan:
    """
    Generators for a fixed pool of workers.

    Indexing returns the worker's "default" stream; generator() picks any
    named stream.

    Example:
        plan = SeedPlan(base=42, workers=4)
        with ThreadPoolExecutor(4) as pool:
            pool.map(simulate, plan.generators("combat"))
    """

    def __init__(self, base: int, workers: int = 1) -> None:
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self._root = SeedBundle(root_seed=base)
        self._workers = workers

    def __len__(self) -> int:
        return self._workers

    def generator(self, worker: int, name: str = "default") -> Xoshiro256StarStar:
        """
        Build worker *worker*'s generator for stream *name*.

        Raises:
            IndexError: If *worker* is outside ``[0, workers)``.
        """
        if not 0 <= worker < self._workers:
            raise IndexError(f"Worker {worker} out of range [0, {self._workers})")
        return self._root.for_worker(worker).generator(name)

    def generators(self, name: str = "default") -> list[Xoshiro256StarStar]:
        """One generator per worker, all for stream *name*."""
        return [self.generator(w, name) for w in range(self._workers)]

    def __getitem__(self, worker: int) -> Xoshiro256StarStar:
        return self.generator(worker)

    def __iter__(self) -> Iterator[Xoshiro256StarStar]:
        return iter(self.generators())
