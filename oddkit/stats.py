"""
Statistical checks for bounded sampling and "1 in N" odds.

These are the tools behind the uniformity tests and the ``oddkit check``
and ``oddkit roll`` commands. They are sanity checks, not a substitute for
a full test battery such as TestU01 or PractRand.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from statistics import NormalDist
from typing import Any, Callable

import numpy as np

from oddkit.sampling import SamplingMethod, one_in, uniform_bounded


@dataclass(frozen=True)
class UniformityReport:
    """
    Result of a chi-squared goodness-of-fit test against uniform.

    Attributes:
        bound: Number of categories tested (samples lie in [0, bound)).
        samples: Number of samples.
        statistic: The chi-squared statistic.
        dof: Degrees of freedom (bound - 1).
        critical: Critical value at significance *alpha*.
        alpha: Significance level.
        min_count: Smallest observed category count.
        max_count: Largest observed category count.
    """

    bound: int
    samples: int
    statistic: float
    dof: int
    critical: float
    alpha: float
    min_count: int
    max_count: int

    @property
    def passed(self) -> bool:
        """True if uniformity is not rejected at level alpha."""
        return self.statistic <= self.critical

    def to_dict(self) -> dict[str, Any]:
        return {
            "bound": self.bound,
            "samples": self.samples,
            "statistic": self.statistic,
            "dof": self.dof,
            "critical": self.critical,
            "alpha": self.alpha,
            "min_count": self.min_count,
            "max_count": self.max_count,
            "passed": self.passed,
        }


@dataclass(frozen=True)
class HitRate:
    """Observed hits for a "1 in N" predicate over a number of trials."""

    denominator: int
    hits: int
    trials: int

    @property
    def probability(self) -> float:
        """Hit probability of one roll. Denominators 0 and 1 always hit."""
        return 1.0 if self.denominator <= 1 else 1.0 / self.denominator

    @property
    def expected(self) -> float:
        """Expected number of hits."""
        return self.trials * self.probability

    @property
    def rate(self) -> float:
        """Observed hit fraction."""
        return self.hits / self.trials if self.trials else 0.0

    def within(self, tolerance: float) -> bool:
        """True if the observed rate is within *tolerance* of ``probability``."""
        return abs(self.rate - self.probability) <= tolerance


def chi_squared_critical(dof: int, alpha: float) -> float:
    """
    Upper critical value of the chi-squared distribution.

    Exact for dof 1 (square of a normal) and dof 2 (exponential with mean 2).
    Larger dof use the Wilson-Hilferty cube-root normal approximation, which
    is within a few percent at dof 3 and under 1% from about dof = 10 on.
    """
    if dof < 1:
        raise ValueError(f"dof must be >= 1, got {dof}")
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")
    if dof == 1:
        return NormalDist().inv_cdf(1.0 - alpha / 2.0) ** 2
    if dof == 2:
        return -2.0 * math.log(alpha)
    z = NormalDist().inv_cdf(1.0 - alpha)
    h = 2.0 / (9.0 * dof)
    return dof * (1.0 - h + z * math.sqrt(h)) ** 3


def chi_squared_uniform(
    samples: np.ndarray | list[int], bound: int, alpha: float = 0.001
) -> UniformityReport:
    """
    Test whether *samples* are uniformly distributed over ``[0, bound)``.

    Args:
        samples: Integer samples.
        bound: Number of categories; must be at least 2.
        alpha: Significance level (default: 0.001).

    Returns:
        A UniformityReport.

    Raises:
        ValueError: If bound < 2, samples is empty, or a sample lies outside
            ``[0, bound)``.
    """
    if bound < 2:
        raise ValueError(f"bound must be >= 2, got {bound}")
    values = np.asarray(samples, dtype=np.int64)
    if values.size == 0:
        raise ValueError("samples must not be empty")
    if values.min() < 0 or values.max() >= bound:
        raise ValueError(f"samples must lie in [0, {bound})")

    counts = np.bincount(values, minlength=bound)
    expected = values.size / bound
    statistic = float(((counts - expected) ** 2).sum() / expected)
    dof = bound - 1

    return UniformityReport(
        bound=bound,
        samples=int(values.size),
        statistic=statistic,
        dof=dof,
        critical=chi_squared_critical(dof, alpha),
        alpha=alpha,
        min_count=int(counts.min()),
        max_count=int(counts.max()),
    )


def sample_uniform(
    rng: Any,
    bound: int,
    count: int,
    method: SamplingMethod = "lemire",
) -> np.ndarray:
    """Draw *count* bounded samples into a ``uint64`` array."""
    return np.fromiter(
        (uniform_bounded(rng, bound, method) for _ in range(count)),
        dtype=np.uint64,
        count=count,
    )


def hit_rate(
    rng: Any,
    denominator: int,
    trials: int,
    on_progress: Callable[[int], None] | None = None,
    progress_every: int = 10_000,
) -> HitRate:
    """
    Count how often ``one_in(rng, denominator)`` is true over *trials* rolls.

    Args:
        rng: The generator to draw from.
        denominator: N in "1 in N".
        trials: Number of rolls.
        on_progress: Optional callback receiving the number of completed
            rolls since the previous call.
        progress_every: How many rolls between progress callbacks.
    """
    hits = 0
    pending = 0
    for _ in range(trials):
        if one_in(rng, denominator):
            hits += 1
        if on_progress is not None:
            pending += 1
            if pending == progress_every:
                on_progress(pending)
                pending = 0
    if on_progress is not None and pending:
        on_progress(pending)
    return HitRate(denominator=denominator, hits=hits, trials=trials)
