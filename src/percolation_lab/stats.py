"""Monte Carlo estimation of the percolation threshold."""

import logging
import math
from numbers import Integral
from typing import Callable

import numpy as np

from percolation_lab.percolation import Percolation
from percolation_lab.unionfind.base import UnionFind
from percolation_lab.unionfind.weighted_halving import WeightedPathHalvingUnionFind

logger = logging.getLogger(__name__)

CONFIDENCE_95 = 1.96


def open_until_percolates(perc: Percolation, rng: np.random.Generator) -> None:
    """Open cells of perc in uniformly random order until it percolates.

    At least one cell is opened even if the grid percolates up front
    (a 1x1 grid does, since its only cell is wired to both virtual sites).
    """
    n = perc.n
    for site in rng.permutation(n * n):
        row, col = divmod(int(site), n)
        perc.open(row, col)
        if perc.percolates():
            break


def run_trial(
    n: int,
    strategy: type[UnionFind] = WeightedPathHalvingUnionFind,
    rng: np.random.Generator | None = None,
) -> float:
    """Open random cells of a fresh grid until it percolates.

    Args:
        n: Grid dimension
        strategy: UnionFind subclass backing the grid
        rng: Random generator; a fresh unseeded one is used if None

    Returns:
        Fraction of cells that were open when the grid first percolated
    """
    if rng is None:
        rng = np.random.default_rng()

    perc = Percolation(n, strategy)
    open_until_percolates(perc, rng)
    return perc.number_of_open_sites() / (n * n)


class PercolationStats:
    """Repeated percolation experiments on an n-by-n grid.

    Attributes:
        n: Grid dimension.
        trials: Number of independent experiments.
        thresholds: Open-site fraction at which each trial percolated.
    """

    def __init__(
        self,
        n: int,
        trials: int,
        strategy: type[UnionFind] = WeightedPathHalvingUnionFind,
        seed: int | None = None,
        confidence_z: float = CONFIDENCE_95,
        on_trial: Callable[[int, float], None] | None = None,
    ) -> None:
        """Run all trials up front.

        Args:
            n: Grid dimension, must be positive.
            trials: Number of experiments, must be positive.
            strategy: UnionFind subclass backing each grid.
            seed: Seed for the random generator, for reproducible runs.
            confidence_z: z-score used for the confidence interval.
            on_trial: Called with (trial index, threshold) after each trial.

        Raises:
            ValueError: If n or trials is not a positive integer.
        """
        for name, value in (("Grid dimension", n), ("Number of trials", trials)):
            if not isinstance(value, Integral) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

        self.n = n
        self.trials = trials
        self.confidence_z = confidence_z

        rng = np.random.default_rng(seed)
        thresholds = np.empty(trials, dtype=float)
        for trial in range(trials):
            thresholds[trial] = run_trial(n, strategy, rng)
            logger.debug(f"Trial {trial + 1}/{trials}: threshold={thresholds[trial]:.4f}")
            if on_trial is not None:
                on_trial(trial, float(thresholds[trial]))
        self.thresholds = thresholds

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        """Sample standard deviation of the percolation threshold.

        A single trial has no spread, so 0.0 is returned for it.
        """
        if self.trials == 1:
            return 0.0
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        return self.confidence_z * self.stddev() / math.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the confidence interval."""
        return self.mean() + self._half_width()
