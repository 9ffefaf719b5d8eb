"""Tests for Monte Carlo percolation threshold estimation."""

import numpy as np
import pytest

from percolation_lab.percolation import Percolation
from percolation_lab.stats import PercolationStats, open_until_percolates, run_trial
from percolation_lab.unionfind import QuickFindUnionFind


class TestRunTrial:
    """Test single percolation experiments."""

    def test_stops_at_percolation(self):
        """Test the grid percolates after the trial and was not opened further."""
        perc = Percolation(5)
        open_until_percolates(perc, np.random.default_rng(7))
        assert perc.percolates()
        assert 0 < perc.number_of_open_sites() <= 25

    def test_two_by_two_thresholds(self):
        """Test a 2x2 grid needs two or three open cells."""
        rng = np.random.default_rng(0)
        for _ in range(20):
            assert run_trial(2, rng=rng) in (0.5, 0.75)

    def test_single_cell(self):
        """Test a 1x1 grid always opens its only cell."""
        assert run_trial(1, rng=np.random.default_rng(3)) == 1.0

    def test_default_rng(self):
        """Test a trial runs without an explicit generator."""
        threshold = run_trial(4)
        assert 0 < threshold <= 1


class TestPercolationStats:
    """Test threshold statistics over many trials."""

    def test_invalid_arguments(self):
        """Test non-positive dimension or trial count raises ValueError."""
        with pytest.raises(ValueError):
            PercolationStats(0, 10)
        with pytest.raises(ValueError):
            PercolationStats(5, 0)

    @pytest.mark.parametrize("n,trials", [(2.5, 10), (5, 1.5), ("5", 10), (5, True)])
    def test_non_integer_arguments(self, n, trials):
        """Test non-integer dimension or trial count raises ValueError."""
        with pytest.raises(ValueError, match="must be a positive integer"):
            PercolationStats(n, trials)

    def test_reproducible_with_seed(self):
        """Test equal seeds give equal thresholds."""
        first = PercolationStats(6, 10, seed=42)
        second = PercolationStats(6, 10, seed=42)
        np.testing.assert_array_equal(first.thresholds, second.thresholds)

    def test_strategies_agree(self):
        """Test quick-find produces the same thresholds for the same seed."""
        weighted = PercolationStats(5, 8, seed=11)
        quick = PercolationStats(5, 8, strategy=QuickFindUnionFind, seed=11)
        np.testing.assert_array_equal(weighted.thresholds, quick.thresholds)

    def test_thresholds_in_range(self):
        """Test every threshold is a fraction of opened cells in (0, 1]."""
        result = PercolationStats(8, 15, seed=1)
        assert result.thresholds.shape == (15,)
        assert np.all(result.thresholds > 0)
        assert np.all(result.thresholds <= 1)

    def test_statistics(self):
        """Test mean, stddev and confidence interval against numpy."""
        result = PercolationStats(10, 20, seed=5)
        mean = float(np.mean(result.thresholds))
        stddev = float(np.std(result.thresholds, ddof=1))
        half_width = 1.96 * stddev / np.sqrt(20)

        assert result.mean() == pytest.approx(mean)
        assert result.stddev() == pytest.approx(stddev)
        assert result.confidence_lo() == pytest.approx(mean - half_width)
        assert result.confidence_hi() == pytest.approx(mean + half_width)
        assert result.confidence_lo() <= result.mean() <= result.confidence_hi()

    def test_single_trial(self):
        """Test a single trial has zero spread."""
        result = PercolationStats(4, 1, seed=2)
        assert result.stddev() == 0.0
        assert result.confidence_lo() == result.mean() == result.confidence_hi()

    def test_on_trial_callback(self):
        """Test the callback sees every trial in order."""
        seen = []
        result = PercolationStats(3, 5, seed=9, on_trial=lambda i, t: seen.append((i, t)))
        assert [i for i, _ in seen] == [0, 1, 2, 3, 4]
        assert [t for _, t in seen] == pytest.approx(list(result.thresholds))

    def test_large_grid_near_known_threshold(self):
        """Test the estimate lands near the site percolation threshold (~0.593)."""
        result = PercolationStats(30, 30, seed=123)
        assert 0.5 < result.mean() < 0.7
