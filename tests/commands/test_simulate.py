"""Tests for simulate and run commands."""

from click.testing import CliRunner
import pytest

from percolation_lab.commands.simulate import run, simulate


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


class TestSimulate:
    """Tests for the simulate command."""

    def test_simulate(self, runner):
        """Test a small seeded simulation prints the statistics table."""
        result = runner.invoke(simulate, ["--size", "5", "--trials", "4", "--seed", "1"])

        assert result.exit_code == 0
        assert "Simulating" in result.output
        assert "Percolation Threshold" in result.output
        assert "mean" in result.output
        assert "confidence interval" in result.output
        assert "Simulation complete!" in result.output

    def test_simulate_reproducible(self, runner):
        """Test the same seed prints the same table."""
        args = ["-n", "6", "-t", "3", "--seed", "99"]
        first = runner.invoke(simulate, args)
        second = runner.invoke(simulate, args)

        assert first.exit_code == 0
        table = first.output[first.output.index("Percolation Threshold") :]
        assert table in second.output

    def test_simulate_quick_find(self, runner):
        """Test selecting the quick-find strategy."""
        result = runner.invoke(simulate, ["-n", "4", "-t", "2", "--strategy", "quick-find"])

        assert result.exit_code == 0
        assert "quick-find" in result.output

    def test_simulate_invalid_size(self, runner):
        """Test non-positive grid size aborts with an error."""
        result = runner.invoke(simulate, ["--size", "0"])

        assert result.exit_code != 0
        assert "Error" in result.output

    def test_simulate_unknown_strategy(self, runner):
        """Test unknown strategy is rejected by click."""
        result = runner.invoke(simulate, ["--strategy", "bogus"])

        assert result.exit_code != 0


class TestRun:
    """Tests for the run command."""

    def test_run_draws_grid(self, runner):
        """Test a single trial draws one line per row."""
        result = runner.invoke(run, ["--size", "4", "--seed", "3"])

        assert result.exit_code == 0
        grid_lines = [line for line in result.output.splitlines() if line.startswith("|")]
        assert len(grid_lines) == 4
        assert all(len(line) == 6 for line in grid_lines)
        assert "Open sites:" in result.output

    def test_run_marks_full_cells(self, runner):
        """Test a percolating grid has full cells in the top row."""
        result = runner.invoke(run, ["-n", "3", "--seed", "0"])

        assert result.exit_code == 0
        first_row = next(line for line in result.output.splitlines() if line.startswith("|"))
        assert "#" in first_row

    def test_run_invalid_size(self, runner):
        """Test negative grid size aborts with an error."""
        result = runner.invoke(run, ["--size=-2"])

        assert result.exit_code != 0
        assert "Error" in result.output
