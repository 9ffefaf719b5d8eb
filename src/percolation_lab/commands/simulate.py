"""Simulation commands for percolation experiments."""

import click
import numpy as np
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from percolation_lab.core.config import SimulationConfig
from percolation_lab.error.cmd import handle_command_errors
from percolation_lab.percolation import Percolation
from percolation_lab.stats import PercolationStats, open_until_percolates
from percolation_lab.unionfind.registry import DEFAULT_STRATEGY, STRATEGIES

console = Console()

strategy_option = click.option(
    "--strategy",
    "-s",
    type=click.Choice(sorted(STRATEGIES)),
    default=DEFAULT_STRATEGY,
    show_default=True,
    help="Union-Find strategy backing the grid",
)
seed_option = click.option("--seed", type=int, help="Random seed for reproducible runs")


@click.command()
@click.option("--size", "-n", type=int, default=20, show_default=True, help="Grid dimension")
@click.option("--trials", "-t", type=int, default=30, show_default=True, help="Number of trials")
@strategy_option
@seed_option
@handle_command_errors
def simulate(size: int, trials: int, strategy: str, seed: int | None):
    """Estimate the percolation threshold with Monte Carlo trials.

    Each trial opens random cells of an empty SIZE x SIZE grid until the
    top row connects to the bottom row.
    """
    config = SimulationConfig(grid_size=size, trials=trials, strategy=strategy, seed=seed)
    console.print(
        f"[bold blue]Simulating:[/bold blue] {config.grid_size}x{config.grid_size} grid, "
        f"{config.trials} trials ({config.strategy})"
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Running trials...", total=config.trials)
        result = PercolationStats(
            config.grid_size,
            config.trials,
            strategy=config.strategy_class(),
            seed=config.seed,
            confidence_z=config.confidence_z,
            on_trial=lambda trial, threshold: progress.advance(task),
        )

    table = Table(title="Percolation Threshold")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("mean", f"{result.mean():.6f}")
    table.add_row("stddev", f"{result.stddev():.6f}")
    interval = f"[{result.confidence_lo():.6f}, {result.confidence_hi():.6f}]"
    table.add_row("confidence interval", escape(interval))

    console.print(table)
    console.print("[bold green]✓[/bold green] Simulation complete!")


@click.command()
@click.option("--size", "-n", type=int, default=10, show_default=True, help="Grid dimension")
@strategy_option
@seed_option
@handle_command_errors
def run(size: int, strategy: str, seed: int | None):
    """Run a single trial and draw the grid when it percolates.

    Full cells are drawn as '#', open cells as '.', blocked cells as ' '.
    """
    config = SimulationConfig(grid_size=size, trials=1, strategy=strategy, seed=seed)
    n = config.grid_size
    perc = Percolation(n, config.strategy_class())

    open_until_percolates(perc, np.random.default_rng(config.seed))

    for row in range(n):
        cells = []
        for col in range(n):
            if perc.is_full(row, col):
                cells.append("[blue]#[/blue]")
            elif perc.is_open(row, col):
                cells.append(".")
            else:
                cells.append(" ")
        console.print("|" + "".join(cells) + "|", highlight=False)

    threshold = perc.number_of_open_sites() / (n * n)
    console.print(
        f"[bold]Open sites:[/bold] {perc.number_of_open_sites()}/{n * n} "
        f"(threshold {threshold:.4f})",
        highlight=False,
    )
