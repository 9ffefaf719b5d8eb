"""CLI entry point for percolation-lab tool."""

import logging

import click

from percolation_lab.commands import complete, simulate


@click.group()
@click.version_option(version="0.1.0", prog_name="percolation-lab")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(verbose: bool):
    """Union-Find and Percolation Toolkit.

    Estimate percolation thresholds and run prefix autocomplete queries.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


# Register commands
main.add_command(simulate.simulate)
main.add_command(simulate.run)
main.add_command(complete.complete)


if __name__ == "__main__":
    main()
