"""CLI commands for percolation-lab."""
