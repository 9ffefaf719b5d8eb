"""Core configuration for percolation-lab."""
