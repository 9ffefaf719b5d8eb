"""Union-Find strategies, a percolation model built on them, and prefix autocomplete."""

from percolation_lab.percolation import Percolation, site_index
from percolation_lab.stats import PercolationStats
from percolation_lab.unionfind import (
    QuickFindUnionFind,
    UnionFind,
    WeightedPathHalvingUnionFind,
    get_strategy,
)

__version__ = "0.1.0"

__all__ = [
    "Percolation",
    "PercolationStats",
    "QuickFindUnionFind",
    "UnionFind",
    "WeightedPathHalvingUnionFind",
    "get_strategy",
    "site_index",
]
