"""Union-Find (disjoint set) strategies.

This package provides:
- UnionFind: the abstract contract shared by every strategy
- QuickFindUnionFind: O(1) find, O(n) union baseline
- WeightedPathHalvingUnionFind: union by size with path halving
- get_strategy: lookup of a strategy class by name
"""

from percolation_lab.unionfind.base import UnionFind
from percolation_lab.unionfind.quick_find import QuickFindUnionFind
from percolation_lab.unionfind.registry import DEFAULT_STRATEGY, STRATEGIES, get_strategy
from percolation_lab.unionfind.weighted_halving import WeightedPathHalvingUnionFind

__all__ = [
    "UnionFind",
    "QuickFindUnionFind",
    "WeightedPathHalvingUnionFind",
    "DEFAULT_STRATEGY",
    "STRATEGIES",
    "get_strategy",
]
