"""Registry of Union-Find strategies selectable by name."""

from percolation_lab.unionfind.base import UnionFind
from percolation_lab.unionfind.quick_find import QuickFindUnionFind
from percolation_lab.unionfind.weighted_halving import WeightedPathHalvingUnionFind

DEFAULT_STRATEGY = "weighted-halving"

STRATEGIES: dict[str, type[UnionFind]] = {
    "quick-find": QuickFindUnionFind,
    "weighted-halving": WeightedPathHalvingUnionFind,
}


def get_strategy(name: str) -> type[UnionFind]:
    """Get a Union-Find strategy class by its name.

    Args:
        name: Strategy name (e.g., "weighted-halving")

    Returns:
        The UnionFind subclass registered under name

    Raises:
        ValueError: If name is not registered
    """
    if name not in STRATEGIES:
        available = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown strategy: {name!r}. Available: {available}")
    return STRATEGIES[name]
