"""Percolation model on an n-by-n grid backed by Union-Find instances.

Two virtual sites are added to the grid: a virtual top wired to every cell of
the first row and a virtual bottom wired to every cell of the last row. The
system percolates exactly when those two virtual sites are connected.

Fullness is answered from a second structure that has the virtual top but no
virtual bottom, so bottom-row cells never become full through the bottom.
"""

import logging
from numbers import Integral

from percolation_lab.unionfind.base import UnionFind
from percolation_lab.unionfind.weighted_halving import WeightedPathHalvingUnionFind

logger = logging.getLogger(__name__)


def site_index(n: int, row: int, col: int) -> int:
    """Map grid coordinates to a Union-Find site.

    Site 0 is reserved for the virtual top, so cells occupy ``1..n*n`` and
    ``n*n + 1`` is left for the virtual bottom.

    Args:
        n: Grid dimension
        row: Row of the cell (0-based)
        col: Column of the cell (0-based)

    Returns:
        Site identifier ``row * n + col + 1``

    Raises:
        IndexError: If row or col is outside [0, n)
    """
    for value in (row, col):
        if not isinstance(value, Integral) or isinstance(value, bool) or not 0 <= value < n:
            raise IndexError(f"Cell ({row!r}, {col!r}) is outside the {n}x{n} grid")
    return row * n + col + 1


class Percolation:
    """n-by-n grid of sites that are opened one by one.

    Attributes:
        n: Grid dimension.
        virtual_top: Site wired to every cell in row 0.
        virtual_bottom: Site wired to every cell in row n - 1.
    """

    def __init__(self, n: int, strategy: type[UnionFind] = WeightedPathHalvingUnionFind) -> None:
        """Create a grid with every cell closed.

        Args:
            n: Grid dimension, must be positive.
            strategy: UnionFind subclass used to track connectivity.

        Raises:
            ValueError: If n is not a positive integer.
        """
        if not isinstance(n, Integral) or isinstance(n, bool) or n <= 0:
            raise ValueError(f"Grid dimension must be a positive integer, got {n!r}")

        self.n = n
        self.virtual_top = 0
        self.virtual_bottom = n * n + 1
        self._uf = strategy(n * n + 2)
        # Same sites minus the virtual bottom; answers is_full only.
        self._full_uf = strategy(n * n + 1)
        self._open = [False] * (n * n + 2)
        self._open[self.virtual_top] = True
        self._open[self.virtual_bottom] = True
        self._open_sites = 0

        for col in range(n):
            self._uf.union(self.virtual_top, site_index(n, 0, col))
            self._uf.union(self.virtual_bottom, site_index(n, n - 1, col))
            self._full_uf.union(self.virtual_top, site_index(n, 0, col))

        logger.debug(f"Created {n}x{n} percolation grid using {strategy.__name__}")

    def __repr__(self) -> str:
        return f"Percolation(n={self.n}, open_sites={self._open_sites})"

    def is_open(self, row: int, col: int) -> bool:
        """Check if the cell at (row, col) has been opened."""
        return self._open[site_index(self.n, row, col)]

    def open(self, row: int, col: int) -> None:
        """Open the cell at (row, col) and connect it to its open neighbors.

        Opening an already open cell only re-checks its neighbors.

        Args:
            row: Row of the cell (0-based)
            col: Column of the cell (0-based)

        Raises:
            IndexError: If (row, col) is outside the grid
        """
        site = site_index(self.n, row, col)
        if not self._open[site]:
            self._open[site] = True
            self._open_sites += 1

        for neighbor_row, neighbor_col in (
            (row - 1, col),
            (row + 1, col),
            (row, col - 1),
            (row, col + 1),
        ):
            if 0 <= neighbor_row < self.n and 0 <= neighbor_col < self.n:
                if self.is_open(neighbor_row, neighbor_col):
                    neighbor = site_index(self.n, neighbor_row, neighbor_col)
                    self._uf.union(site, neighbor)
                    self._full_uf.union(site, neighbor)

    def is_full(self, row: int, col: int) -> bool:
        """Check if the cell at (row, col) is open and connected to the top.

        Only paths of open cells up to row 0 count; the virtual bottom does
        not make bottom-row cells full.
        """
        site = site_index(self.n, row, col)
        return self._open[site] and self._full_uf.connected(site, self.virtual_top)

    def percolates(self) -> bool:
        """Check if the virtual top is connected to the virtual bottom."""
        return self._uf.connected(self.virtual_top, self.virtual_bottom)

    def number_of_open_sites(self) -> int:
        """Get number of grid cells opened so far."""
        return self._open_sites
