"""Abstract Union-Find (Disjoint Set Union) contract.

Every strategy tracks a fixed universe of dense integer sites ``0..n-1``
and answers connectivity queries over the unions performed so far.
"""

from abc import ABC, abstractmethod
from numbers import Integral


class UnionFind(ABC):
    """Union-Find over a fixed universe of ``n`` integer sites.

    Subclasses decide how components are represented; callers only rely on
    ``find``, ``union``, ``connected`` and ``count``.

    Attributes:
        parent: List mapping each site to its parent (or component label).
    """

    def __init__(self, n: int) -> None:
        """Initialize ``n`` singleton components.

        Args:
            n: Number of sites.

        Raises:
            ValueError: If n is not a non-negative integer.
        """
        if not isinstance(n, Integral) or isinstance(n, bool) or n < 0:
            raise ValueError(f"Number of sites must be a non-negative integer, got {n!r}")
        self.parent: list[int] = list(range(n))
        self._components = n

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={len(self)}, components={self._components})"

    def _validate(self, p: int) -> None:
        """Raise IndexError unless p is a site of this universe."""
        if not isinstance(p, Integral) or isinstance(p, bool) or not 0 <= p < len(self.parent):
            raise IndexError(f"Site {p!r} is not in range [0, {len(self.parent)})")

    @abstractmethod
    def find(self, p: int) -> int:
        """Return the representative of the component containing p.

        May rewrite internal bookkeeping, but never changes which sites
        share a component.
        """
        pass

    @abstractmethod
    def union(self, p: int, q: int) -> None:
        """Merge the components containing p and q.

        Unioning two already connected sites leaves the structure and
        ``count()`` unchanged.
        """
        pass

    def connected(self, p: int, q: int) -> bool:
        """Check if p and q are in the same component.

        Args:
            p: First site.
            q: Second site.

        Returns:
            True if p and q are in the same component, False otherwise.
        """
        return self.find(p) == self.find(q)

    def count(self) -> int:
        """Get number of distinct components."""
        return self._components
