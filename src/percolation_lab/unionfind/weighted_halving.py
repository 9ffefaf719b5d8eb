"""Weighted Union-Find with path halving.

Union by size keeps trees shallow, and every ``find`` rewrites the parent
pointers it walks over so later lookups take roughly half as many steps.
"""

from percolation_lab.unionfind.base import UnionFind


class WeightedPathHalvingUnionFind(UnionFind):
    """Union-Find with union by size and path halving.

    Attributes:
        parent: List mapping each site to its parent in the tree structure.
        size: List mapping each root to the number of sites in its tree.
            Entries for non-root sites are 0.
    """

    def __init__(self, n: int) -> None:
        super().__init__(n)
        self.size: list[int] = [1] * n

    def find(self, p: int) -> int:
        """Find root of site p with path halving.

        Path halving: each visited node is re-pointed at its grandparent
        while walking up, so the path shrinks on every call.

        Args:
            p: Site to find the root of.

        Returns:
            The root site of the tree containing p.
        """
        self._validate(p)
        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def union(self, p: int, q: int) -> None:
        """Union the trees containing p and q.

        The smaller tree is attached under the root of the larger one. On a
        tie, p's root absorbs q's root.

        Args:
            p: Site from first tree.
            q: Site from second tree.
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return

        if self.size[root_p] < self.size[root_q]:
            root_p, root_q = root_q, root_p

        self.parent[root_q] = root_p
        self.size[root_p] += self.size[root_q]
        self.size[root_q] = 0
        self._components -= 1
