"""Quick-find Union-Find: constant-time find, linear-time union."""

from percolation_lab.unionfind.base import UnionFind


class QuickFindUnionFind(UnionFind):
    """Union-Find storing the component label of every site directly.

    ``parent[p]`` is the label of p's component rather than a tree parent,
    so ``find`` is a single lookup and ``union`` relabels the whole
    universe. Useful as a baseline against the tree-based strategies.
    """

    def find(self, p: int) -> int:
        self._validate(p)
        return self.parent[p]

    def union(self, p: int, q: int) -> None:
        """Relabel every site of p's component with q's label.

        Args:
            p: Site from first component.
            q: Site from second component.
        """
        p_label = self.find(p)
        q_label = self.find(q)
        if p_label == q_label:
            return

        for site, label in enumerate(self.parent):
            if label == p_label:
                self.parent[site] = q_label
        self._components -= 1
