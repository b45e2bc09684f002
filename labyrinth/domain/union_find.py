"""Disjoint-set structure used by Kruskal's maze generation."""

from typing import Dict, Iterable
from .types import Coord


class UnionFind:
    """
    Union-Find over grid coordinates with path compression and union by rank.
    Lives for a single generation call.
    """

    def __init__(self, cells: Iterable[Coord] = ()):
        self._parent: Dict[Coord, Coord] = {}
        self._rank: Dict[Coord, int] = {}
        for cell in cells:
            self.add(cell)

    def add(self, cell: Coord) -> None:
        """Register a cell as its own singleton set."""
        if cell not in self._parent:
            self._parent[cell] = cell
            self._rank[cell] = 0

    def find(self, cell: Coord) -> Coord:
        """Return the representative of the cell's set."""
        root = cell
        while self._parent[root] != root:
            root = self._parent[root]

        # Compress the path walked above
        while cell != root:
            next_cell = self._parent[cell]
            self._parent[cell] = root
            cell = next_cell

        return root

    def union(self, a: Coord, b: Coord) -> bool:
        """
        Merge the sets containing a and b.
        Returns False if they were already in the same set.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        return True

    def connected(self, a: Coord, b: Coord) -> bool:
        return self.find(a) == self.find(b)

    def __contains__(self, cell: Coord) -> bool:
        return cell in self._parent

    def __len__(self) -> int:
        return len(self._parent)
