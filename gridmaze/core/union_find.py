"""Flat-array disjoint-set forest with path compression and union by rank."""

from __future__ import annotations


class UnionFind:
    """
    Disjoint sets over the integers ``0 .. size - 1``.

    Cells map to indices row-major (``y * width + x``).
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"UnionFind size must be positive, got {size}")
        self.parent = list(range(size))
        self.rank = [0] * size
        self.components = size

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]

        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1

        self.components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
