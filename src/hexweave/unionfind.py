# src/hexweave/unionfind.py
# Disjoint-set forest over grid cells, used by the Kruskal pass.
# Plain root chasing: no path compression or ranks, so the forest shape
# follows the exact order of unions.

from typing import Dict, Hashable, Iterable

Cell = Hashable


class UnionFind:
    def __init__(self, cells: Iterable[Cell] = ()):
        self.parent: Dict[Cell, Cell] = {}
        for c in cells:
            self.add(c)

    def add(self, cell: Cell) -> None:
        self.parent.setdefault(cell, cell)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, cell: Cell) -> Cell:
        parent = self.parent
        while parent[cell] != cell:
            cell = parent[cell]
        return cell

    def connected(self, a: Cell, b: Cell) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: Cell, b: Cell) -> bool:
        """
        Attach b's root under a's root. Returns False (and changes nothing)
        when the two are already in the same set.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[rb] = ra
        return True

    def components(self) -> int:
        return sum(1 for c, p in self.parent.items() if c == p)
