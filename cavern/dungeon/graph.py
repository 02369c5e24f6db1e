"""Weighted undirected graph and Kruskal minimum spanning tree."""
from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

from .errors import InternalTopologyError


class Edge(NamedTuple):
    src: int
    dest: int
    weight: int


class MSTResult(NamedTuple):
    mst_edges: List[Edge]
    redundant_edges: List[Edge]


class _DisjointSet:
    __slots__ = ("parent",)

    def __init__(self, size: int):
        self.parent = list(range(size))

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, a: int, b: int) -> bool:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[rb] = ra
        return True


class WeightedGraph:
    """Fixed vertex count plus an ordered, read-only list of candidate edges."""

    def __init__(self, vertex_count: int, edges: Iterable[Edge]):
        if vertex_count < 0:
            raise InternalTopologyError(f"Vertex count cannot be negative: {vertex_count}")
        self.vertex_count = vertex_count
        self.edges = tuple(edges)
        for e in self.edges:
            if not (0 <= e.src < vertex_count and 0 <= e.dest < vertex_count):
                raise InternalTopologyError(f"Edge {e} references a vertex outside [0, {vertex_count})")

    def __len__(self) -> int:
        return len(self.edges)

    def kruskal_mst(self) -> MSTResult:
        """Split the candidate edges into spanning-tree and redundant edges.

        Edges are visited in ascending weight; ``sorted`` is stable so equal
        weights keep their generation order. An edge that would close a cycle
        goes to ``redundant_edges``, which therefore also ends up ascending by
        weight.
        """
        components = _DisjointSet(self.vertex_count)
        mst: List[Edge] = []
        redundant: List[Edge] = []
        for edge in sorted(self.edges, key=lambda e: e.weight):
            if components.union(edge.src, edge.dest):
                mst.append(edge)
            else:
                redundant.append(edge)
        return MSTResult(mst, redundant)


def is_connected(vertex_count: int, edges: Sequence[Edge]) -> bool:
    if vertex_count <= 1:
        return True
    components = _DisjointSet(vertex_count)
    merges = sum(1 for e in edges if components.union(e.src, e.dest))
    return merges == vertex_count - 1


__all__ = ["Edge", "MSTResult", "WeightedGraph", "is_connected"]
