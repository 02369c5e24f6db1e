"""Materialized node grid: pairwise neighbor links plus treasure placement."""
from __future__ import annotations

import math
import random
from typing import Iterator, List

from .cells import TREASURE_KINDS, Coord2D, Node, Treasure
from .errors import InternalTopologyError, InvalidCoordinateError
from .graph import Edge
from .topology import vertex_to_coord


class NodeGrid:
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.grid: List[List[Node]] = [[Node((r, c)) for c in range(cols)] for r in range(rows)]

    def __getitem__(self, row: int) -> List[Node]:
        return self.grid[row]

    def in_bounds(self, coord: Coord2D) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def node(self, coord: Coord2D) -> Node:
        if not self.in_bounds(coord):
            raise InvalidCoordinateError(f"Coordinate {tuple(coord)} outside {self.rows}x{self.cols} grid")
        r, c = coord
        return self.grid[r][c]

    def nodes(self) -> Iterator[Node]:
        for row in self.grid:
            yield from row

    def link(self, edge: Edge) -> None:
        """Link both endpoints of ``edge``; the pair is always set together."""
        src = vertex_to_coord(edge.src, self.cols)
        dest = vertex_to_coord(edge.dest, self.cols)
        a, b = self.node(src), self.node(dest)
        if src[0] == dest[0]:
            a.right, b.left = dest, src
        elif src[1] == dest[1]:
            a.down, b.up = dest, src
        else:
            raise InternalTopologyError(f"Edge {edge} joins {src} and {dest}, which share neither row nor column")

    def get_possible_moves(self, coord: Coord2D) -> List[Coord2D]:
        moves: List[Coord2D] = []
        for target in self.node(coord).links():
            if target not in moves:
                moves.append(target)
        return moves

    def place_treasures(self, percentage: int, rng: random.Random) -> int:
        """Put 1 or 2 treasures on ``ceil(total * percentage / 100)`` distinct cells.

        Returns the number of treasure items placed.
        """
        total = self.rows * self.cols
        target = math.ceil(total * percentage / 100)
        placed = 0
        for vertex in rng.sample(range(total), target):
            node = self.node(vertex_to_coord(vertex, self.cols))
            for _ in range(rng.randint(1, 2)):
                node.treasures.append(Treasure(rng.choice(TREASURE_KINDS)))
                placed += 1
        return placed

    def treasure_nodes(self) -> List[Node]:
        return [n for n in self.nodes() if n.treasures]


__all__ = ["NodeGrid"]
