"""Grid <-> graph mapping: candidate neighbor edges, warp edges, vertex ids.

Vertex ids are row-major: ``vertex = row * cols + col``. Candidate edges are
generated once per adjacency (right neighbor, then down neighbor) so the
undirected graph never holds duplicates.
"""
from __future__ import annotations

import random
from typing import List, Tuple

from .graph import Edge

MAX_WEIGHT = 100


def coord_to_vertex(row: int, col: int, cols: int) -> int:
    return row * cols + col


def vertex_to_coord(vertex: int, cols: int) -> Tuple[int, int]:
    return vertex // cols, vertex % cols


def candidate_edge_count(rows: int, cols: int) -> int:
    return rows * (cols - 1) + (rows - 1) * cols


def redundant_edge_capacity(rows: int, cols: int) -> int:
    """Edges left over once a spanning tree of the full grid is removed."""
    return candidate_edge_count(rows, cols) - (rows * cols - 1)


def build_candidate_edges(rows: int, cols: int, rng: random.Random) -> List[Edge]:
    edges: List[Edge] = []
    # right neighbors
    for r in range(rows):
        for c in range(cols - 1):
            v = coord_to_vertex(r, c, cols)
            edges.append(Edge(v, v + 1, rng.randrange(MAX_WEIGHT)))
    # down neighbors
    for r in range(rows - 1):
        for c in range(cols):
            v = coord_to_vertex(r, c, cols)
            edges.append(Edge(v, v + cols, rng.randrange(MAX_WEIGHT)))
    return edges


def build_wrap_edges(rows: int, cols: int) -> List[Edge]:
    """Edges joining opposite borders (last column -> first, last row -> first).

    The source is the far end so materialization links ``src.right``/
    ``src.down`` across the border. Single-column rows and single-row columns
    would only produce self-loops and are skipped.
    """
    edges: List[Edge] = []
    if cols > 1:
        for r in range(rows):
            edges.append(Edge(coord_to_vertex(r, cols - 1, cols), coord_to_vertex(r, 0, cols), 0))
    if rows > 1:
        for c in range(cols):
            edges.append(Edge(coord_to_vertex(rows - 1, c, cols), coord_to_vertex(0, c, cols), 0))
    return edges


__all__ = [
    "MAX_WEIGHT",
    "coord_to_vertex",
    "vertex_to_coord",
    "candidate_edge_count",
    "redundant_edge_capacity",
    "build_candidate_edges",
    "build_wrap_edges",
]
