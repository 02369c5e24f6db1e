import random

from cavern.dungeon.topology import (
    MAX_WEIGHT,
    build_candidate_edges,
    build_wrap_edges,
    candidate_edge_count,
    coord_to_vertex,
    redundant_edge_capacity,
    vertex_to_coord,
)


def test_candidate_edges_cover_each_adjacency_once():
    rows, cols = 3, 4
    edges = build_candidate_edges(rows, cols, random.Random(7))
    assert len(edges) == rows * (cols - 1) + (rows - 1) * cols == 17
    assert len(edges) == candidate_edge_count(rows, cols)
    pairs = {frozenset((e.src, e.dest)) for e in edges}
    assert len(pairs) == 17
    assert all(0 <= e.weight < MAX_WEIGHT for e in edges)


def test_right_edges_generated_before_down_edges():
    rows, cols = 3, 4
    edges = build_candidate_edges(rows, cols, random.Random(7))
    right, down = edges[: rows * (cols - 1)], edges[rows * (cols - 1):]
    for e in right:
        assert e.dest == e.src + 1
        assert vertex_to_coord(e.src, cols)[0] == vertex_to_coord(e.dest, cols)[0]
    for e in down:
        assert e.dest == e.src + cols


def test_vertex_coord_bijection():
    rows, cols = 3, 4
    seen = set()
    for v in range(rows * cols):
        r, c = vertex_to_coord(v, cols)
        assert 0 <= r < rows and 0 <= c < cols
        assert coord_to_vertex(r, c, cols) == v
        seen.add((r, c))
    assert len(seen) == rows * cols


def test_wrap_edges_join_opposite_borders():
    rows, cols = 3, 4
    wrap = build_wrap_edges(rows, cols)
    assert len(wrap) == rows + cols
    row_edges, col_edges = wrap[:rows], wrap[rows:]
    for r, e in enumerate(row_edges):
        assert vertex_to_coord(e.src, cols) == (r, cols - 1)
        assert vertex_to_coord(e.dest, cols) == (r, 0)
    for c, e in enumerate(col_edges):
        assert vertex_to_coord(e.src, cols) == (rows - 1, c)
        assert vertex_to_coord(e.dest, cols) == (0, c)


def test_wrap_edges_skip_self_loops():
    wrap = build_wrap_edges(10, 1)
    assert len(wrap) == 1
    assert all(e.src != e.dest for e in wrap)
    single_row = build_wrap_edges(1, 12)
    assert len(single_row) == 1
    assert vertex_to_coord(single_row[0].src, 12) == (0, 11)


def test_redundant_capacity_of_three_by_four():
    assert redundant_edge_capacity(3, 4) == 6
    assert redundant_edge_capacity(1, 12) == 0
