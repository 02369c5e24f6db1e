from cavern.dungeon import Dungeon, DungeonConfig, Edge, NodeGrid
from cavern.dungeon.api_helpers import render_ascii
from cavern.dungeon.api_helpers.render import CELL_HEIGHT
from cavern.dungeon.topology import build_wrap_edges
from cavern.player import Player


def _horizontal_links(d, row):
    return sum(1 for c in range(d.cols - 1) if (row, c + 1) in d.get_possible_moves((row, c)))


def _vertical_links(d, row):
    return sum(1 for c in range(d.cols) if (row + 1, c) in d.get_possible_moves((row, c)))


def test_render_shape_and_markers(make_dungeon):
    d = make_dungeon(rows=4, cols=5, interconnectivity=2, treasure_percentage=30, player=Player())
    text = render_ascii(d)
    assert text.endswith("\n")
    lines = text.splitlines()
    assert len(lines) == d.rows * CELL_HEIGHT
    assert "S" in text and "E" in text and "P" in text


def test_render_connectors_match_links(make_dungeon):
    d = make_dungeon(rows=4, cols=5, interconnectivity=3)
    lines = render_ascii(d).splitlines()
    for row in range(d.rows):
        block = lines[row * CELL_HEIGHT:(row + 1) * CELL_HEIGHT]
        assert block[2].count("---") == _horizontal_links(d, row)
        assert block[5].count("|") == _vertical_links(d, row)


def test_render_treasure_marker(make_dungeon):
    d = make_dungeon(rows=3, cols=4, treasure_percentage=25)
    lines = render_ascii(d).splitlines()
    marked = set()
    for row in range(d.rows):
        line = lines[row * CELL_HEIGHT + 3]
        for col in range(d.cols):
            if line[col * 8:(col + 1) * 8].startswith("| T |"):
                marked.add((row, col))
    assert marked == {n.coord for n in d.get_treasure_nodes()}


def test_two_wide_wrap_links_draw_no_connector():
    rows, cols = 5, 2
    grid = NodeGrid(rows, cols)
    edges = [Edge(0, 1, 0)]  # only row 0 has a direct horizontal tunnel
    edges += [Edge(r * cols + c, (r + 1) * cols + c, 0) for c in range(cols) for r in range(rows - 1)]
    edges += build_wrap_edges(rows, cols)
    for edge in edges:
        grid.link(edge)
    cfg = DungeonConfig(rows=rows, cols=cols, warp_allowed=True, seed=1)
    d = Dungeon(cfg, grid, edges, (0, 0), (4, 1))

    # (1,0) reaches (1,1) only through its left wrap link
    assert (1, 1) in d.get_possible_moves((1, 0))
    assert d.node((1, 0)).right is None

    lines = render_ascii(d).splitlines()
    assert [lines[r * CELL_HEIGHT + 2].count("---") for r in range(rows)] == [1, 0, 0, 0, 0]
    assert [lines[r * CELL_HEIGHT + 5].count("|") for r in range(rows)] == [2, 2, 2, 2, 0]
