"""Plain-text map of a built dungeon for terminals.

Each node is drawn as a seven-line box. Connectors follow the right and
down links of each node; wraparound links (which point back to column/row 0)
are not drawn.
"""

from __future__ import annotations

from typing import List

BOX_TOP = "|‾‾‾|   "
BOX_BOTTOM = "|___|   "
EMPTY = "|   |   "
CELL_HEIGHT = 7


def _marker_line(mark: str, connector: bool) -> str:
    return f"| {mark} |" + ("---" if connector else "   ")


def render_ascii(dungeon) -> str:
    start = dungeon.get_start_position()
    end = dungeon.get_end_position()
    player = dungeon.get_player_location()
    lines: List[str] = []
    for i in range(dungeon.rows):
        block = [[] for _ in range(CELL_HEIGHT)]
        for j in range(dungeon.cols):
            node = dungeon.node((i, j))
            has_right = node.right == (i, j + 1)
            has_down = node.down == (i + 1, j)
            if (i, j) == start:
                label = "S"
            elif (i, j) == end:
                label = "E"
            else:
                label = " "
            block[0].append(BOX_TOP)
            block[1].append(_marker_line(label, False))
            block[2].append(_marker_line("P" if player == (i, j) else " ", has_right))
            block[3].append(_marker_line("T" if node.treasures else " ", False))
            block[4].append(BOX_BOTTOM)
            connector = "  |     " if has_down else " " * 8
            block[5].append(connector)
            block[6].append(connector)
        lines.extend("".join(parts) for parts in block)
    return "\n".join(lines) + "\n"
