"""Movement helpers layered on the dungeon's public queries.

These helpers encapsulate:
- Mapping compass directions onto node links
- Performing a single move for the attached player
- Describing the current node and its exits

They operate on a built ``Dungeon`` that has a ``Player`` attached.
"""

from __future__ import annotations

from typing import List, Tuple

from cavern.dungeon.cells import Coord2D

# compass letter -> node link attribute
DIRECTIONS = {"n": "up", "s": "down", "e": "right", "w": "left"}
CARDINAL_FULL = {"n": "north", "s": "south", "e": "east", "w": "west"}


def exits_from(dungeon, coord: Coord2D) -> List[str]:
    node = dungeon.node(coord)
    return [d for d, attr in DIRECTIONS.items() if getattr(node, attr) is not None]


def attempt_move(dungeon, direction: str) -> Tuple[Coord2D, bool]:
    """Move the player one link in ``direction``; returns (location, moved)."""
    location = dungeon.get_player_location()
    if location is None:
        raise ValueError("No player is attached to this dungeon")
    attr = DIRECTIONS.get((direction or "").strip().lower()[:1])
    if attr is None:
        return location, False
    target = getattr(dungeon.node(location), attr)
    if target is None:
        return location, False
    dungeon.move_player(target)
    return dungeon.get_player_location(), True


def describe_node_and_exits(dungeon, coord: Coord2D) -> Tuple[str, List[str]]:
    """Return (description, exits_list) for ``coord``."""
    node = dungeon.node(coord)
    desc = f"You are in a {node.kind}."
    exits = exits_from(dungeon, coord)
    if exits:
        desc += " Exits: " + ", ".join(CARDINAL_FULL[e].capitalize() for e in exits) + "."
    if node.treasures:
        kinds = sorted({t.kind for t in node.treasures})
        desc += f" You see {len(node.treasures)} treasure(s): " + ", ".join(kinds) + "."
    return desc, exits
