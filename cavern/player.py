"""
project: Cavern
module: player.py
License: MIT

Player collaborator. The dungeon notifies the player whenever it relocates;
the player keeps its own location, the cells it has visited and the treasure
it has picked up from nodes.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Tuple

Coord2D = Tuple[int, int]


class Player:
    def __init__(self, name: str = "Player"):
        self.name = name
        self.location: Optional[Coord2D] = None
        self.treasures: List = []
        self.visited: List[Coord2D] = []
        self._node = None

    def move_in_dungeon(self, location: Coord2D, node) -> None:
        self.location = tuple(location)
        self._node = node
        if self.location not in self.visited:
            self.visited.append(self.location)

    @property
    def current_node(self):
        return self._node

    def pick_up_treasure(self, node=None) -> List:
        """Take every treasure lying on ``node`` (default: the current node)."""
        target = node if node is not None else self._node
        if target is None:
            return []
        taken = target.take_treasures()
        self.treasures.extend(taken)
        return taken

    def treasure_counts(self) -> Dict[str, int]:
        return dict(Counter(t.kind for t in self.treasures))

    def __repr__(self):
        return f"Player({self.name!r}, location={self.location}, treasures={len(self.treasures)})"
