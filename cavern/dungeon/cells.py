from dataclasses import dataclass
from typing import List, Optional, Tuple

Coord2D = Tuple[int, int]

TREASURE_KINDS = ("diamond", "ruby", "sapphire")
LINK_DIRECTIONS = ("up", "down", "left", "right")


@dataclass(frozen=True)
class Treasure:
    kind: str = "diamond"


class Node:
    """A cave or tunnel cell; neighbors are stored as coordinates, not objects."""
    __slots__ = ("coord", "up", "down", "left", "right", "treasures")
    def __init__(self, coord: Coord2D):
        self.coord = coord
        self.up: Optional[Coord2D] = None
        self.down: Optional[Coord2D] = None
        self.left: Optional[Coord2D] = None
        self.right: Optional[Coord2D] = None
        self.treasures: List[Treasure] = []

    def links(self) -> List[Coord2D]:
        return [getattr(self, d) for d in LINK_DIRECTIONS if getattr(self, d) is not None]

    @property
    def link_count(self) -> int:
        return sum(1 for d in LINK_DIRECTIONS if getattr(self, d) is not None)

    @property
    def is_tunnel(self) -> bool:
        return self.link_count == 2

    @property
    def kind(self) -> str:
        return "tunnel" if self.is_tunnel else "cave"

    def take_treasures(self) -> List[Treasure]:
        taken, self.treasures = self.treasures, []
        return taken

    def to_dict(self):
        return {
            "coord": list(self.coord),
            "kind": self.kind,
            "links": {d: list(getattr(self, d)) for d in LINK_DIRECTIONS if getattr(self, d) is not None},
            "treasures": [t.kind for t in self.treasures],
        }

    def __repr__(self):
        return f"Node({self.coord}, links={self.link_count}, treasures={len(self.treasures)})"
