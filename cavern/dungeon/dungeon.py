"""Built dungeon and its query surface.

A ``Dungeon`` is only ever produced by ``DungeonBuilder.build`` (or the
``Dungeon.generate`` shortcut) once every construction phase succeeded. Its
topology and edge list are frozen; the only mutable state is the treasure on
nodes (taken by a ``Player``) and the start/end markers, which callers may
overwrite with ``force_set_start_position``/``force_set_end_position``.

Public contract consumed by the player, the movement helpers and the CLI:
    get_possible_moves(coord), get_edges(), get_total_nodes(),
    get_start_position(), get_end_position(), get_treasure_nodes(),
    move_player(coord), get_current_moves(), get_player_location()
"""

from __future__ import annotations

import dataclasses
import random
from typing import Any, Dict, List, Optional, Sequence

from .cells import Coord2D, Node
from .config import DungeonConfig
from .errors import InvalidMoveError
from .graph import Edge
from .grid import NodeGrid

MIN_PATH_LENGTH = 5


def manhattan_distance(a: Sequence[int], b: Sequence[int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Dungeon:
    def __init__(
        self,
        config: DungeonConfig,
        grid: NodeGrid,
        edges: Sequence[Edge],
        start: Coord2D,
        end: Coord2D,
        metrics: Optional[Dict[str, Any]] = None,
        player=None,
    ):
        self.config = config
        self._grid = grid
        self._edges = tuple(edges)
        self._start = tuple(start)
        self._end = tuple(end)
        self.metrics: Dict[str, Any] = metrics if metrics is not None else {}
        self.player = player
        if self.player is not None:
            self.player.move_in_dungeon(self._start, self._grid.node(self._start))

    @classmethod
    def generate(
        cls,
        config: DungeonConfig | None = None,
        *,
        rng: random.Random | None = None,
        player=None,
        **overrides,
    ) -> "Dungeon":
        """Build a dungeon from ``config`` (or keyword fields of ``DungeonConfig``)."""
        from .pipeline import DungeonBuilder

        if config is None:
            config = DungeonConfig(**overrides)
        elif overrides:
            config = dataclasses.replace(config, **overrides)
        return DungeonBuilder(config, rng=rng, player=player).build()

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def seed(self) -> int | None:
        return self.config.seed

    @property
    def grid(self) -> NodeGrid:
        return self._grid

    def node(self, coord: Coord2D) -> Node:
        return self._grid.node(tuple(coord))

    def get_total_nodes(self) -> int:
        return self.rows * self.cols

    # ------------------------------------------------------------------
    # Topology queries
    # ------------------------------------------------------------------
    def get_possible_moves(self, coord: Coord2D) -> List[Coord2D]:
        return self._grid.get_possible_moves(tuple(coord))

    def get_edges(self) -> List[Edge]:
        return list(self._edges)

    def get_treasure_nodes(self) -> List[Node]:
        return self._grid.treasure_nodes()

    # ------------------------------------------------------------------
    # Start / end
    # ------------------------------------------------------------------
    @staticmethod
    def min_path_length_check(start: Sequence[int], end: Sequence[int]) -> bool:
        return manhattan_distance(start, end) >= MIN_PATH_LENGTH

    def get_start_position(self) -> Coord2D:
        return self._start

    def get_end_position(self) -> Coord2D:
        return self._end

    def force_set_start_position(self, pos: Coord2D) -> None:
        """Overwrite the start marker without re-validating the path length."""
        self._start = tuple(pos)

    def force_set_end_position(self, pos: Coord2D) -> None:
        """Overwrite the end marker without re-validating the path length."""
        self._end = tuple(pos)

    # ------------------------------------------------------------------
    # Player hooks
    # ------------------------------------------------------------------
    def get_player_location(self) -> Coord2D | None:
        if self.player is None:
            return None
        return self.player.location

    def get_current_moves(self) -> List[Coord2D]:
        if self.player is None:
            return []
        return self.get_possible_moves(self.player.location)

    def move_player(self, new_location: Coord2D) -> None:
        if self.player is None:
            raise InvalidMoveError("No player is attached to this dungeon")
        target = tuple(new_location)
        if target not in self.get_current_moves():
            raise InvalidMoveError(f"Cannot move from {self.player.location} to {target}: no tunnel between them")
        self.player.move_in_dungeon(target, self._grid.node(target))

    def has_player_won(self) -> bool:
        return self.player is not None and self.player.location == self._end

    # ------------------------------------------------------------------
    # Structured summary for external renderers
    # ------------------------------------------------------------------
    def summary(self) -> Dict[str, Any]:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "seed": self.seed,
            "start": list(self._start),
            "end": list(self._end),
            "edges": [list(e) for e in self._edges],
            "treasure_nodes": [n.to_dict() for n in self.get_treasure_nodes()],
            "metrics": self.metrics,
        }

    def __repr__(self):
        return f"Dungeon({self.rows}x{self.cols}, seed={self.seed}, start={self._start}, end={self._end})"


__all__ = ["Dungeon", "MIN_PATH_LENGTH", "manhattan_distance"]
