"""Public dungeon package interface.

    from cavern.dungeon import Dungeon, DungeonConfig
    d = Dungeon.generate(rows=4, cols=6, interconnectivity=2, seed=7)
"""

from .cells import TREASURE_KINDS, Node, Treasure
from .config import DungeonConfig, parse_coord, parse_size
from .dungeon import MIN_PATH_LENGTH, Dungeon, manhattan_distance
from .errors import (
    DungeonConfigError,
    DungeonError,
    InfeasibleInterConnectivityError,
    InfeasiblePathLengthError,
    InsufficientCellsError,
    InternalTopologyError,
    InvalidCoordinateError,
    InvalidDimensionError,
    InvalidInterConnectivityError,
    InvalidMoveError,
    InvalidPercentageError,
)
from .graph import Edge, MSTResult, WeightedGraph
from .grid import NodeGrid
from .pipeline import DungeonBuilder, build_dungeon

__all__ = [
    "Dungeon",
    "DungeonBuilder",
    "DungeonConfig",
    "build_dungeon",
    "parse_coord",
    "parse_size",
    "MIN_PATH_LENGTH",
    "manhattan_distance",
    "Edge",
    "MSTResult",
    "WeightedGraph",
    "NodeGrid",
    "Node",
    "Treasure",
    "TREASURE_KINDS",
    "DungeonError",
    "DungeonConfigError",
    "InvalidDimensionError",
    "InvalidCoordinateError",
    "InvalidPercentageError",
    "InsufficientCellsError",
    "InvalidInterConnectivityError",
    "InfeasibleInterConnectivityError",
    "InfeasiblePathLengthError",
    "InternalTopologyError",
    "InvalidMoveError",
]
