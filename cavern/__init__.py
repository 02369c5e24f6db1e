"""
project: Cavern
module: __init__.py
License: MIT

Grid dungeon generator built on a randomized minimum spanning tree.

The engine lives in ``cavern.dungeon``; ``cavern.player`` provides the
player collaborator and ``run.py`` at the repository root is the CLI.
"""

__version__ = "0.4.0"

from .dungeon import Dungeon, DungeonBuilder, DungeonConfig  # noqa: E402
from .player import Player  # noqa: E402

__all__ = ["Dungeon", "DungeonBuilder", "DungeonConfig", "Player", "__version__"]
