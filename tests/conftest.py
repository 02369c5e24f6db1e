import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cavern.dungeon import Dungeon, DungeonConfig  # noqa: E402
from cavern.player import Player  # noqa: E402

CONFIG_ENV_KEYS = (
    "CAVERN_ROWS",
    "CAVERN_COLUMNS",
    "CAVERN_START",
    "CAVERN_END",
    "CAVERN_TREASURE_PERCENTAGE",
    "CAVERN_INTERCONNECTIVITY",
    "CAVERN_WARP_ALLOWED",
    "CAVERN_SEED",
    "CAVERN_MAX_START_END_ATTEMPTS",
    "CAVERN_ENABLE_METRICS",
    "CAVERN_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep developer CAVERN_* variables out of tests and silence info logs."""
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CAVERN_LOG_LEVEL", "warn")
    yield


@pytest.fixture()
def make_dungeon():
    """Factory building a seeded dungeon; keyword args are DungeonConfig fields."""

    def _make(player=None, rng=None, **fields):
        fields.setdefault("seed", 1234)
        return Dungeon.generate(DungeonConfig(**fields), player=player, rng=rng)

    return _make


@pytest.fixture()
def small_dungeon(make_dungeon):
    return make_dungeon(rows=3, cols=4, interconnectivity=0, treasure_percentage=0, warp_allowed=False)


@pytest.fixture()
def player_dungeon(make_dungeon):
    return make_dungeon(rows=5, cols=6, interconnectivity=3, treasure_percentage=50, player=Player("Tester"))


class ZeroRandom(random.Random):
    """Random source that always picks the first option."""

    def randrange(self, *args, **kwargs):
        return 0


@pytest.fixture()
def zero_rng():
    return ZeroRandom()
