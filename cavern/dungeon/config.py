import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Tuple

from .errors import DungeonConfigError, InvalidCoordinateError, InvalidDimensionError

Coord2D = Tuple[int, int]

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DungeonConfig:
    rows: int = 6
    cols: int = 8
    start: Optional[Coord2D] = None
    end: Optional[Coord2D] = None
    treasure_percentage: int = 20
    interconnectivity: int = 0
    warp_allowed: bool = False
    seed: Optional[int] = None
    max_start_end_attempts: int = 1000
    enable_metrics: bool = True

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "DungeonConfig":
        """Build a config from ``CAVERN_*`` variables; keyword overrides win.

        Overrides whose value is None are ignored so CLI flags that were not
        given fall through to the environment.
        """
        env = os.environ if environ is None else environ
        env_map = {
            "CAVERN_ROWS": ("rows", int),
            "CAVERN_COLUMNS": ("cols", int),
            "CAVERN_START": ("start", parse_coord),
            "CAVERN_END": ("end", parse_coord),
            "CAVERN_TREASURE_PERCENTAGE": ("treasure_percentage", int),
            "CAVERN_INTERCONNECTIVITY": ("interconnectivity", int),
            "CAVERN_WARP_ALLOWED": ("warp_allowed", _parse_bool),
            "CAVERN_SEED": ("seed", int),
            "CAVERN_MAX_START_END_ATTEMPTS": ("max_start_end_attempts", int),
            "CAVERN_ENABLE_METRICS": ("enable_metrics", _parse_bool),
        }
        values = {}
        for env_key, (attr, convert) in env_map.items():
            raw = env.get(env_key)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[attr] = convert(raw.strip())
            except DungeonConfigError:
                raise
            except ValueError as exc:
                raise DungeonConfigError(f"Invalid value for {env_key}: {raw!r}") from exc
        known = {f.name for f in fields(cls)}
        for key, val in overrides.items():
            if key not in known:
                raise TypeError(f"Unknown DungeonConfig field: {key}")
            if val is not None:
                values[key] = val
        return cls(**values)


def _parse_bool(raw: str) -> bool:
    return raw.lower() in _TRUTHY


def parse_size(text: str) -> Tuple[int, int]:
    """Parse a ``"RxC"`` size string such as ``"4x6"``."""
    parts = text.strip().lower().split("x")
    if len(parts) != 2:
        raise InvalidDimensionError(f"Size must look like ROWSxCOLUMNS, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise InvalidDimensionError(f"Size must look like ROWSxCOLUMNS, got {text!r}") from exc


def parse_coord(text: str) -> Coord2D:
    """Parse a ``"row,col"`` coordinate string such as ``"0,1"``."""
    parts = text.strip().split(",")
    if len(parts) != 2:
        raise InvalidCoordinateError(f"Coordinate must look like ROW,COL, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise InvalidCoordinateError(f"Coordinate must look like ROW,COL, got {text!r}") from exc


__all__ = ["DungeonConfig", "Coord2D", "parse_size", "parse_coord"]
