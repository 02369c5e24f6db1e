"""Dungeon construction and movement errors.

Every error carries a short machine-readable ``code`` next to the human
message so callers (the CLI, tests) can branch without string matching.
Configuration problems are ``ValueError`` subclasses; an edge whose endpoints
are neither row- nor column-aligned is a ``RuntimeError`` because it can only
come from a generation defect.
"""

from __future__ import annotations


class DungeonError(Exception):
    code = "dungeon_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class DungeonConfigError(DungeonError, ValueError):
    code = "invalid_config"


class InvalidDimensionError(DungeonConfigError):
    code = "invalid_dimension"


class InvalidCoordinateError(DungeonConfigError):
    code = "invalid_coordinate"


class InvalidPercentageError(DungeonConfigError):
    code = "invalid_percentage"


class InsufficientCellsError(DungeonConfigError):
    code = "insufficient_cells"


class InvalidInterConnectivityError(DungeonConfigError):
    code = "invalid_interconnectivity"


class InfeasibleInterConnectivityError(DungeonConfigError):
    code = "infeasible_interconnectivity"

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"Not enough redundant edges to satisfy interconnectivity: "
            f"requested {requested}, available {available}"
        )
        self.requested = requested
        self.available = available


class InfeasiblePathLengthError(DungeonConfigError):
    code = "infeasible_path_length"


class InternalTopologyError(DungeonError, RuntimeError):
    code = "internal_topology"


class InvalidMoveError(DungeonError, ValueError):
    code = "invalid_move"


__all__ = [
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
