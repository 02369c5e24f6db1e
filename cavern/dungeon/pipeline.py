"""Pipeline orchestration for dungeon generation.

``DungeonBuilder`` runs the construction phases in order and only hands a
``Dungeon`` back once all of them succeeded:

    validating -> generating_topology -> selecting_edges -> materializing
    -> verifying_path -> placing_treasure -> ready

Any ``DungeonError`` moves the builder to ``failed`` and is re-raised; the
partially linked grid is never exposed. Randomness comes from a single
``random.Random`` seeded from ``config.seed`` unless the caller injects one.
"""
from __future__ import annotations

import dataclasses
import random
import time
from typing import List, Optional, Tuple

from ..logging_utils import get_logger
from .cells import Coord2D
from .config import DungeonConfig
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
    InvalidPercentageError,
)
from .graph import Edge, MSTResult, WeightedGraph, is_connected
from .grid import NodeGrid
from .metrics import init_metrics
from .topology import build_candidate_edges, build_wrap_edges, redundant_edge_capacity, vertex_to_coord

log = get_logger("cavern.dungeon")

MIN_TOTAL_CELLS = 10

PENDING = "pending"
VALIDATING = "validating"
GENERATING_TOPOLOGY = "generating_topology"
SELECTING_EDGES = "selecting_edges"
MATERIALIZING = "materializing"
VERIFYING_PATH = "verifying_path"
PLACING_TREASURE = "placing_treasure"
READY = "ready"
FAILED = "failed"


class DungeonBuilder:
    def __init__(self, config: DungeonConfig | None = None, *, rng: random.Random | None = None, player=None):
        # private copy; the sampled seed and normalized coords stay off the caller's config
        self.config = dataclasses.replace(config) if config is not None else DungeonConfig()
        # 0 is a valid deterministic seed; None => random
        if self.config.seed is None:
            self.config.seed = random.randint(0, 2**31 - 1)
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.player = player
        self.phase = PENDING
        self.metrics = init_metrics() if self.config.enable_metrics else {}

    def build(self) -> Dungeon:
        cfg = self.config
        started = time.perf_counter()
        log.info(
            event="dungeon_build_start",
            rows=cfg.rows,
            cols=cfg.cols,
            seed=cfg.seed,
            interconnectivity=cfg.interconnectivity,
            warp=cfg.warp_allowed,
        )
        try:
            self._phase(VALIDATING, self._validate)
            mst = self._phase(GENERATING_TOPOLOGY, self._generate_topology)
            final_edges = self._phase(SELECTING_EDGES, self._select_edges, mst)
            grid = self._phase(MATERIALIZING, self._materialize, final_edges)
            start, end = self._phase(VERIFYING_PATH, self._resolve_start_end)
            self._phase(PLACING_TREASURE, self._place_treasure, grid)
        except DungeonError as exc:
            self.phase = FAILED
            log.error(event="dungeon_build_failed", code=exc.code, error=exc.message, seed=cfg.seed)
            raise
        self.phase = READY
        if self.config.enable_metrics:
            self.metrics["runtime_ms"] = int((time.perf_counter() - started) * 1000)
        log.info(
            event="dungeon_build_ready",
            seed=cfg.seed,
            final_edges=len(final_edges),
            start=f"{start[0]},{start[1]}",
            end=f"{end[0]},{end[1]}",
            runtime_ms=self.metrics.get("runtime_ms"),
        )
        return Dungeon(cfg, grid, final_edges, start, end, metrics=self.metrics, player=self.player)

    def _phase(self, label, fn, *a, **k):
        self.phase = label
        log.debug(event="dungeon_phase", phase=label)
        if not self.config.enable_metrics:
            return fn(*a, **k)
        ps = time.perf_counter()
        r = fn(*a, **k)
        self.metrics["phase_ms"][label] = int((time.perf_counter() - ps) * 1000)
        return r

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _validate(self) -> None:
        cfg = self.config
        if cfg.rows < 1:
            raise InvalidDimensionError("Row count can not be less than 1")
        if cfg.cols < 1:
            raise InvalidDimensionError("Column count can not be less than 1")
        if cfg.start is not None:
            cfg.start = self._check_coord(cfg.start, "start")
        if cfg.end is not None:
            cfg.end = self._check_coord(cfg.end, "end")
        if not 0 <= cfg.treasure_percentage <= 100:
            raise InvalidPercentageError(f"Invalid treasure percentage: {cfg.treasure_percentage}")
        if cfg.total_cells < MIN_TOTAL_CELLS:
            raise InsufficientCellsError(
                f"The number of caves/tunnels (rows*columns) must be at least {MIN_TOTAL_CELLS}, got {cfg.total_cells}"
            )
        if cfg.interconnectivity < 0:
            raise InvalidInterConnectivityError(f"Invalid interconnectivity: {cfg.interconnectivity}")
        if cfg.max_start_end_attempts < 1:
            raise DungeonConfigError(f"max_start_end_attempts must be positive, got {cfg.max_start_end_attempts}")
        if self.config.enable_metrics:
            self.metrics["seed"] = cfg.seed
            self.metrics["rows"] = cfg.rows
            self.metrics["cols"] = cfg.cols

    def _check_coord(self, coord, label: str) -> Coord2D:
        try:
            row, col = coord
        except (TypeError, ValueError) as exc:
            raise InvalidCoordinateError(f"Invalid {label} position: {coord!r}") from exc
        if not 0 <= row < self.config.rows:
            raise InvalidCoordinateError(f"Invalid {label} row: {row}")
        if not 0 <= col < self.config.cols:
            raise InvalidCoordinateError(f"Invalid {label} column: {col}")
        return (row, col)

    def _generate_topology(self) -> MSTResult:
        cfg = self.config
        candidates = build_candidate_edges(cfg.rows, cfg.cols, self.rng)
        graph = WeightedGraph(cfg.total_cells, candidates)
        mst = graph.kruskal_mst()
        if not is_connected(graph.vertex_count, mst.mst_edges):
            raise InternalTopologyError("Spanning tree does not reach every cell")
        if self.config.enable_metrics:
            self.metrics["candidate_edges"] = len(candidates)
            self.metrics["mst_edges"] = len(mst.mst_edges)
            self.metrics["redundant_edges"] = len(mst.redundant_edges)
        return mst

    def _select_edges(self, mst: MSTResult) -> List[Edge]:
        cfg = self.config
        wanted = cfg.interconnectivity
        available = redundant_edge_capacity(cfg.rows, cfg.cols)
        if available != len(mst.redundant_edges):
            raise InternalTopologyError(
                f"Spanning tree left {len(mst.redundant_edges)} redundant edges, expected {available}"
            )
        if wanted > available:
            raise InfeasibleInterConnectivityError(wanted, available)
        final_edges = list(mst.mst_edges) + mst.redundant_edges[:wanted]
        wrap = build_wrap_edges(cfg.rows, cfg.cols) if cfg.warp_allowed else []
        final_edges.extend(wrap)
        if self.config.enable_metrics:
            self.metrics["extra_edges"] = wanted
            self.metrics["warp_edges"] = len(wrap)
            self.metrics["final_edges"] = len(final_edges)
        return final_edges

    def _materialize(self, edges: List[Edge]) -> NodeGrid:
        grid = NodeGrid(self.config.rows, self.config.cols)
        for edge in edges:
            grid.link(edge)
        if self.config.enable_metrics:
            tunnels = sum(1 for n in grid.nodes() if n.is_tunnel)
            self.metrics["tunnels"] = tunnels
            self.metrics["caves"] = self.config.total_cells - tunnels
        return grid

    def _random_coord(self) -> Coord2D:
        return vertex_to_coord(self.rng.randrange(self.config.total_cells), self.config.cols)

    def _resolve_start_end(self) -> Tuple[Coord2D, Coord2D]:
        cfg = self.config
        if cfg.start is not None and cfg.end is not None:
            distance = manhattan_distance(cfg.start, cfg.end)
            if distance < MIN_PATH_LENGTH:
                raise InfeasiblePathLengthError(
                    f"Path length from start {cfg.start} to end {cfg.end} is {distance}, "
                    f"at least {MIN_PATH_LENGTH} is required"
                )
            self._record_attempts(0)
            return cfg.start, cfg.end
        for attempt in range(1, cfg.max_start_end_attempts + 1):
            start = cfg.start if cfg.start is not None else self._random_coord()
            end = cfg.end if cfg.end is not None else self._random_coord()
            if manhattan_distance(start, end) >= MIN_PATH_LENGTH:
                self._record_attempts(attempt)
                return start, end
        raise InfeasiblePathLengthError(
            f"No start/end pair at least {MIN_PATH_LENGTH} apart found after {cfg.max_start_end_attempts} attempts"
        )

    def _record_attempts(self, attempts: int) -> None:
        if self.config.enable_metrics:
            self.metrics["start_end_attempts"] = attempts

    def _place_treasure(self, grid: NodeGrid) -> None:
        placed = grid.place_treasures(self.config.treasure_percentage, self.rng)
        if self.config.enable_metrics:
            self.metrics["treasures_placed"] = placed
            self.metrics["treasure_nodes"] = len(grid.treasure_nodes())


def build_dungeon(config: Optional[DungeonConfig] = None, *, rng: random.Random | None = None, player=None) -> Dungeon:
    return DungeonBuilder(config, rng=rng, player=player).build()


__all__ = [
    "DungeonBuilder",
    "build_dungeon",
    "MIN_TOTAL_CELLS",
    "PENDING",
    "VALIDATING",
    "GENERATING_TOPOLOGY",
    "SELECTING_EDGES",
    "MATERIALIZING",
    "VERIFYING_PATH",
    "PLACING_TREASURE",
    "READY",
    "FAILED",
]
