from typing import Dict


def init_metrics() -> Dict[str, int | float | dict | None]:
    return {
        'seed': None,
        'rows': 0,
        'cols': 0,
        'candidate_edges': 0,
        'mst_edges': 0,
        'redundant_edges': 0,
        'extra_edges': 0,
        'warp_edges': 0,
        'final_edges': 0,
        'start_end_attempts': 0,
        'treasure_nodes': 0,
        'treasures_placed': 0,
        'tunnels': 0,
        'caves': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
