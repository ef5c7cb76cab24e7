from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'cells': 0,
        'edges': 0,
        'draws': 0,
        'frontier_peak': 0,
        'multi_choice_joins': 0,
        'runtime_ms': 0.0,
    }
