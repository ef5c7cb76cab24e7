import time

import pytest

from mazegame.core import analyze, build_maze, find_path

# Simple performance guardrail. Not a strict micro-benchmark; aims to catch large regressions.
# Adjust thresholds if CI hardware differs significantly.


@pytest.mark.performance
def test_large_maze_generation_and_query():
    seeds = [10101, 20202, 30303]
    max_seconds_per = 2.0  # generous threshold; tune as needed
    timings = []
    for s in seeds:
        start = time.perf_counter()
        grid, _ = build_maze(width=120, height=120, seed=s)
        path = find_path(grid, (0, 0), (119, 119))
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        assert analyze(grid)["ok"]
        assert path[-1].coord == (119, 119)
        assert elapsed < max_seconds_per, f"Seed {s} took {elapsed:.3f}s (> {max_seconds_per}s)"
    avg = sum(timings) / len(timings)
    assert avg < max_seconds_per * 0.85, f"Average generation {avg:.3f}s too high"
