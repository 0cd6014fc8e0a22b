#!/usr/bin/env python3
"""
Profile script for billiard_coords to compare the cost of the global
transform with and without a precomputed interval table.
"""

import cProfile
import pstats
import io
import time
import numpy as np
from billiard_coords import Billiard, Circular, Wall, arcintervals, from_bcoords, totallength


def generate_polygon_billiard(n_walls: int = 8, n_disks: int = 2) -> Billiard:
    """Regular polygon table with a few disks inside, traversed counterclockwise."""
    angles = np.linspace(0.0, 2 * np.pi, n_walls, endpoint=False)
    corners = np.column_stack([np.cos(angles), np.sin(angles)]) * 10.0
    obstacles = [
        Wall(corners[i], corners[(i + 1) % n_walls]) for i in range(n_walls)
    ]
    for k in range(n_disks):
        obstacles.append(Circular((-3.0 + 6.0 * k / max(n_disks - 1, 1), 0.0), 1.0))
    return Billiard(obstacles)


def run_workload(billiard: Billiard, n_points: int, reuse_intervals: bool) -> None:
    """Map random boundary coordinates back to real coordinates."""
    rng = np.random.default_rng(42)
    total = totallength(billiard)
    xis = rng.uniform(0.0, total, n_points)
    sphis = rng.uniform(-1.0, 1.0, n_points)
    intervals = arcintervals(billiard) if reuse_intervals else None

    for xi, sphi in zip(xis, sphis):
        from_bcoords(xi, sphi, billiard, intervals=intervals)


def profile_function(func, description: str) -> None:
    """Profile a function and print statistics."""
    print(f"\n{'=' * 60}")
    print(f"Profiling: {description}")
    print('=' * 60)

    start = time.perf_counter()

    profiler = cProfile.Profile()
    profiler.enable()
    func()
    profiler.disable()

    elapsed = time.perf_counter() - start

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats('cumulative')
    ps.print_stats(20)
    print(s.getvalue())

    print(f"\nTotal time: {elapsed:.3f}s")


if __name__ == "__main__":
    print("Billiard Coordinates Performance Profiling")
    print("=" * 60)

    small = generate_polygon_billiard(n_walls=6, n_disks=1)
    large = generate_polygon_billiard(n_walls=200, n_disks=20)

    profile_function(
        lambda: run_workload(small, 10000, reuse_intervals=False),
        "7 obstacles, intervals recomputed per call (10000 points)"
    )
    profile_function(
        lambda: run_workload(large, 10000, reuse_intervals=False),
        "220 obstacles, intervals recomputed per call (10000 points)"
    )
    profile_function(
        lambda: run_workload(large, 10000, reuse_intervals=True),
        "220 obstacles, precomputed intervals (10000 points)"
    )
