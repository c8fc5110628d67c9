"""Verbose and silent profilers side by side (CPU-only).

Run: python examples/nested_regions.py
"""
from __future__ import annotations

import sys

from treetimer import Profiler


def solve(prof: Profiler, n: int) -> int:
    total = 0
    with prof.region("assemble"):
        for i in range(n):
            total += i * i
    with prof.region("reduce"):
        total %= 9973
    return total


if __name__ == "__main__":
    # A verbose profiler writes timestamped start/stop lines as it goes
    prof = Profiler(sys.stdout)
    prof.start("hello", "Say Hello to")
    prof.start("World")
    prof.stop("World")
    prof.start("You")
    prof.stop("You")
    prof.stop("hello")
    print("Statistics from 'profiler'")
    prof.display()
    print()

    # A silent profiler only collects; the report is fetched explicitly
    quiet = Profiler()
    quiet.start("run", "Solve three times")
    for _ in range(3):
        solve(quiet, 200_000)
    quiet.stop("run")
    quiet.indent = 2
    print("Statistics from 'profiler_silent'")
    print(quiet.report(), end="")
    print(f"last reduce: {quiet.get_wall_time_last('reduce')}")
