"""One log file per rank; rank 0 prints the report.

Run: mpirun -n 4 python examples/mpi_ranks.py
"""
from __future__ import annotations

import sys

from treetimer import Profiler
from treetimer.telemetry.logging import get_rank_logger
from treetimer.utils.dist import get_rank, get_world_size, is_coordinator, rank_log_path


if __name__ == "__main__":
    rank = get_rank()
    with rank_log_path(rank=rank).open("w") as fh:
        prof = Profiler(fh)
        prof.start("hello")
        prof.stop("hello")
        prof.start("world")
        prof.stop("world")
        prof.display()
    get_rank_logger("treetimer.examples", rank).info("profile written")
    if is_coordinator(rank):
        sys.stdout.write(f"world size: {get_world_size()}\n")
        sys.stdout.write(prof.report())
