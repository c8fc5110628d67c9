"""Rank helpers for multi-process runs (best-effort).

Each process keeps its own profiler and log file; only the coordinator
(rank 0) prints the aggregated report. Launcher variables are consulted
first, then mpi4py when it is installed.
"""
from __future__ import annotations

import os
from pathlib import Path

_RANK_VARS = ("RANK", "OMPI_COMM_WORLD_RANK", "PMI_RANK", "SLURM_PROCID")
_SIZE_VARS = ("WORLD_SIZE", "OMPI_COMM_WORLD_SIZE", "PMI_SIZE", "SLURM_NTASKS")


def _env_first(names: tuple[str, ...]) -> int | None:
    for name in names:
        val = os.getenv(name)
        if val is None:
            continue
        try:
            return int(val)
        except ValueError:
            continue
    return None


def _comm():  # noqa: ANN202
    try:  # optional
        from mpi4py import MPI  # type: ignore
    except ImportError:  # pragma: no cover - optional dependency
        return None
    return MPI.COMM_WORLD


def get_rank() -> int:
    rank = _env_first(_RANK_VARS)
    if rank is not None:
        return rank
    comm = _comm()
    return comm.Get_rank() if comm is not None else 0


def get_world_size() -> int:
    size = _env_first(_SIZE_VARS)
    if size is not None:
        return size
    comm = _comm()
    return comm.Get_size() if comm is not None else 1


def is_coordinator(rank: int | None = None) -> bool:
    return (get_rank() if rank is None else rank) == 0


def rank_log_path(
    prefix: str = "profiler_myid_", rank: int | None = None, directory: str | Path = "."
) -> Path:
    """``<directory>/<prefix><rank>.txt``"""
    r = get_rank() if rank is None else int(rank)
    return Path(directory) / f"{prefix}{r}.txt"
