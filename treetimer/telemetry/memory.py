"""Free-memory samplers (optional).

A sampler is a zero-argument callable returning free memory in decimal GB,
or None when the platform cannot be queried. The host sampler uses psutil;
the GPU sampler uses pynvml and reports the least free device.
"""
from __future__ import annotations

from typing import Callable, Optional

import psutil

from ..core.errors import SamplerError

MemorySampler = Callable[[], Optional[float]]

_GB = 1e-9


def host_free_gb() -> float | None:
    try:
        return psutil.virtual_memory().available * _GB
    except (OSError, RuntimeError):
        return None


def min_free_vram_gb() -> float | None:
    try:  # pragma: no cover - optional path
        import pynvml
    except ImportError:
        return None
    try:  # pragma: no cover - environment dependent
        pynvml.nvmlInit()
    except pynvml.NVMLError:
        return None
    try:  # pragma: no cover - environment dependent
        free = []
        for i in range(pynvml.nvmlDeviceGetCount()):
            h = pynvml.nvmlDeviceGetHandleByIndex(i)
            free.append(pynvml.nvmlDeviceGetMemoryInfo(h).free * _GB)
        return min(free) if free else None
    except pynvml.NVMLError:
        return None
    finally:
        pynvml.nvmlShutdown()


_SAMPLERS: dict[str, MemorySampler] = {
    "host": host_free_gb,
    "gpu": min_free_vram_gb,
}


def get_sampler(name: str) -> MemorySampler:
    try:
        return _SAMPLERS[name]
    except KeyError:
        raise SamplerError(f"unknown memory sampler {name!r}") from None


def format_free_memory(value: float | None) -> str:
    return ". Free memory on node [GB]: " + ("n/a" if value is None else f"{value:g}")
