"""Telemetry subpackage.

Logging setup, free-memory samplers and the Prometheus exporter.
"""

from .logging import get_logger
from .memory import MemorySampler, get_sampler, host_free_gb, min_free_vram_gb

__all__ = [
    "get_logger",
    "MemorySampler",
    "get_sampler",
    "host_free_gb",
    "min_free_vram_gb",
]
