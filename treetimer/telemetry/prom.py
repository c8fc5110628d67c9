"""Prometheus export of region statistics.

Publishes one gauge family per statistic, labelled by the slash-joined
region path (``outer/inner``).
"""
from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Optional

from prometheus_client import REGISTRY, CollectorRegistry, Gauge, start_http_server

if TYPE_CHECKING:  # pragma: no cover
    from ..profiler import Profiler

__all__ = ["export_metrics", "start_http_server"]

# Gauges per registry, so exporting twice into one registry does not hit a
# duplicate registration error. Entries go away with their registry.
_GAUGES: "weakref.WeakKeyDictionary[CollectorRegistry, dict[str, Gauge]]" = (
    weakref.WeakKeyDictionary()
)


def _gauge(name: str, desc: str, registry: CollectorRegistry) -> Gauge:
    per_registry = _GAUGES.setdefault(registry, {})
    g = per_registry.get(name)
    if g is None:
        g = Gauge(name, desc, ["region"], registry=registry)
        per_registry[name] = g
    return g


def export_metrics(
    profiler: "Profiler",
    prefix: str = "treetimer",
    registry: Optional[CollectorRegistry] = None,
) -> int:
    """Set gauges from the profiler's current totals; returns regions exported."""
    reg = registry if registry is not None else REGISTRY
    calls = _gauge(f"{prefix}_region_calls", "Completed and open calls per region", reg)
    cpu = _gauge(f"{prefix}_region_cpu_seconds", "Accumulated CPU time per region", reg)
    wall = _gauge(f"{prefix}_region_wall_seconds", "Accumulated wall time per region", reg)
    n = 0
    for row in profiler.stats():
        region = "/".join(row["path"])
        calls.labels(region=region).set(row["calls"])
        cpu.labels(region=region).set(row["cpu_time_total"])
        wall.labels(region=region).set(row["wall_time_total"])
        n += 1
    return n
