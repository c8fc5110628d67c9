from __future__ import annotations

import gc

from prometheus_client import CollectorRegistry

from treetimer import Profiler
from treetimer.telemetry.prom import export_metrics


def test_export_metrics_sets_gauges(clock):
    p = Profiler(clock=clock)
    p.start("outer")
    for _ in range(2):
        p.start("inner")
        clock.advance(cpu=0.5, wall=1.5)
        p.stop("inner")
    p.stop("outer")

    reg = CollectorRegistry()
    assert export_metrics(p, registry=reg) == 2
    assert reg.get_sample_value("treetimer_region_calls", {"region": "outer/inner"}) == 2
    assert reg.get_sample_value("treetimer_region_wall_seconds", {"region": "outer/inner"}) == 3.0
    assert reg.get_sample_value("treetimer_region_cpu_seconds", {"region": "outer"}) == 1.0

    # exporting again into the same registry updates instead of re-registering
    p.start("outer")
    p.start("inner")
    p.stop("inner")
    p.stop("outer")
    export_metrics(p, registry=reg)
    assert reg.get_sample_value("treetimer_region_calls", {"region": "outer/inner"}) == 3


def test_export_into_many_fresh_registries(clock):
    p = Profiler(clock=clock)
    p.start("step")
    clock.advance(wall=0.5)
    p.stop("step")

    missing = 0
    for _ in range(30):
        reg = CollectorRegistry()
        export_metrics(p, registry=reg)
        if reg.get_sample_value("treetimer_region_wall_seconds", {"region": "step"}) != 0.5:
            missing += 1
        del reg
        gc.collect()
    assert missing == 0
