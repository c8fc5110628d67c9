"""Shared schema types for exported region statistics."""
from __future__ import annotations

from typing import List, TypedDict


class RegionStats(TypedDict):
    path: List[str]
    depth: int
    name: str
    label: str
    calls: int
    cpu_time_total: float
    wall_time_total: float
    cpu_time_last: float
    wall_time_last: float
    active: bool
