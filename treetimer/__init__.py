"""treetimer: hierarchical CPU/wall timers for named, nested regions."""

from .clock import Clock, SystemClock
from .config import ProfilerConfig
from .node import TimerNode
from .profiler import Profiler
from .tree import TimerTree

__all__ = [
    "Clock",
    "SystemClock",
    "ProfilerConfig",
    "TimerNode",
    "Profiler",
    "TimerTree",
]

__version__ = "0.1.0"
