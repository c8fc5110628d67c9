"""Clock sources.

A clock supplies a CPU-time reading and a wall-clock reading, both in
seconds, plus a local timestamp used only for start/stop log lines.
"""
from __future__ import annotations

import time
from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def cpu(self) -> float: ...

    def wall(self) -> float: ...

    def now(self) -> datetime: ...


class SystemClock:
    """Process CPU time, monotonic wall time and local time of day."""

    def cpu(self) -> float:
        return time.process_time()

    def wall(self) -> float:
        return time.perf_counter()

    def now(self) -> datetime:
        return datetime.now()


def format_timestamp(ts: datetime) -> str:
    """Render ``[YYYY-mm-dd HH:MM:SS.mmm]``."""
    return f"[{ts:%Y-%m-%d %H:%M:%S}.{ts.microsecond // 1000:03d}]"


DEFAULT_CLOCK = SystemClock()
