"""Timer nodes and the per-node stopwatch."""
from __future__ import annotations

from dataclasses import dataclass

from .clock import Clock


@dataclass(slots=True)
class TimerNode:
    """One named region, aggregating every call made at its tree position.

    Link fields hold arena handles (indices into ``TimerTree.nodes``) and
    are maintained by the tree; only ``begin``/``end`` touch the statistics.
    """

    name: str
    note: str = ""
    index: int = 0
    call_count: int = 0
    cpu_time_total: float = 0.0
    wall_time_total: float = 0.0
    cpu_time_last: float = 0.0
    wall_time_last: float = 0.0
    active: bool = False
    cpu_start: float | None = None
    wall_start: float | None = None
    parent: int | None = None
    first_child: int | None = None
    next_sibling: int | None = None
    prev_sibling: int | None = None

    @property
    def label(self) -> str:
        return self.note if self.note else self.name

    def begin(self, clock: Clock) -> None:
        # Re-entering a running region closes the open interval first.
        if self.active:
            self.end(clock)
        self.call_count += 1
        self.cpu_time_last = 0.0
        self.wall_time_last = 0.0
        self.cpu_start = clock.cpu()
        self.wall_start = clock.wall()
        self.active = True

    def end(self, clock: Clock) -> None:
        if not self.active:
            return
        cpu = max(0.0, clock.cpu() - (self.cpu_start or 0.0))
        wall = max(0.0, clock.wall() - (self.wall_start or 0.0))
        self.cpu_time_last = cpu
        self.wall_time_last = wall
        self.cpu_time_total += cpu
        self.wall_time_total += wall
        self.active = False
        self.cpu_start = None
        self.wall_start = None
