"""Profiler facade: named, nested timing regions with an indented report.

Usage::

    prof = Profiler(sys.stdout)          # verbose: logs start/stop lines
    prof.start("solve", "Solve system")
    prof.start("assemble")
    prof.stop("assemble")
    prof.stop("solve")
    prof.display()

    quiet = Profiler()                   # silent: nothing written, stats kept
    with quiet.region("load"):
        ...
    print(quiet.report())

Regions must be closed in reverse order of opening; a ``stop`` that does not
name the innermost open region is ignored with a warning. Re-opening a
running region closes its current interval first. Lookups are relative to
the innermost open region, see ``treetimer.tree``.

A Profiler is not thread-safe; use one instance per thread.
"""
from __future__ import annotations

from contextlib import ContextDecorator
from typing import List, Optional, TextIO

from .clock import DEFAULT_CLOCK, Clock, format_timestamp
from .config import ProfilerConfig, check_non_negative_int
from .core.schemas import RegionStats
from .node import TimerNode
from .report import render
from .telemetry.logging import get_logger
from .telemetry.memory import MemorySampler, format_free_memory, get_sampler
from .tree import TimerTree


class _Region(ContextDecorator):
    def __init__(self, profiler: "Profiler", name: str, note: str) -> None:
        self._profiler = profiler
        self._name = name
        self._note = note

    def __enter__(self) -> "Profiler":
        self._profiler.start(self._name, self._note)
        return self._profiler

    def __exit__(self, exc_type, exc, tb):  # noqa: ANN001, ANN204
        self._profiler.stop(self._name)
        return False


class Profiler:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        clock: Optional[Clock] = None,
        memory_sampler: Optional[MemorySampler] = None,
        config: Optional[ProfilerConfig] = None,
    ) -> None:
        self._cfg = config if config is not None else ProfilerConfig()
        self._stream = stream
        self._clock = clock if clock is not None else DEFAULT_CLOCK
        if memory_sampler is None and self._cfg.memory_prof:
            memory_sampler = get_sampler(self._cfg.memory_sampler)
        self._memory_sampler = memory_sampler
        self._indent = self._cfg.indent
        self._tree = TimerTree()
        self._log = get_logger("treetimer.profiler")

    @classmethod
    def from_env(cls, stream: Optional[TextIO] = None, **kwargs) -> "Profiler":  # noqa: ANN003
        return cls(stream, config=ProfilerConfig.from_env(), **kwargs)

    # -- properties -----------------------------------------------------

    @property
    def indent(self) -> int:
        """Spaces per nesting level in the report."""
        return self._indent

    @indent.setter
    def indent(self, value: int) -> None:
        check_non_negative_int("indent", value)
        self._indent = value

    @property
    def verbose(self) -> bool:
        return self._stream is not None

    @property
    def stream(self) -> Optional[TextIO]:
        return self._stream

    @property
    def tree(self) -> TimerTree:
        return self._tree

    @property
    def current(self) -> Optional[TimerNode]:
        return self._tree.current

    # -- output ---------------------------------------------------------

    def _write(self, text: str) -> None:
        if self._stream is None:
            return
        self._stream.write(text)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def _event_line(self, verb: str, name: str) -> str:
        line = f"{format_timestamp(self._clock.now())} Timer {verb} {name}"
        if self._memory_sampler is not None:
            line += format_free_memory(self._memory_sampler())
        return line + "\n"

    # -- regions --------------------------------------------------------

    def add(self, name: str, note: str = "") -> TimerNode:
        """Create ``name`` under the current region without starting it."""
        return self._tree.create_and_attach(name, note)

    def start(self, name: str, note: str = "") -> None:
        node = self._tree.resolve(name, note)
        self._log.debug("start %s (previous calls=%d)", name, node.call_count)
        if self._stream is not None:
            self._write(self._event_line("start:", name))
        node.begin(self._clock)

    def stop(self, name: str) -> bool:
        """Close ``name``; returns False (and warns) if it is not the open region."""
        current = self._tree.current
        if current is None:
            self._log.debug("stop %s ignored: no active region", name)
            self._write("Warning: No timer is currently active\n")
            return False
        if not self._tree.leave(name, self._clock):
            self._log.debug("stop %s ignored: active region is %s", name, current.name)
            self._write(
                f"Warning: Attempting to stop timer '{name}' "
                f"but current active timer is '{current.name}'\n"
            )
            return False
        self._log.debug("stop %s (wall=%.6fs)", name, current.wall_time_last)
        if self._stream is not None:
            self._write(self._event_line("stop: ", name))
        return True

    def region(self, name: str, note: str = "") -> _Region:
        """Context manager / decorator wrapping ``start``/``stop``."""
        return _Region(self, name, note)

    def reset(self) -> None:
        self._tree = TimerTree()

    # -- queries --------------------------------------------------------

    def get_node(self, name: str) -> Optional[TimerNode]:
        return self._tree.find(name)

    def get_cpu_time_last(self, name: str) -> Optional[float]:
        """CPU seconds of the last completed call, or None if not found."""
        node = self._tree.find(name)
        return None if node is None else node.cpu_time_last

    def get_wall_time_last(self, name: str) -> Optional[float]:
        """Wall seconds of the last completed call, or None if not found."""
        node = self._tree.find(name)
        return None if node is None else node.wall_time_last

    def stats(self) -> List[RegionStats]:
        out: List[RegionStats] = []
        for depth, node in self._tree.walk():
            out.append(
                RegionStats(
                    path=self._tree.path(node.index),
                    depth=depth,
                    name=node.name,
                    label=node.label,
                    calls=node.call_count,
                    cpu_time_total=node.cpu_time_total,
                    wall_time_total=node.wall_time_total,
                    cpu_time_last=node.cpu_time_last,
                    wall_time_last=node.wall_time_last,
                    active=node.active,
                )
            )
        return out

    # -- report ---------------------------------------------------------

    def report(self, max_depth: Optional[int] = None) -> str:
        depth = max_depth if max_depth is not None else self._cfg.max_depth
        return render(self._tree, depth, self._indent, self._cfg.indent_values)

    get_profile_string = report

    def display(self, max_depth: Optional[int] = None) -> None:
        self._write(self.report(max_depth))
