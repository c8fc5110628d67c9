"""treetimer CLI."""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .config import SAMPLERS, ProfilerConfig
from .core.errors import TreeTimerError
from .profiler import Profiler
from .telemetry.logging import get_rank_logger
from .telemetry.memory import get_sampler
from .utils.dist import get_rank, is_coordinator, rank_log_path


def _busy(seconds: float) -> None:
    end = time.perf_counter() + seconds
    while time.perf_counter() < end:
        pass


def _cmd_demo(args: argparse.Namespace) -> int:
    out = sys.stdout
    cfg = ProfilerConfig(
        indent=args.indent,
        max_depth=args.max_depth,
        memory_prof=args.memory,
        memory_sampler=args.sampler,
    )
    # Verbose: start/stop lines go to stdout as they happen
    prof = Profiler(out, config=cfg)
    prof.start("hello", "Say Hello to")
    prof.start("World")
    _busy(args.work)
    prof.stop("World")
    prof.start("You")
    _busy(args.work)
    prof.stop("You")
    prof.stop("hello")

    out.write("Statistics from 'profiler'\n")
    prof.display()
    out.write("\n")

    # Silent: nothing written until the report is requested
    quiet = Profiler(config=cfg)
    quiet.start("test_silent", "Test silent")
    quiet.start("test_1")
    quiet.stop("test_1")
    quiet.start("test_2")
    quiet.stop("test_2")
    quiet.stop("test_silent")
    quiet.indent = args.indent + 1
    out.write("Statistics from 'profiler_silent'\n")
    out.write(quiet.report())
    return 0


def _cmd_mpi_demo(args: argparse.Namespace) -> int:
    rank = get_rank()
    path = rank_log_path(args.prefix, rank, args.directory)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as fh:
        prof = Profiler(fh)
        prof.start("hello")
        prof.stop("hello")
        prof.start("world")
        prof.stop("world")
        prof.display()
    get_rank_logger("treetimer.cli", rank).info("profile written to %s", path)
    if is_coordinator(rank):
        sys.stdout.write(prof.report())
    return 0


def _cmd_meminfo(args: argparse.Namespace) -> int:
    value = get_sampler(args.sampler)()
    if value is None:
        print(f"{args.sampler}: free memory unavailable")
        return 1
    print(f"{args.sampler}: {value:.3f} GB free")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="treetimer")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("demo", help="Run the verbose/silent profiler walkthrough")
    sp.add_argument("--indent", type=int, default=1, help="Spaces per nesting level")
    sp.add_argument("--max-depth", type=int, default=None, help="Deepest level to report")
    sp.add_argument("--memory", action="store_true", help="Append free memory to start/stop lines")
    sp.add_argument("--sampler", choices=SAMPLERS, default="host")
    sp.add_argument("--work", type=float, default=0.0, help="Seconds of busy work per inner region")
    sp.set_defaults(func=_cmd_demo)

    sp = sub.add_parser("mpi-demo", help="Per-rank log file; rank 0 prints the report")
    sp.add_argument("--directory", type=Path, default=Path("."))
    sp.add_argument("--prefix", default="profiler_myid_")
    sp.set_defaults(func=_cmd_mpi_demo)

    sp = sub.add_parser("meminfo", help="Print the current free-memory reading")
    sp.add_argument("--sampler", choices=SAMPLERS, default="host")
    sp.set_defaults(func=_cmd_meminfo)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except TreeTimerError as e:
        print(f"treetimer: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
