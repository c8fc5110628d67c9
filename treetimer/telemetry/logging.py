"""Logging setup for treetimer diagnostics.

Environment variables:
- TREETIMER_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default INFO)

The profiler's sink lines (``Timer start: ...``, the report) never go
through logging; loggers here carry diagnostics such as ignored stops or
per-rank file locations. In multi-process runs use ``get_rank_logger`` so
every message says which rank wrote it.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from ..utils.dist import get_rank

_CONFIGURED = False
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_env() -> int:
    lvl = logging.getLevelName(os.getenv("TREETIMER_LOG_LEVEL", "INFO").strip().upper())
    return lvl if isinstance(lvl, int) else logging.INFO


def _configure_once() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return
    logging.basicConfig(level=_level_from_env(), format=_FORMAT)
    _CONFIGURED = True


class _ContextAdapter(logging.LoggerAdapter):
    """Prefix every message with ``[k=v ...]``."""

    def process(self, msg, kwargs):  # type: ignore[override]
        ctx = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"[{ctx}] {msg}", kwargs


def get_logger(
    name: str, context: Optional[Dict[str, object]] = None
) -> logging.Logger | logging.LoggerAdapter:
    _configure_once()
    logger = logging.getLogger(name)
    if context:
        return _ContextAdapter(logger, dict(context))
    return logger


def get_rank_logger(
    name: str, rank: int | None = None, **context: object
) -> logging.LoggerAdapter:
    """Logger tagged ``[rank=N ...]``; the rank is discovered when not given."""
    ctx: Dict[str, object] = {"rank": get_rank() if rank is None else rank}
    ctx.update(context)
    return get_logger(name, ctx)  # type: ignore[return-value]
