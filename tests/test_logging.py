from __future__ import annotations

import io
import logging

from treetimer import Profiler
from treetimer.telemetry.logging import get_logger


def test_get_logger_with_context_prefixes_messages(caplog):
    log = get_logger("treetimer.test", {"rank": 3})
    with caplog.at_level(logging.INFO, logger="treetimer.test"):
        log.info("hello")
    assert caplog.records[-1].getMessage() == "[rank=3] hello"


def test_profiler_logs_anomalies_at_debug(caplog, clock):
    sink = io.StringIO()
    p = Profiler(sink, clock=clock)
    with caplog.at_level(logging.DEBUG, logger="treetimer.profiler"):
        p.start("a")
        p.stop("b")
    messages = [r.getMessage() for r in caplog.records]
    assert "stop b ignored: active region is a" in messages
    # the sink format is not routed through logging
    assert all("Warning:" not in m for m in messages)


def test_rank_logger_discovers_rank(monkeypatch, caplog):
    import treetimer.telemetry.logging as tlog

    monkeypatch.setattr(tlog, "get_rank", lambda: 7)
    log = tlog.get_rank_logger("treetimer.test.rank", stage="io")
    with caplog.at_level(logging.INFO, logger="treetimer.test.rank"):
        log.info("done")
        tlog.get_rank_logger("treetimer.test.rank", rank=0).info("coordinator")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["[rank=7 stage=io] done", "[rank=0] coordinator"]


def test_level_from_env(monkeypatch):
    import treetimer.telemetry.logging as tlog

    monkeypatch.setenv("TREETIMER_LOG_LEVEL", "debug")
    assert tlog._level_from_env() == logging.DEBUG
    monkeypatch.setenv("TREETIMER_LOG_LEVEL", "chatty")
    assert tlog._level_from_env() == logging.INFO
