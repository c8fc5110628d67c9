from __future__ import annotations

from treetimer.node import TimerNode


def test_begin_end_accumulates_seconds(clock):
    n = TimerNode("a")
    n.begin(clock)
    assert n.active and n.call_count == 1
    clock.advance(cpu=0.25, wall=0.5)
    n.end(clock)
    assert not n.active
    assert n.cpu_time_last == 0.25
    assert n.wall_time_last == 0.5
    n.begin(clock)
    assert n.cpu_time_last == 0.0 and n.wall_time_last == 0.0
    clock.advance(cpu=0.5, wall=1.0)
    n.end(clock)
    assert n.call_count == 2
    assert n.cpu_time_total == 0.75
    assert n.wall_time_total == 1.5
    assert n.wall_time_last == 1.0


def test_end_without_begin_is_noop(clock):
    n = TimerNode("a")
    n.end(clock)
    assert n.call_count == 0
    assert n.wall_time_total == 0.0


def test_begin_while_active_closes_previous_interval(clock):
    n = TimerNode("x")
    n.begin(clock)
    clock.advance(cpu=1.0, wall=2.0)
    n.begin(clock)
    assert n.call_count == 2
    assert n.active
    assert n.wall_time_total == 2.0
    # last-call values are reset for the new interval
    assert n.wall_time_last == 0.0
    clock.advance(cpu=1.0, wall=3.0)
    n.end(clock)
    assert n.wall_time_total == 5.0
    assert n.cpu_time_total == 2.0


def test_backwards_clock_never_decreases_totals(clock):
    n = TimerNode("a")
    n.begin(clock)
    clock.advance(cpu=-1.0, wall=-1.0)
    n.end(clock)
    assert n.cpu_time_total == 0.0
    assert n.wall_time_total == 0.0


def test_label_falls_back_to_name():
    assert TimerNode("a").label == "a"
    assert TimerNode("a", note="Alpha").label == "Alpha"
