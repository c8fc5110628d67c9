from __future__ import annotations

from datetime import datetime, timedelta

import pytest


class ManualClock:
    """Clock whose readings only move when told to."""

    def __init__(self) -> None:
        self.cpu_t = 100.0
        self.wall_t = 1000.0
        self.ts = datetime(2024, 5, 17, 9, 30, 15, 123456)

    def cpu(self) -> float:
        return self.cpu_t

    def wall(self) -> float:
        return self.wall_t

    def now(self) -> datetime:
        return self.ts

    def advance(self, cpu: float = 0.0, wall: float = 0.0) -> None:
        self.cpu_t += cpu
        self.wall_t += wall
        self.ts += timedelta(seconds=wall)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def make_clock():
    return ManualClock
