from __future__ import annotations

import pytest

from treetimer.config import ProfilerConfig
from treetimer.core.errors import ConfigError, TreeTimerError


def test_defaults():
    cfg = ProfilerConfig()
    assert cfg.indent == 1
    assert cfg.max_depth is None
    assert cfg.memory_prof is False
    assert cfg.memory_sampler == "host"
    assert cfg.indent_values is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"indent": -1},
        {"indent": True},
        {"indent": 2.0},
        {"max_depth": -2},
        {"max_depth": 1.5},
        {"max_depth": False},
        {"memory_sampler": "disk"},
    ],
)
def test_invalid_values_raise(kwargs):
    with pytest.raises(ConfigError):
        ProfilerConfig(**kwargs)


def test_config_error_is_package_error():
    assert issubclass(ConfigError, TreeTimerError)


def test_from_env(monkeypatch):
    monkeypatch.setenv("TREETIMER_INDENT", "2")
    monkeypatch.setenv("TREETIMER_MAX_DEPTH", "3")
    monkeypatch.setenv("TREETIMER_MEMORY_PROF", "yes")
    monkeypatch.setenv("TREETIMER_MEMORY_SAMPLER", "gpu")
    monkeypatch.setenv("TREETIMER_INDENT_VALUES", "0")
    cfg = ProfilerConfig.from_env()
    assert cfg == ProfilerConfig(
        indent=2, max_depth=3, memory_prof=True, memory_sampler="gpu", indent_values=False
    )


def test_from_env_ignores_garbage(monkeypatch):
    monkeypatch.setenv("TREETIMER_INDENT", "-5")
    monkeypatch.setenv("TREETIMER_MAX_DEPTH", "deep")
    monkeypatch.setenv("TREETIMER_MEMORY_SAMPLER", "disk")
    cfg = ProfilerConfig.from_env()
    assert cfg.indent == 0
    assert cfg.max_depth is None
    assert cfg.memory_sampler == "host"
