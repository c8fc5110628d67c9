"""Common exceptions for treetimer.

Start/stop/query misuse never raises; these cover configuration only.
"""
from __future__ import annotations


class TreeTimerError(Exception):
    pass


class ConfigError(TreeTimerError):
    pass


class SamplerError(TreeTimerError):
    pass
