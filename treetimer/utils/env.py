"""Environment parsing helpers.

Small helpers to read TREETIMER_* variables with sane defaults.
"""
from __future__ import annotations

import os

_TRUE = ("1", "true", "True", "TRUE", "yes", "YES", "on", "On")


def env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None or val.strip() == "":
        return bool(default)
    return val.strip() in _TRUE


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    try:
        v = int(os.getenv(name, str(default)))
    except ValueError:
        v = int(default)
    if minimum is not None:
        v = max(minimum, v)
    return v


def env_optional_int(name: str, minimum: int | None = None) -> int | None:
    """Like env_int, but unset/blank/invalid values map to None."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        v = int(raw)
    except ValueError:
        return None
    if minimum is not None:
        v = max(minimum, v)
    return v


def env_str(name: str, default: str, choices: tuple[str, ...] | None = None) -> str:
    val = os.getenv(name, "").strip().lower()
    if not val:
        return default
    if choices is not None and val not in choices:
        return default
    return val
