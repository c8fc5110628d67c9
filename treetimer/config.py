"""Configuration for treetimer.

Values come from keyword arguments or, via ``ProfilerConfig.from_env``,
from TREETIMER_* environment variables.
"""
from __future__ import annotations

from dataclasses import dataclass

from .core.errors import ConfigError
from .utils.env import env_bool, env_int, env_optional_int, env_str

SAMPLERS = ("host", "gpu")


def check_non_negative_int(field: str, value: object, allow_none: bool = False) -> None:
    """Raise ConfigError unless ``value`` is an int >= 0 (bools rejected)."""
    if value is None and allow_none:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        expected = "a non-negative int or None" if allow_none else "a non-negative int"
        raise ConfigError(f"{field} must be {expected}, got {value!r}")


@dataclass(slots=True)
class ProfilerConfig:
    indent: int = 1
    max_depth: int | None = None
    memory_prof: bool = False
    memory_sampler: str = "host"
    indent_values: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        check_non_negative_int("indent", self.indent)
        check_non_negative_int("max_depth", self.max_depth, allow_none=True)
        if self.memory_sampler not in SAMPLERS:
            raise ConfigError(
                f"unknown memory sampler {self.memory_sampler!r}; expected one of {SAMPLERS}"
            )

    @classmethod
    def from_env(cls) -> "ProfilerConfig":
        """TREETIMER_INDENT, TREETIMER_MAX_DEPTH, TREETIMER_MEMORY_PROF,
        TREETIMER_MEMORY_SAMPLER, TREETIMER_INDENT_VALUES."""
        return cls(
            indent=env_int("TREETIMER_INDENT", 1, minimum=0),
            max_depth=env_optional_int("TREETIMER_MAX_DEPTH", minimum=0),
            memory_prof=env_bool("TREETIMER_MEMORY_PROF", False),
            memory_sampler=env_str("TREETIMER_MEMORY_SAMPLER", "host", SAMPLERS),
            indent_values=env_bool("TREETIMER_INDENT_VALUES", True),
        )


DEFAULT_CONFIG = ProfilerConfig()
