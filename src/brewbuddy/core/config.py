"""
Built-in configuration for brewbuddy.

There is no config file and no environment lookup: ``BrewConfig`` only
carries the defaults so the app and the tests can swap them explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass

from brewbuddy.core.exceptions import ConfigError

DEFAULT_TEAS: tuple[str, ...] = (
    "green tea",
    "black tea",
    "herbal tea",
    "jasmine tea",
    "[+ add a custom tea]",
)

# One progress step per interval (10 Hz).
DEFAULT_TICK_INTERVAL = 0.1

# Tick timer fires this many times per step interval.
POLLS_PER_TICK = 2


@dataclass(frozen=True)
class BrewConfig:
    title: str = "brew buddy"
    teas: tuple[str, ...] = DEFAULT_TEAS
    tick_interval: float = DEFAULT_TICK_INTERVAL

    def __post_init__(self) -> None:
        if not self.teas:
            raise ConfigError("menu must contain at least one item")
        if self.tick_interval <= 0:
            raise ConfigError(f"tick_interval must be positive, got {self.tick_interval}")
