"""brewbuddy exception hierarchy."""

from __future__ import annotations


class BrewBuddyError(Exception):
    """Base class for all brewbuddy errors."""


class ConfigError(BrewBuddyError):
    """Built-in configuration values are unusable."""


class TerminalError(BrewBuddyError):
    """The terminal could not be acquired for, or released from, the TUI."""
