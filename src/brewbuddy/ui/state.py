"""
UI state types — pure Python dataclasses, no Textual imports.

These can be constructed and tested without a running Textual app.  The
Textual layer owns the clock and passes monotonic readings in, so every
transition here is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from rich.text import Text

from brewbuddy.core.config import DEFAULT_TEAS, BrewConfig

PROGRESS_MAX = 100
COUNTER_MAX = 255

EXIT_KEYS = frozenset({"q", "escape"})

SELECTED_STYLE = "black on bright_red"

FOOTER_HINT = "↑/↓ to move • enter to brew • ←/→ counter • q to quit"


class Phase(StrEnum):
    IDLE = "idle"
    ACTIVE = "active"


@dataclass
class AppState:
    """Everything the menu loop renders, mutated in place by key and tick handlers."""

    items: tuple[str, ...] = DEFAULT_TEAS
    selected: int = 0
    exit: bool = False
    progress: int = 0
    active: bool = False
    last_tick: float = 0.0
    counter: int = 0
    interval: float = 0.1
    brew_item: str = ""

    @classmethod
    def from_config(cls, config: BrewConfig) -> AppState:
        return cls(items=config.teas, interval=config.tick_interval)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_previous(self) -> bool:
        """Move the selection up one entry (clamped at the top)."""
        if self.selected == 0:
            return False
        self.selected -= 1
        return True

    def select_next(self) -> bool:
        """Move the selection down one entry (clamped at the bottom)."""
        if self.selected >= len(self.items) - 1:
            return False
        self.selected += 1
        return True

    # ------------------------------------------------------------------
    # Brew progress
    # ------------------------------------------------------------------

    def start_brew(self, now: float) -> bool:
        """Start a timed brew of the selected item; no-op while one is running."""
        if self.active:
            return False
        self.active = True
        self.progress = 0
        self.last_tick = now
        self.brew_item = self.selected_item
        return True

    def tick(self, now: float) -> bool:
        """
        Advance progress by one step if a full interval has elapsed.

        Returns True when progress changed.  At most one step is applied per
        call.  The reference timestamp moves forward by one interval so a
        late poll does not shift later windows; after a stall longer than two
        intervals it snaps to ``now`` and the backlog is dropped.
        """
        if not self.active:
            return False
        elapsed = now - self.last_tick
        if elapsed < self.interval:
            return False
        self.progress = min(self.progress + 1, PROGRESS_MAX)
        if elapsed >= 2 * self.interval:
            self.last_tick = now
        else:
            self.last_tick += self.interval
        if self.progress >= PROGRESS_MAX:
            self.active = False
        return True

    # ------------------------------------------------------------------
    # Counter
    # ------------------------------------------------------------------

    def increment_counter(self) -> bool:
        if self.counter >= COUNTER_MAX:
            return False
        self.counter += 1
        return True

    def decrement_counter(self) -> bool:
        if self.counter <= 0:
            return False
        self.counter -= 1
        return True

    # ------------------------------------------------------------------
    # Input dispatch
    # ------------------------------------------------------------------

    def request_exit(self) -> None:
        self.exit = True

    def handle_key(self, key: str, now: float) -> bool:
        """Apply the transition bound to a Textual key name.

        Unknown keys are ignored.  Returns whether the state changed.
        """
        if key in EXIT_KEYS:
            self.request_exit()
            return True
        if key == "up":
            return self.select_previous()
        if key == "down":
            return self.select_next()
        if key == "enter":
            return self.start_brew(now)
        if key == "left":
            return self.decrement_counter()
        if key == "right":
            return self.increment_counter()
        return False

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def selected_item(self) -> str:
        return self.items[self.selected]

    @property
    def phase(self) -> Phase:
        return Phase.ACTIVE if self.active else Phase.IDLE

    @property
    def fraction(self) -> float:
        """0.0 – 1.0 progress of the current (or last) brew."""
        return self.progress / PROGRESS_MAX


# ---------------------------------------------------------------------------
# Rendering helpers — pure functions of state, no Textual dependency
# ---------------------------------------------------------------------------


def render_menu(state: AppState) -> Text:
    """Return the menu as rich text, one line per item, selection highlighted."""
    text = Text(no_wrap=True, overflow="ellipsis")
    for index, item in enumerate(state.items):
        if index:
            text.append("\n")
        text.append(item, style=SELECTED_STYLE if index == state.selected else "")
    return text


def status_line(state: AppState) -> str:
    if state.active:
        return f"brewing {state.brew_item}… {state.progress}%"
    if state.brew_item and state.progress >= PROGRESS_MAX:
        return f"{state.brew_item} is ready"
    return "press enter to brew"


def counter_label(state: AppState) -> str:
    return f"counter {state.counter:>3}"


__all__ = [
    "AppState",
    "COUNTER_MAX",
    "EXIT_KEYS",
    "FOOTER_HINT",
    "PROGRESS_MAX",
    "Phase",
    "SELECTED_STYLE",
    "counter_label",
    "render_menu",
    "status_line",
]
