"""
brewbuddy UI — Textual application shell.

Launched by ``brewbuddy`` (no args, TTY).  Textual's driver puts the terminal
in raw mode on the alternate screen and restores it on every exit path; the
app polls an interval timer twice per 100 ms step to advance the brew gauge.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from pathlib import Path

import structlog
from textual.app import App, ComposeResult
from textual.binding import Binding

from brewbuddy import __version__
from brewbuddy.core.config import POLLS_PER_TICK, BrewConfig
from brewbuddy.core.exceptions import TerminalError
from brewbuddy.ui.screens.menu import MenuScreen
from brewbuddy.ui.state import AppState

logger = structlog.get_logger()


class BrewBuddyApp(App[None]):
    """brewbuddy interactive terminal UI."""

    TITLE = f"brew buddy {__version__}"
    CSS_PATH = str(Path(__file__).parent / "css" / "brewbuddy.tcss")

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: BrewConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.config = config or BrewConfig()
        self.state = AppState.from_config(self.config)
        self._clock = clock

    def compose(self) -> ComposeResult:
        # The menu screen is pushed in on_mount; compose yields nothing here.
        return iter([])

    def on_mount(self) -> None:
        self.push_screen(MenuScreen(self.state, title=self.config.title))
        self.set_interval(self.config.tick_interval / POLLS_PER_TICK, self.tick)
        logger.info("app.started", items=len(self.state.items))

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def apply_key(self, key: str) -> None:
        """Route a key press into the state and redraw if anything changed."""
        was_active = self.state.active
        changed = self.state.handle_key(key, self._clock())
        if self.state.exit:
            self._finish_session()
            return
        if not changed:
            return
        if self.state.active and not was_active:
            logger.info("brew.started", tea=self.state.brew_item)
        self.refresh_view()

    def tick(self) -> None:
        """Advance the brew gauge if a full interval elapsed since the last step."""
        was_active = self.state.active
        if not self.state.tick(self._clock()):
            return
        if was_active and not self.state.active:
            logger.info("brew.finished", tea=self.state.brew_item)
        self.refresh_view()

    def refresh_view(self) -> None:
        if isinstance(self.screen, MenuScreen):
            self.screen.show_state()

    async def action_quit(self) -> None:
        self.state.request_exit()
        self._finish_session()

    def _finish_session(self) -> None:
        logger.info("app.exit", selected=self.state.selected_item)
        self.exit(return_code=0)


def ensure_terminal() -> None:
    """Raise TerminalError unless stdin and stdout are both attached to a TTY."""
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise TerminalError("brewbuddy needs an interactive terminal (stdin/stdout is not a TTY)")


def run(config: BrewConfig | None = None, headless: bool = False) -> int:
    """Entry point called from the CLI.  Returns the process exit code."""
    ensure_terminal()
    app = BrewBuddyApp(config=config)
    try:
        app.run(headless=headless)
    except OSError as exc:
        raise TerminalError(f"terminal I/O failed: {exc}") from exc
    return app.return_code or 0
