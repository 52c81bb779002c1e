"""
MenuScreen — the only screen of the app.

Widget tree::

    #menu-root  (Vertical)
      #title        (Static — "brew buddy")
      #main         (Horizontal)
        #tea-menu     (TeaMenu — selectable list)
        #journal      (JournalPane — placeholder)
      #gauge-row    (Horizontal)
        #brew-status  (Label)
        #brew-gauge   (ProgressBar — only while brewing)
        #counter      (Label)
      #footer-hint  (Static)

Keybindings:
  up / down   — move selection
  enter       — start brewing the selected tea
  left / right — decrement / increment the counter
  q / escape  — quit
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Label, ProgressBar, Static

from brewbuddy.ui.components.panes import JournalPane, TeaMenu
from brewbuddy.ui.state import (
    FOOTER_HINT,
    PROGRESS_MAX,
    AppState,
    counter_label,
    status_line,
)


class MenuScreen(Screen):  # type: ignore[type-arg]
    """Tea menu with brew gauge; every key goes through ``AppState.handle_key``."""

    BINDINGS = [
        Binding("up", "handle_key('up')", "Up", show=False),
        Binding("down", "handle_key('down')", "Down", show=False),
        Binding("enter", "handle_key('enter')", "Brew", show=False),
        Binding("left", "handle_key('left')", "Counter -", show=False),
        Binding("right", "handle_key('right')", "Counter +", show=False),
        Binding("q", "handle_key('q')", "Quit", show=False),
        Binding("escape", "handle_key('escape')", "Quit", show=False),
    ]

    def __init__(self, state: AppState, title: str = "brew buddy") -> None:
        super().__init__()
        self._state = state
        self._title = title

    # ------------------------------------------------------------------
    # Compose
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        with Vertical(id="menu-root"):
            yield Static(self._title, id="title")
            with Horizontal(id="main"):
                yield TeaMenu(id="tea-menu")
                yield JournalPane()
            with Horizontal(id="gauge-row"):
                yield Label("", id="brew-status")
                yield ProgressBar(total=PROGRESS_MAX, show_eta=False, id="brew-gauge")
                yield Label("", id="counter")
            yield Static(FOOTER_HINT, id="footer-hint")

    def on_mount(self) -> None:
        self.show_state()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def show_state(self) -> None:
        """Push the current state into the widgets; never mutates state."""
        state = self._state
        self.query_one(TeaMenu).show(state)
        self.query_one("#brew-status", Label).update(status_line(state))
        self.query_one("#counter", Label).update(counter_label(state))

        gauge = self.query_one("#brew-gauge", ProgressBar)
        gauge.display = state.active
        gauge.update(progress=state.progress)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_handle_key(self, key: str) -> None:
        self.app.apply_key(key)  # type: ignore[attr-defined]
