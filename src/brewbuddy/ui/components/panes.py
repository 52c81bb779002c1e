"""Content panes of the menu screen."""

from __future__ import annotations

from textual.widgets import Static

from brewbuddy.ui.state import AppState, render_menu


class TeaMenu(Static):
    """Left pane: the selectable tea list, redrawn from ``AppState``."""

    def on_mount(self) -> None:
        self.border_title = "tea menu"

    def show(self, state: AppState) -> None:
        self.update(render_menu(state))


class JournalPane(Static):
    """Right pane: static brew journal placeholder."""

    def __init__(self) -> None:
        super().__init__(
            "No journal entries yet.\n\nTasting notes will show up here.",
            id="journal",
        )

    def on_mount(self) -> None:
        self.border_title = "brew journal"
