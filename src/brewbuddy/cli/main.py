"""
CLI entry point: ``brewbuddy``.

Takes no arguments; starts the interactive menu and exits with its return
code.  Terminal failures are reported on stderr with exit code 1.
"""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.markup import escape

from brewbuddy import __version__
from brewbuddy.core.exceptions import TerminalError
from brewbuddy.core.logging import configure_logging
from brewbuddy.ui.app import run

console = Console(stderr=True)


@click.command("brewbuddy")
@click.version_option(__version__, prog_name="brewbuddy")
def cli() -> None:
    """Pick a tea and brew it, right in your terminal."""
    configure_logging()
    try:
        code = run()
    except TerminalError as exc:
        console.print(f"[bold red]Terminal error:[/bold red] {escape(str(exc))}")
        sys.exit(1)
    sys.exit(code)
