"""
structlog configuration.

The TUI owns stdout while it runs, so records are routed through stdlib
logging into Textual's devtools console (``textual console``) instead of
being printed.
"""

from __future__ import annotations

import logging

import structlog
from textual.logging import TextualHandler

LOGGER_NAME = "brewbuddy"


def configure_logging(level: int = logging.INFO) -> None:
    """Install the Textual handler on the ``brewbuddy`` logger and wire structlog to it."""
    handler = TextualHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger(LOGGER_NAME)
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
