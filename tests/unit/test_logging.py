"""Unit tests for brewbuddy.core.logging."""

from __future__ import annotations

import logging

import structlog
from textual.logging import TextualHandler

from brewbuddy.core.logging import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_routes_to_textual_handler(self) -> None:
        configure_logging()
        root = logging.getLogger(LOGGER_NAME)
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], TextualHandler)
        assert root.propagate is False

    def test_level(self) -> None:
        configure_logging(logging.DEBUG)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_idempotent(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_structlog_uses_stdlib(self) -> None:
        configure_logging()
        assert structlog.is_configured()
        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
