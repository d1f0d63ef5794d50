"""Tests for taskman.logging_setup module."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from rich.logging import RichHandler

from taskman.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore the default handlers after each test."""
    yield
    setup_logging()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_console_handler_only(self) -> None:
        """Test a single rich handler is installed by default."""
        setup_logging(level="INFO")

        handlers = logging.getLogger("taskman").handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert handlers[0].level == logging.INFO

    def test_repeat_calls_replace_handlers(self) -> None:
        """Test calling twice does not duplicate handlers."""
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("taskman").handlers) == 1

    def test_log_file(self, tmp_path: Path) -> None:
        """Test debug records reach the log file."""
        log_file = tmp_path / "logs" / "taskman.log"
        setup_logging(log_file=log_file)

        logging.getLogger("taskman.store").debug("Loaded %d task(s)", 2)

        content = log_file.read_text()
        assert "DEBUG taskman.store: Loaded 2 task(s)" in content
