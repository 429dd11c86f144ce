from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and the rotating log file.
"""

import logging
from pathlib import Path

import pytest

from pathtree.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from pathtree.infra.logging.core import QUEUE_LISTENER_ATTR, parse_level
from pathtree.infra.logging.handlers import is_our_handler


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach pathtree handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if is_our_handler(h)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple configure calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    first = getattr(logging.getLogger(), QUEUE_LISTENER_ATTR)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert getattr(logging.getLogger(), QUEUE_LISTENER_ATTR) is not first
    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_file_logging(tmp_path: Path) -> None:
    """TC-02: Records reach the log file once the listener is flushed."""
    log_file = tmp_path / "logs" / "pathtree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("pathtree.test").debug("Added child.")
    shutdown_logging()

    assert "Added child." in log_file.read_text(encoding="utf-8")


def test_no_handlers_requested() -> None:
    configure_logging(LoggingConfig(console=False, log_file=None))

    assert _our_handlers() == []


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), ("WARN", logging.WARNING), ("", logging.INFO), ("??", logging.INFO)],
)
def test_parse_level(name, expected) -> None:
    assert parse_level(name) == expected
