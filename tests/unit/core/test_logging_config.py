"""Unit tests for logging configuration."""

from __future__ import annotations

from dataclasses import replace
import logging

import pytest

from core.errors import EventLoadConfigError
from core.logging_config import configure_logging, get_logger


def test_configure_logging_installs_and_removes_handlers(event_config) -> None:
    """Closing the session should detach every installed handler."""
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)

    session = configure_logging(event_config)
    installed = [handler for handler in root_logger.handlers if handler not in original_handlers]
    session.close()

    assert len(installed) == 1
    assert all(handler not in root_logger.handlers for handler in installed)


def test_configure_logging_writes_json_events(event_config, capsys) -> None:
    """Configured loggers should render JSON lines on stderr."""
    session = configure_logging(event_config)
    try:
        get_logger("tests.logging").info("run_started", intake_dir="/tmp/in")
    finally:
        session.close()

    error_output = capsys.readouterr().err

    assert '"event": "run_started"' in error_output
    assert '"intake_dir": "/tmp/in"' in error_output


def test_configure_logging_rejects_malformed_syslog_address(event_config) -> None:
    """A syslog address that is neither a path nor host:port is invalid."""
    config = replace(event_config, syslog_enabled=True, syslog_address="localhost")

    with pytest.raises(EventLoadConfigError):
        configure_logging(config)
