"""Structured logging configuration.

This module initializes structlog with a stable JSON event format and
routes it through stdlib logging so lines reach syslog and stderr.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import logging.handlers
import sys
from typing import Any

import structlog

from core.config import EventLoadConfig
from core.constants import SYSLOG_IDENT
from core.errors import EventLoadConfigError


@dataclass
class LoggingSession:
    """Handlers installed for one process run.

    Attributes:
        handlers: Handlers attached to the root logger.
    """

    handlers: list[logging.Handler]

    def close(self) -> None:
        """Flush, detach, and close every installed handler."""
        root_logger = logging.getLogger()
        for handler in self.handlers:
            handler.flush()
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def configure_logging(config: EventLoadConfig) -> LoggingSession:
    """Configure structlog and attach stderr and syslog handlers.

    Args:
        config: Runtime configuration with log level and syslog settings.

    Returns:
        Session whose ``close`` must be called at shutdown.

    Raises:
        EventLoadConfigError: If the syslog daemon cannot be reached.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.syslog_enabled:
        handlers.append(_build_syslog_handler(config.syslog_address))
    root_logger = logging.getLogger()
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level)
    return LoggingSession(handlers=handlers)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger accepting keyword event fields.
    """
    return structlog.get_logger(name)


def _build_syslog_handler(address: str) -> logging.Handler:
    """Create a LOCAL0 syslog handler for a socket path or ``host:port``."""
    try:
        handler = logging.handlers.SysLogHandler(
            address=_parse_syslog_address(address),
            facility=logging.handlers.SysLogHandler.LOG_LOCAL0,
        )
    except OSError as error:
        raise EventLoadConfigError(
            f"Failed to connect to syslog at {address}: {error}. "
            "Set EVENTLOAD_SYSLOG_ADDRESS or disable syslog with EVENTLOAD_SYSLOG=false."
        ) from error
    handler.ident = f"{SYSLOG_IDENT}: "
    return handler


def _parse_syslog_address(address: str) -> str | tuple[str, int]:
    if address.startswith("/"):
        return address
    host, separator, port = address.rpartition(":")
    if not separator or not host or not port.isdigit():
        raise EventLoadConfigError(
            f"Invalid syslog address '{address}': expected a socket path or host:port."
        )
    return host, int(port)
