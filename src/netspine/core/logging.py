"""
Structured logging for netspine.

Provides a single entry point for configuring structlog plus the helpers
operators use to attach call-site context to every log entry.

Configuration is read from settings (and therefore the environment) when not
passed explicitly:

- ``NETSPINE_LOG_LEVEL``: DEBUG | INFO | WARNING | ERROR (default: INFO)
- ``NETSPINE_LOG_FORMAT``: json | console (default: console)

Context is bound through ``structlog.contextvars``, which is thread-safe and
asyncio-compatible, so concurrent call-sites never see each other's fields.

Examples:
    >>> from netspine.core.logging import configure_logging, get_logger, LogContext
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> log = get_logger(__name__)
    >>> with LogContext(operator="ips", location="meta.ips"):
    ...     log.debug("operator.start")

Tags:
    logging, structlog, observability, contextvars, netspine

Doc-Types:
    - API Reference
    - Observability Guide
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from netspine.core.errors import ConfigError
from netspine.core.settings import LOG_LEVELS, get_settings

_SERVICE_NAME = "netspine"

_configured = False


def _add_service_metadata(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    force: bool = False,
) -> None:
    """Configure structured logging for the application.

    Subsequent calls are no-ops unless ``force`` is set.

    Args:
        level: Log level (overrides NETSPINE_LOG_LEVEL)
        json_format: True for JSON, False for console (overrides NETSPINE_LOG_FORMAT)
        force: Reconfigure even if already configured

    Raises:
        ConfigError: if ``level`` is not one of DEBUG, INFO, WARNING or ERROR
    """
    global _configured

    if _configured and not force:
        return

    settings = get_settings()
    log_level = (level or settings.log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    if json_format is None:
        json_format = settings.log_format == "json"

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_metadata,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    logging.getLogger("netspine").setLevel(getattr(logging, log_level))

    _configured = True


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs.

    Example:
        bind_context(operator="ips", location="networks.z1.static")
        log.debug("operator.start")  # includes operator and location
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


def get_context() -> dict[str, Any]:
    """Return the currently bound context."""
    return dict(structlog.contextvars.get_contextvars())


class LogContext:
    """Context manager for scoped logging context.

    Restores whatever was bound before on exit, so nested scopes compose.

    Example:
        with LogContext(operator="ips", location="meta.ips"):
            log.debug("operator.start")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> LogContext:
        self._tokens = structlog.contextvars.bind_contextvars(**self._context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)


__all__ = [
    "configure_logging",
    "is_configured",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "get_context",
    "LogContext",
]
