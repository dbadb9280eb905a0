"""Default log sink built on structlog."""

from __future__ import annotations

import logging

import structlog

from pagseguro.core.config import AppSettings
from pagseguro.core.interfaces.log_sink import LogSink


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure structlog rendering (console or JSON) and the minimum level.

    Applications that already configure structlog should skip this call.
    """

    settings = settings or AppSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_log_sink(name: str = "pagseguro") -> LogSink:
    return structlog.get_logger(name)
