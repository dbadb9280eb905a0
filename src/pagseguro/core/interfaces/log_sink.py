"""Logging contract used by the resources.

Resources never create loggers; they receive a `LogSink`. A structlog bound
logger satisfies the protocol as is (`pagseguro.adapters.logging`).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Minimal structured logging surface: an event name plus key/value fields."""

    def debug(self, event: str, **fields: Any) -> Any: ...

    def info(self, event: str, **fields: Any) -> Any: ...

    def warning(self, event: str, **fields: Any) -> Any: ...

    def error(self, event: str, **fields: Any) -> Any: ...


class NullLogSink:
    """Discards every event."""

    def debug(self, event: str, **fields: Any) -> None:
        return None

    def info(self, event: str, **fields: Any) -> None:
        return None

    def warning(self, event: str, **fields: Any) -> None:
        return None

    def error(self, event: str, **fields: Any) -> None:
        return None
