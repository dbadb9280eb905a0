"""Interfaces (Protocol) implemented by adapters."""

from pagseguro.core.interfaces.log_sink import LogSink, NullLogSink

__all__ = ["LogSink", "NullLogSink"]
