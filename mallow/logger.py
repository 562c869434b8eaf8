"""The process-wide log: a chain of sinks and functions that write to it."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from .sinks import LogSink, SinkChain


class LoggerSinks(Enum):
    DEBUG_PRINT = auto()
    NETWORK = auto()
    FILE = auto()


_chain = SinkChain()


def get_log_sink() -> SinkChain:
    """The chain every log function writes to."""
    return _chain


def add_log_sink(sink: LogSink) -> None:
    _chain.add(sink)


def remove_log_sink(sink: LogSink) -> None:
    _chain.remove(sink)


def log(fmt: str, *args: Any) -> None:
    _chain.log(fmt, *args)


def log_line(fmt: str | None = None, *args: Any) -> None:
    _chain.log_line(fmt, *args)


def log_buffer_hex(buffer: bytes) -> None:
    _chain.log_buffer_hex(buffer)