"""Log sinks: debug output, TCP network stream and file."""

from __future__ import annotations

import io
import logging
import socket
import sys
import threading
import time
from abc import ABC, abstractmethod
from enum import Enum, auto
from pathlib import Path
from typing import Any, Callable, Iterator, TextIO

_debug = logging.getLogger(__name__).debug

_ROW_BYTES = 16
_RECONNECT_INTERVAL = 4


def _render(fmt: str | None, args: tuple[Any, ...]) -> str:
    if fmt is None:
        return ""
    return fmt % args if args else fmt


def hex_rows(buffer: bytes) -> Iterator[str]:
    """Yield the buffer as rows of up to sixteen upper-case hex bytes."""
    data = bytes(buffer)
    for start in range(0, len(data), _ROW_BYTES):
        yield " ".join(f"{byte:02X}" for byte in data[start : start + _ROW_BYTES])


class LogSink(ABC):
    """Somewhere log output goes."""

    @abstractmethod
    def log(self, fmt: str, *args: Any) -> None:
        """Write printf-style formatted text."""

    @abstractmethod
    def log_line(self, fmt: str | None = None, *args: Any) -> None:
        """Write formatted text followed by a line break; no format gives an empty line."""

    @abstractmethod
    def log_buffer_hex(self, buffer: bytes) -> None:
        """Write a buffer as rows of hex bytes."""


class SinkChain(LogSink):
    """Passes every message on to each sink it holds, in the order they were added."""

    def __init__(self) -> None:
        self._sinks: list[LogSink] = []

    def add(self, sink: LogSink) -> None:
        if any(existing is sink for existing in self._sinks):
            raise ValueError("sink is already in the chain")
        self._sinks.append(sink)

    def remove(self, sink: LogSink) -> None:
        """Remove ``sink``; a sink that is not in the chain is ignored."""
        self._sinks = [existing for existing in self._sinks if existing is not sink]

    def __iter__(self) -> Iterator[LogSink]:
        return iter(list(self._sinks))

    def __len__(self) -> int:
        return len(self._sinks)

    def log(self, fmt: str, *args: Any) -> None:
        for sink in self:
            sink.log(fmt, *args)

    def log_line(self, fmt: str | None = None, *args: Any) -> None:
        for sink in self:
            sink.log_line(fmt, *args)

    def log_buffer_hex(self, buffer: bytes) -> None:
        for sink in self:
            sink.log_buffer_hex(buffer)


class DebugPrintSink(LogSink):
    """Writes each message as one debug record on a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def _output(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        stream.write(text + "\n")
        stream.flush()

    def log(self, fmt: str, *args: Any) -> None:
        self._output(_render(fmt, args))

    def log_line(self, fmt: str | None = None, *args: Any) -> None:
        # Every debug record already ends a line.
        self._output(_render(fmt, args))

    def log_buffer_hex(self, buffer: bytes) -> None:
        for row in hex_rows(buffer):
            self._output(row)


class ConnectResult(Enum):
    SUCCESS = auto()
    ALREADY_INITIALIZED = auto()
    NETWORK_FAILED = auto()
    SOCKET_FAILED = auto()
    RESOLVE_FAILED = auto()
    NO_SERVER = auto()


class NetworkSink(LogSink):
    """Streams log text to a TCP server.

    When the connection is down nothing is sent; with ``try_reconnect`` a new
    connection is attempted at most once every four seconds of ``clock``.
    """

    def __init__(
        self,
        host: str,
        port: int,
        try_reconnect: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.host = host
        self.port = port
        self.reconnect = try_reconnect
        self.clock = clock
        self._last_reconnect: float | None = None
        self._socket: socket.socket | None = None
        self._lock = threading.Lock()
        self.connect()

    def connect(self) -> ConnectResult:
        if self._socket is not None:
            _debug("NetworkSink: Already connected.")
            return ConnectResult.ALREADY_INITIALIZED

        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)
        except OSError:
            _debug("NetworkSink: failed to create socket")
            return ConnectResult.SOCKET_FAILED

        try:
            infos = socket.getaddrinfo(self.host, self.port, socket.AF_INET, socket.SOCK_STREAM)
        except (OSError, UnicodeError):
            infos = []
        if not infos:
            _debug("NetworkSink: failed to resolve host")
            sock.close()
            return ConnectResult.RESOLVE_FAILED

        _debug("NetworkSink: connecting to %s:%d", self.host, self.port)
        try:
            sock.connect(infos[0][4])
        except OSError:
            _debug("NetworkSink: failed to connect to server")
            sock.close()
            return ConnectResult.NO_SERVER

        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        self._socket = sock
        _debug("NetworkSink: connected to server")
        return ConnectResult.SUCCESS

    def is_successfully_connected(self) -> bool:
        return self._socket is not None

    def close(self) -> None:
        with self._lock:
            if self._socket is not None:
                self._socket.close()
                self._socket = None

    def __enter__(self) -> NetworkSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, text: str) -> None:
        if self._socket is None:
            if not self.reconnect:
                return
            now = self.clock()
            if self._last_reconnect is not None and now - self._last_reconnect <= _RECONNECT_INTERVAL:
                return
            self._last_reconnect = now
            if self.connect() is not ConnectResult.SUCCESS:
                return

        with self._lock:
            sock = self._socket
            if sock is None:
                return
            try:
                sock.sendall(text.encode("utf-8"))
            except OSError:
                sock.close()
                self._socket = None
                _debug("Message could not be delivered! Trying to connect to server next time.")

    def log(self, fmt: str, *args: Any) -> None:
        self._send(_render(fmt, args))

    def log_line(self, fmt: str | None = None, *args: Any) -> None:
        self._send(_render(fmt, args) + "\n")

    def log_buffer_hex(self, buffer: bytes) -> None:
        for row in hex_rows(buffer):
            self._send(row)
            self.log_line()


class FileSink(LogSink):
    """Writes log text to a file, replacing any file already at ``path``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._handle: io.BufferedWriter | None = None
        try:
            self.path.unlink(missing_ok=True)
            self._handle = self.path.open("wb")
        except OSError:
            _debug("FileSink: failed to open file")

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    def __enter__(self) -> FileSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _write(self, text: str) -> None:
        with self._lock:
            if self._handle is None:
                return
            self._handle.write(text.encode("utf-8"))
            self._handle.flush()

    def log(self, fmt: str, *args: Any) -> None:
        self._write(_render(fmt, args))

    def log_line(self, fmt: str | None = None, *args: Any) -> None:
        self._write(_render(fmt, args) + "\n")

    def log_buffer_hex(self, buffer: bytes) -> None:
        for row in hex_rows(buffer):
            self._write(row)
            self.log_line()