# Area: Shared
"""
kgp_client._shared.transport — Line-oriented TCP transport
==========================================================

Owns the single byte stream to the server. The engine calls
``poll_incoming()`` to get complete lines and ``send()`` to deliver
outgoing ones. Agents never use this directly.

A daemon reader thread splits the stream on line feeds and feeds a
queue; ``poll_incoming()`` drains that queue and waits at most the
given timeout, so polling never stalls the caller. A line that is not
valid in the configured encoding fails like a malformed line.
"""

from __future__ import annotations

import logging
import queue
import socket
import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from ..errors import DecodeError, KgpConnectionError
from .codec import LINE_TERMINATOR

logger = logging.getLogger("kgp_client.transport")

_EOF = object()


class Transport(ABC):
    """Contract the session engine relies on."""

    @abstractmethod
    def connect(self, host: str, port: int) -> None:
        """Open the stream. Raises KgpConnectionError on failure."""

    @abstractmethod
    def send(self, line: str, timeout: Optional[float] = None) -> None:
        """Write one line (terminator appended). Raises KgpConnectionError.

        With ``timeout`` the write gives up after that many seconds.
        """

    @abstractmethod
    def poll_incoming(self, timeout: float = 0.0) -> List[str]:
        if self._bad_line is not None:
            raise self._bad_line
        """Return the complete lines received so far, waiting at most ``timeout`` seconds."""

    @abstractmethod
    def close(self) -> None:
        """Release the stream. Idempotent."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class SocketTransport(Transport):
    """TCP transport with a background reader thread."""

    def __init__(self, connect_timeout: float = 10.0, encoding: str = "utf-8"):
        self.connect_timeout = connect_timeout
        self.encoding = encoding
        self._sock: Optional[socket.socket] = None
        self._reader: Optional[threading.Thread] = None
        self._lines: "queue.Queue[object]" = queue.Queue()
        self._closed = False
        self._eof = False
        self._failure: Optional[OSError] = None
        self._bad_line: Optional[DecodeError] = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None and not self._closed

    def connect(self, host: str, port: int) -> None:
        if self._sock is not None:
            raise KgpConnectionError("transport is already connected")
        try:
            sock = socket.create_connection((host, port), timeout=self.connect_timeout)
        except OSError as e:
            self._closed = True
            raise KgpConnectionError(f"Cannot connect to {host}:{port}: {e}") from e
        sock.settimeout(None)
        self._sock = sock
        self._reader = threading.Thread(
            target=self._read_loop, name=f"kgp-reader-{host}:{port}", daemon=True
        )
        self._reader.start()
        logger.info(f"Connected to {host}:{port}")

    def _read_loop(self) -> None:
        buffer = b""
        while True:
            try:
                chunk = self._sock.recv(4096)
            except socket.timeout:
                continue
            except OSError as e:
                if not self._closed:
                    self._lines.put(e)
                return
            if not chunk:
                if buffer.strip():
                    self._lines.put(self._decode_line(buffer))
                self._lines.put(_EOF)
                return
            buffer += chunk
            while b"\n" in buffer:
                raw, buffer = buffer.split(b"\n", 1)
                self._lines.put(self._decode_line(raw))

    def _decode_line(self, raw: bytes):
        """Decode one raw line; a DecodeError takes its place when the bytes are invalid."""
        try:
            return raw.decode(self.encoding).rstrip("\r")
        except UnicodeDecodeError as e:
            text = raw.decode(self.encoding, errors="backslashreplace").rstrip("\r")
            return DecodeError(f"line is not valid {self.encoding}: {e.reason}", line=text)

    def send(self, line: str, timeout: Optional[float] = None) -> None:
        if not self.is_open:
            raise KgpConnectionError("transport is not connected")
        try:
            if timeout is not None:
                self._sock.settimeout(timeout)
            self._sock.sendall((line + LINE_TERMINATOR).encode(self.encoding))
        except OSError as e:
            raise KgpConnectionError(f"Send failed: {e}") from e
        finally:
            if timeout is not None and not self._closed:
                self._sock.settimeout(None)
        logger.debug(f"sent: {line}")

    def poll_incoming(self, timeout: float = 0.0) -> List[str]:
        if self._failure is not None:
            raise KgpConnectionError(f"Connection reset: {self._failure}") from self._failure
        if self._eof:
            raise KgpConnectionError("Connection closed by server")
        if self._sock is None:
            raise KgpConnectionError("transport is not connected")

        lines: List[str] = []
        try:
            item = self._lines.get(timeout=timeout) if timeout > 0 else self._lines.get_nowait()
        except queue.Empty:
            return lines
        while True:
            if item is _EOF:
                self._eof = True
                break
            if isinstance(item, OSError):
                self._failure = item
                break
            if isinstance(item, DecodeError):
                self._bad_line = item
                break
            lines.append(item)
            try:
                item = self._lines.get_nowait()
            except queue.Empty:
                break
        # Lines received before a failure are delivered first;
        # the next poll reports it.
        if not lines:
            return self.poll_incoming(0.0)
        return lines

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._sock is None:
            return
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._sock.close()
        if self._reader is not None and self._reader is not threading.current_thread():
            self._reader.join(timeout=1.0)
        logger.info("Connection closed")
