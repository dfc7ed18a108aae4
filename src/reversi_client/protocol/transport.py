from __future__ import annotations

import logging
import socket

from reversi_client.errors import ConnectError, ProtocolError, TransportError
from reversi_client.protocol.constants import ENCODING, LINE_END
from reversi_client.protocol.interface import Transport

logger = logging.getLogger(__name__)

RECV_CHUNK = 4096
MAX_LINE_LENGTH = 4096


class SocketTransport(Transport):
    """Buffered line reader/writer over a connected stream socket."""

    def __init__(self, sock: socket.socket):
        self.sock: socket.socket | None = sock
        self.buffer = ""

    @classmethod
    def open(cls, host: str, port: int, timeout: float | None = None) -> "SocketTransport":
        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except (OSError, OverflowError, ValueError) as exc:
            raise ConnectError(f"Could not connect to {host}:{port}: {exc}") from exc
        # The connect timeout must not turn into a read timeout for the game loop.
        sock.settimeout(None)
        logger.info("Connected to %s:%d", host, port)
        return cls(sock)

    def recv_line(self) -> str:
        while True:
            pos = self.buffer.find(LINE_END)
            if pos >= 0:
                line = self.buffer[:pos]
                self.buffer = self.buffer[pos + 1:]
                return line.rstrip("\r")
            chunk = self._recv_chunk()
            if not chunk:
                if self.buffer:
                    # Last line before the server closed, sent without a newline.
                    line, self.buffer = self.buffer, ""
                    return line.rstrip("\r")
                raise TransportError("Connection closed by server")
            self.buffer += chunk.decode(ENCODING, errors="replace")
            if LINE_END not in self.buffer and len(self.buffer) > MAX_LINE_LENGTH:
                raise ProtocolError(f"No line break within {MAX_LINE_LENGTH} characters")

    def _recv_chunk(self) -> bytes:
        if self.sock is None:
            raise TransportError("Transport is closed")
        try:
            return self.sock.recv(RECV_CHUNK)
        except OSError as exc:
            raise TransportError(f"Read failed: {exc}") from exc

    def send_text(self, text: str):
        if self.sock is None:
            raise TransportError("Transport is closed")
        try:
            self.sock.sendall(text.encode(ENCODING))
        except OSError as exc:
            raise TransportError(f"Write failed: {exc}") from exc

    def close(self):
        if self.sock is None:
            return
        try:
            self.sock.close()
        finally:
            self.sock = None
            logger.debug("Transport closed")

    @property
    def closed(self) -> bool:
        return self.sock is None
