import socket

import pytest

from reversi_client.errors import ConnectError, ProtocolError, TransportError
from reversi_client.protocol.transport import MAX_LINE_LENGTH, SocketTransport


def _free_port():
    scratch = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    scratch.bind(("127.0.0.1", 0))
    port = scratch.getsockname()[1]
    scratch.close()
    return port


def test_recv_line_splits_buffered_lines(socket_pair) -> None:
    server, client = socket_pair
    transport = SocketTransport(client)
    server.sendall(b"first\nsecond\r\nthi")
    server.sendall(b"rd\n")

    assert transport.recv_line() == "first"
    assert transport.recv_line() == "second"
    assert transport.recv_line() == "third"


def test_recv_line_returns_unterminated_last_line(socket_pair) -> None:
    server, client = socket_pair
    transport = SocketTransport(client)
    server.sendall(b"first\n-999\r")
    server.shutdown(socket.SHUT_WR)

    assert transport.recv_line() == "first"
    assert transport.recv_line() == "-999"
    with pytest.raises(TransportError):
        transport.recv_line()


def test_recv_line_on_closed_peer(socket_pair) -> None:
    server, client = socket_pair
    transport = SocketTransport(client)
    server.shutdown(socket.SHUT_WR)

    with pytest.raises(TransportError):
        transport.recv_line()


def test_recv_line_rejects_endless_line(socket_pair) -> None:
    server, client = socket_pair
    transport = SocketTransport(client)
    server.sendall(b"7" * (MAX_LINE_LENGTH + 100))

    with pytest.raises(ProtocolError):
        transport.recv_line()


def test_send_text(socket_pair) -> None:
    server, client = socket_pair
    transport = SocketTransport(client)

    transport.send_text("2\n3\n")

    assert server.recv(16) == b"2\n3\n"


def test_close_is_idempotent(socket_pair) -> None:
    _, client = socket_pair
    transport = SocketTransport(client)

    transport.close()
    transport.close()

    assert transport.closed
    with pytest.raises(TransportError):
        transport.send_text("1\n1\n")
    with pytest.raises(TransportError):
        transport.recv_line()


def test_context_manager_closes(socket_pair) -> None:
    _, client = socket_pair

    with SocketTransport(client) as transport:
        assert not transport.closed

    assert transport.closed


def test_open_refused_port() -> None:
    with pytest.raises(ConnectError):
        SocketTransport.open("127.0.0.1", _free_port(), timeout=1.0)

