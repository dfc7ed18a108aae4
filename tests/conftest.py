import logging
import socket

import pytest

from reversi_client.engine.board import Board
from reversi_client.errors import TransportError
from reversi_client.protocol.interface import Transport
from reversi_client.strategy.base import Strategy


def state_message(turn, board, round_number=1, t1=5.0, t2=5.0):
    """Server state message text for ``board``."""
    lines = [str(turn), str(round_number), str(t1), str(t2)]
    lines.extend(str(cell) for cell in board.to_cells())
    return "\n".join(lines) + "\n"


def game_over_message():
    return "-999\n"


def board_with(**cells):
    """Board from ``r3c4=1`` style keyword arguments."""
    board = Board.empty()
    for key, value in cells.items():
        r, c = key[1:].split("c")
        board.grid[int(r)][int(c)] = value
    return board


def centre_of(player):
    return board_with(r3c3=player, r3c4=player, r4c3=player, r4c4=player)


class FakeTransport(Transport):
    """In-memory transport fed with server text; records what the client sends."""

    def __init__(self, *messages):
        text = "".join(messages)
        self.lines = text.split("\n")
        if self.lines and self.lines[-1] == "":
            self.lines.pop()
        self.sent = []
        self.closed = False

    def recv_line(self):
        if self.closed:
            raise TransportError("Transport is closed")
        if not self.lines:
            raise TransportError("Connection closed by server")
        return self.lines.pop(0)

    def send_text(self, text):
        if self.closed:
            raise TransportError("Transport is closed")
        self.sent.append(text)

    def close(self):
        self.closed = True


class RecordingStrategy(Strategy):
    """Returns a fixed move (or the first legal one) and remembers its inputs."""

    name = "recording"

    def __init__(self, move=None):
        self.move = move
        self.calls = []

    def choose_move(self, valid_moves, context):
        self.calls.append((list(valid_moves), context))
        if self.move is not None:
            return self.move
        return valid_moves[0]


class ExplodingStrategy(Strategy):
    name = "exploding"

    def choose_move(self, valid_moves, context):
        raise AssertionError("strategy must not be called")


@pytest.fixture
def socket_pair():
    server, client = socket.socketpair()
    server.settimeout(2.0)
    yield server, client
    server.close()
    client.close()


def read_all(sock):
    chunks = []
    while True:
        chunk = sock.recv(4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode("ascii")


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by setup_logger and restore the root level."""
    root = logging.getLogger()
    before = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
