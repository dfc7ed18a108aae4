"""Encoding and decoding of the game server's line protocol.

Init (once, after connect)::

    <player_number> <game_minutes>

State (every turn, 68 lines)::

    <turn>
    <round>
    <t1>
    <t2>
    <cell 0,0>
    ...
    <cell 7,7>

End of game is the single line ``-999``. The client answers a state message
addressed to it with ``<row>\\n<col>\\n``; ``-1\\n-1\\n`` passes.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from reversi_client.engine.board import BOARD_SIZE, PLAYER_ONE, PLAYER_TWO, Board
from reversi_client.errors import ProtocolError
from reversi_client.protocol.constants import LINE_END, Client, Server

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitMessage:
    player_number: int
    game_minutes: float


@dataclass(frozen=True)
class StateMessage:
    turn: int
    round: int
    t1: float
    t2: float
    board: Board

    def clock_for(self, player: int) -> float:
        return self.t1 if player == PLAYER_ONE else self.t2


@dataclass(frozen=True)
class TurnMessage(StateMessage):
    """State addressed to the local player: a move is expected."""


@dataclass(frozen=True)
class OpponentMoveMessage(StateMessage):
    """State after the opponent's move: sync only."""


@dataclass(frozen=True)
class GameOverMessage:
    pass


ServerMessage = Union[TurnMessage, OpponentMoveMessage, GameOverMessage]


def _parse_int(token: str, field: str) -> int:
    text = token.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ProtocolError(f"Field '{field}' is not an integer: {token!r}")
    return int(text)


def _parse_float(token: str, field: str) -> float:
    text = token.strip()
    try:
        value = float(text)
    except ValueError:
        raise ProtocolError(f"Field '{field}' is not a number: {token!r}") from None
    # float() also takes "nan", "inf" and "1_0".
    if "_" in text or not math.isfinite(value):
        raise ProtocolError(f"Field '{field}' is not a finite number: {token!r}")
    return value


def decode_init(line: str) -> InitMessage:
    parts = line.split()
    if len(parts) != Server.INIT_FIELDS:
        raise ProtocolError(f"Init message needs {Server.INIT_FIELDS} fields, got {len(parts)}: {line!r}")
    player_number = _parse_int(parts[0], "player_number")
    if player_number not in (PLAYER_ONE, PLAYER_TWO):
        raise ProtocolError(f"Unknown player number {player_number}")
    return InitMessage(player_number=player_number, game_minutes=_parse_float(parts[1], "game_minutes"))


def is_game_over_line(line: str) -> bool:
    return line.strip() == str(Server.GAME_OVER)


def decode_state(lines: Sequence[str], player: int) -> ServerMessage:
    """Decode a complete server message for the client playing ``player``."""
    if lines and is_game_over_line(lines[0]):
        return GameOverMessage()

    if len(lines) != Server.STATE_LINES:
        raise ProtocolError(f"State message needs {Server.STATE_LINES} lines, got {len(lines)}")

    turn = _parse_int(lines[0], "turn")
    if turn not in (PLAYER_ONE, PLAYER_TWO):
        raise ProtocolError(f"Unknown message kind: turn={turn}")

    round_number = _parse_int(lines[1], "round")
    t1 = _parse_float(lines[2], "t1")
    t2 = _parse_float(lines[3], "t2")

    cells = [_parse_int(token, "cell") for token in lines[Server.HEADER_LINES:]]
    try:
        board = Board.from_cells(cells)
    except ValueError as exc:
        raise ProtocolError(str(exc)) from exc

    message_cls = TurnMessage if turn == player else OpponentMoveMessage
    return message_cls(turn=turn, round=round_number, t1=t1, t2=t2, board=board)


def read_message(transport, player: int) -> ServerMessage:
    """Read one framed server message from ``transport`` and decode it."""
    first = transport.recv_line()
    if is_game_over_line(first):
        logger.debug("Received game over")
        return GameOverMessage()

    lines = [first]
    for _ in range(Server.STATE_LINES - 1):
        lines.append(transport.recv_line())
    logger.debug("Received state message: %r", lines[: Server.HEADER_LINES])
    return decode_state(lines, player)


def read_init(transport) -> InitMessage:
    line = transport.recv_line()
    logger.debug("Received init message: %r", line)
    return decode_init(line)


def encode_move(row: int, col: int) -> str:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Move ({row}, {col}) is off the board")
    return f"{row}{LINE_END}{col}{LINE_END}"


def encode_pass() -> str:
    return f"{Client.PASS_ROW}{LINE_END}{Client.PASS_COL}{LINE_END}"


def decode_move(text: str) -> Tuple[int, int]:
    """Decode a move response. Returns ``Client.PASS`` for a pass."""
    parts: List[str] = text.split()
    if len(parts) != 2:
        raise ProtocolError(f"Move needs 2 fields, got {len(parts)}: {text!r}")
    row = _parse_int(parts[0], "row")
    col = _parse_int(parts[1], "col")
    if (row, col) == Client.PASS:
        return Client.PASS
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ProtocolError(f"Move ({row}, {col}) is off the board")
    return row, col
