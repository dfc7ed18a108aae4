from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from reversi_client.engine.board import PLAYER_ONE, PLAYER_TWO, Board
from reversi_client.engine.moves import in_opening, is_game_over, legal_moves
from reversi_client.errors import InvalidStrategyMoveError, ProtocolError, ReversiError
from reversi_client.protocol.codec import (
    GameOverMessage,
    OpponentMoveMessage,
    StateMessage,
    TurnMessage,
    encode_move,
    encode_pass,
    read_init,
    read_message,
)
from reversi_client.protocol.constants import BASE_PORT, Client
from reversi_client.protocol.interface import Transport
from reversi_client.protocol.transport import SocketTransport
from reversi_client.strategy.base import Move, Strategy, StrategyContext

logger = logging.getLogger(__name__)


class ClientState(enum.Enum):
    CONNECTING = "connecting"
    AWAITING_INIT = "awaiting_init"
    IDLE = "idle"
    AWAITING_STRATEGY = "awaiting_strategy"
    SENDING = "sending"
    TERMINATED = "terminated"


@dataclass
class GameResult:
    board: Board
    scores: Dict[int, int]
    winner: Optional[int]
    rounds: int
    moves: List[Move] = field(default_factory=list)
    game_clock: float = 0.0

    @property
    def passes(self) -> int:
        return sum(1 for move in self.moves if move == Client.PASS)


class ReversiClient:
    """One game session against the server.

    All board and clock updates happen inside ``run``, one server message at a
    time. The server's board is authoritative: every state message overwrites
    the local board.
    """

    def __init__(self, transport: Transport, player_number: int, strategy: Strategy):
        self.transport = transport
        self.player_number = player_number
        self.strategy = strategy
        self.game_clock = 0.0
        self.board = Board.empty()
        self.round = 0
        self.moves_sent: List[Move] = []
        self.state = ClientState.CONNECTING
        self._expected_board: Optional[Board] = None

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------
    @classmethod
    def connect(
        cls,
        server_addr: str,
        player_number: int,
        strategy: Strategy,
        base_port: int = BASE_PORT,
        timeout: float | None = None,
    ) -> "ReversiClient":
        if player_number not in (PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"Player number must be 1 or 2, got {player_number}")
        port = base_port + player_number
        logger.info("Connecting to %s:%d as player %d", server_addr, port, player_number)
        transport = SocketTransport.open(server_addr, port, timeout=timeout)
        return cls.from_transport(transport, player_number, strategy)

    @classmethod
    def from_transport(cls, transport: Transport, player_number: int, strategy: Strategy) -> "ReversiClient":
        """Complete the init handshake on an already connected transport."""
        client = cls(transport, player_number, strategy)
        try:
            client._await_init()
        except Exception:
            client.state = ClientState.TERMINATED
            transport.close()
            raise
        return client

    def _await_init(self):
        self.state = ClientState.AWAITING_INIT
        init = read_init(self.transport)
        if init.player_number != self.player_number:
            raise ProtocolError(
                f"Player number mismatch: expected {self.player_number}, got {init.player_number}"
            )
        self.game_clock = init.game_minutes
        self.state = ClientState.IDLE
        logger.info("Playing as player %d with %.2f minutes", self.player_number, init.game_minutes)

    # ------------------------------------------------------------------
    # Turn loop
    # ------------------------------------------------------------------
    def run(self) -> GameResult:
        try:
            while True:
                message = read_message(self.transport, self.player_number)
                if isinstance(message, GameOverMessage):
                    return self._finish()
                if isinstance(message, TurnMessage):
                    self._handle_turn(message)
                elif isinstance(message, OpponentMoveMessage):
                    self._handle_opponent_move(message)
        except ReversiError as exc:
            logger.error("Session terminated: %s", exc)
            raise
        finally:
            self.state = ClientState.TERMINATED
            self.transport.close()

    def _sync(self, message: StateMessage):
        self.board = message.board.clone()
        self.round = message.round
        self.game_clock = message.clock_for(self.player_number)

    def _handle_opponent_move(self, message: OpponentMoveMessage):
        if self._expected_board is not None and self._expected_board != message.board:
            # The server's board replaces ours below either way.
            logger.debug("Server board differs from local prediction:\n%s", message.board)
        self._expected_board = None
        self._sync(message)
        logger.debug("Round %d: waiting for opponent", self.round)

    def _handle_turn(self, message: TurnMessage):
        self._sync(message)
        self._expected_board = None

        moves = legal_moves(self.board, self.player_number)
        if not moves:
            self.state = ClientState.SENDING
            logger.info("Round %d: no legal moves, passing", self.round)
            self._send(encode_pass(), Client.PASS)
            self.state = ClientState.IDLE
            return

        self.state = ClientState.AWAITING_STRATEGY
        context = StrategyContext(
            player=self.player_number,
            board=self.board.clone(),
            game_clock=self.game_clock,
            round=self.round,
        )
        move = self.strategy.choose_move(list(moves), context)
        move = self._check_move(move, moves)

        self.state = ClientState.SENDING
        row, col = move
        if in_opening(self.board):
            self.board = self.board.place_disc(self.player_number, row, col)
        else:
            self.board = self.board.apply_move(self.player_number, row, col)
        self._expected_board = self.board.clone()

        logger.info("Round %d: playing (%d, %d) with %.2f minutes left", self.round, row, col, self.game_clock)
        self._send(encode_move(row, col), move)
        self.state = ClientState.IDLE

    @staticmethod
    def _check_move(move, moves: List[Move]) -> Move:
        if not isinstance(move, (tuple, list)) or len(move) != 2 or tuple(move) not in moves:
            raise InvalidStrategyMoveError(move, moves)
        return int(move[0]), int(move[1])

    def _send(self, payload: str, move: Move):
        self.transport.send_text(payload)
        self.moves_sent.append(move)

    def _finish(self) -> GameResult:
        scores = self.board.get_score()
        winner = _determine_winner(scores)
        if not is_game_over(self.board):
            logger.debug("Server ended the game while moves remain")
        logger.info(
            "Game over after round %d: player 1 %d - player 2 %d",
            self.round,
            scores[PLAYER_ONE],
            scores[PLAYER_TWO],
        )
        return GameResult(
            board=self.board.clone(),
            scores=scores,
            winner=winner,
            rounds=self.round,
            moves=list(self.moves_sent),
            game_clock=self.game_clock,
        )


def _determine_winner(scores: Dict[int, int]) -> Optional[int]:
    one = scores.get(PLAYER_ONE, 0)
    two = scores.get(PLAYER_TWO, 0)
    if one > two:
        return PLAYER_ONE
    if two > one:
        return PLAYER_TWO
    return None


def connect(
    server_addr: str,
    player_number: int,
    strategy: Strategy,
    base_port: int = BASE_PORT,
    timeout: float | None = None,
) -> ReversiClient:
    return ReversiClient.connect(server_addr, player_number, strategy, base_port=base_port, timeout=timeout)


def run(session: ReversiClient) -> GameResult:
    """Block until the server ends the game. Errors propagate after the transport is closed."""
    return session.run()
