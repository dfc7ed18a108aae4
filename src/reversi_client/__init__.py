from reversi_client.client.session import ClientState, GameResult, ReversiClient, connect, run
from reversi_client.engine.board import Board, apply_move, is_legal_move
from reversi_client.engine.moves import valid_moves
from reversi_client.errors import (
    ConnectError,
    IllegalMoveError,
    InvalidStrategyMoveError,
    ProtocolError,
    ReversiError,
    TransportError,
)
from reversi_client.strategy.base import FunctionStrategy, Strategy, StrategyContext

__all__ = [
    "Board",
    "ClientState",
    "ConnectError",
    "FunctionStrategy",
    "GameResult",
    "IllegalMoveError",
    "InvalidStrategyMoveError",
    "ProtocolError",
    "ReversiClient",
    "ReversiError",
    "Strategy",
    "StrategyContext",
    "TransportError",
    "apply_move",
    "connect",
    "is_legal_move",
    "run",
    "valid_moves",
]
