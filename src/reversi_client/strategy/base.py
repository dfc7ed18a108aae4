from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence

from reversi_client.engine.board import Board
from reversi_client.engine.moves import Move


@dataclass(frozen=True)
class StrategyContext:
    """Read-only view of the session handed to a strategy on each turn."""

    player: int
    board: Board
    game_clock: float
    round: int


class Strategy(ABC):
    """Chooses one move from the legal moves of the current turn.

    The client never calls ``choose_move`` with an empty sequence; a player
    without legal moves passes without consulting the strategy. The client
    checks the returned move against ``valid_moves`` before using it.
    """

    name = "strategy"

    @abstractmethod
    def choose_move(self, valid_moves: Sequence[Move], context: StrategyContext) -> Move:
        """Return one element of ``valid_moves``."""


class FunctionStrategy(Strategy):
    """Adapts a plain ``(valid_moves, context) -> move`` callable."""

    def __init__(self, func: Callable[[Sequence[Move], StrategyContext], Move], name: str | None = None):
        self._func = func
        self.name = name or getattr(func, "__name__", "function")

    def choose_move(self, valid_moves: Sequence[Move], context: StrategyContext) -> Move:
        return self._func(valid_moves, context)
