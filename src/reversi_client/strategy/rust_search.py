"""Strategies that hand the search to the rust-reversi engine.

rust-reversi only models the standard game from the four-disc start, so
during the centre-placement opening these strategies play the first empty
centre square instead of searching.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

import rust_reversi

from reversi_client.engine.board import BOARD_SIZE, PLAYER_ONE, PLAYER_TWO, Board
from reversi_client.engine.moves import in_opening
from reversi_client.strategy.base import Move, Strategy, StrategyContext

logger = logging.getLogger(__name__)

# Player one opens the game, so it plays black.
_CELL_CHARS = {PLAYER_ONE: "X", PLAYER_TWO: "O"}


def board_to_line(board: Board) -> str:
    """Render ``board`` in rust-reversi's 64-character notation."""
    return "".join(_CELL_CHARS.get(cell, "-") for cell in board.to_cells())


def to_rust_board(board: Board, player: int) -> rust_reversi.Board:
    turn = rust_reversi.Turn.BLACK if player == PLAYER_ONE else rust_reversi.Turn.WHITE
    rust_board = rust_reversi.Board()
    rust_board.set_board_str(board_to_line(board), turn)
    return rust_board


class RustSearchStrategy(Strategy):
    """Runs a fresh rust-reversi searcher per move.

    Any failure of the search (an exception, no move, an off-board index or a
    square that is not legal here) falls back to the first legal move.
    """

    name = "rust"

    def __init__(self, make_search: Callable[[], Any]):
        self._make_search = make_search

    def choose_move(self, valid_moves: Sequence[Move], context: StrategyContext) -> Move:
        fallback = valid_moves[0]
        if in_opening(context.board):
            return fallback

        index = self._search(to_rust_board(context.board, context.player))
        if index is None or not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            logger.debug("%s returned no usable move (%r)", self.name, index)
            return fallback

        move = divmod(index, BOARD_SIZE)
        if move not in valid_moves:
            logger.warning("%s suggested %s, which is not legal for player %d", self.name, move, context.player)
            return fallback
        return move

    def _search(self, rust_board: rust_reversi.Board) -> Optional[int]:
        try:
            return self._make_search().get_move(rust_board)
        except Exception as exc:
            logger.warning("%s search failed, using first legal move: %s", self.name, exc)
            return None


class RustAlphaBetaStrategy(RustSearchStrategy):
    name = "alpha-beta"

    def __init__(self, search_depth: int = 5, win_score: int = 100_000):
        self.search_depth = max(1, search_depth)
        evaluator = rust_reversi.PieceEvaluator()
        super().__init__(lambda: rust_reversi.AlphaBetaSearch(evaluator, self.search_depth, win_score))


class RustThunderStrategy(RustSearchStrategy):
    """Epsilon-greedy playouts scored by win rate."""

    name = "thunder"

    def __init__(self, playouts: int = 400, epsilon: float = 0.1):
        self.playouts = max(1, playouts)
        self.epsilon = min(max(epsilon, 0.0), 1.0)
        evaluator = rust_reversi.WinrateEvaluator()
        super().__init__(lambda: rust_reversi.ThunderSearch(evaluator, self.playouts, self.epsilon))


class RustMctsStrategy(RustSearchStrategy):
    name = "mcts"

    def __init__(self, playouts: int = 800, exploration_constant: float = 1.4, expand_threshold: int = 8):
        self.playouts = max(1, playouts)
        self.exploration_constant = max(exploration_constant, 1e-6)
        self.expand_threshold = max(1, expand_threshold)
        super().__init__(
            lambda: rust_reversi.MctsSearch(self.playouts, self.exploration_constant, self.expand_threshold)
        )
