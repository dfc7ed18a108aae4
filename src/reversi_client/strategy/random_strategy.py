import random
from typing import Sequence

from reversi_client.strategy.base import Move, Strategy, StrategyContext


class RandomStrategy(Strategy):
    """Random-move strategy used for testing and baseline comparisons."""

    name = "random"

    def __init__(self, rng_seed: int | None = None):
        self._rng = random.Random(rng_seed)

    def choose_move(self, valid_moves: Sequence[Move], context: StrategyContext) -> Move:
        return self._rng.choice(list(valid_moves))
