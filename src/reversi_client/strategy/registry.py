from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Type

from reversi_client.strategy.base import Strategy
from reversi_client.strategy.random_strategy import RandomStrategy
from reversi_client.strategy.rust_search import (
    RustAlphaBetaStrategy,
    RustMctsStrategy,
    RustThunderStrategy,
)


@dataclass(frozen=True)
class StrategyEntry:
    cls: Type[Strategy]
    supports_depth: bool
    supports_seed: bool
    description: str


STRATEGY_REGISTRY: Dict[str, StrategyEntry] = {
    "random": StrategyEntry(
        cls=RandomStrategy,
        supports_depth=False,
        supports_seed=True,
        description="Uniformly random legal move.",
    ),
    "alpha-beta": StrategyEntry(
        cls=RustAlphaBetaStrategy,
        supports_depth=True,
        supports_seed=False,
        description="Deterministic alpha-beta search implemented in Rust.",
    ),
    "thunder": StrategyEntry(
        cls=RustThunderStrategy,
        supports_depth=False,
        supports_seed=False,
        description="Epsilon-greedy playout search with randomness.",
    ),
    "mcts": StrategyEntry(
        cls=RustMctsStrategy,
        supports_depth=False,
        supports_seed=False,
        description="Monte Carlo tree search from rust-reversi.",
    ),
}

STRATEGY_ALIASES: Dict[str, str] = {"rust": "alpha-beta"}


def resolve_strategy_key(name: str) -> str:
    return STRATEGY_ALIASES.get(name, name)


def _get_entry(name: str) -> StrategyEntry:
    entry = STRATEGY_REGISTRY.get(resolve_strategy_key(name))
    if not entry:
        raise ValueError(f"Unknown strategy '{name}'")
    return entry


def get_strategy_choices() -> Dict[str, Type[Strategy]]:
    """Return mapping of strategy key to class."""
    return {name: entry.cls for name, entry in STRATEGY_REGISTRY.items()}


def list_strategies() -> List[tuple[str, str]]:
    return [(name, entry.description) for name, entry in STRATEGY_REGISTRY.items()]


def strategy_supports_depth(name: str) -> bool:
    return _get_entry(name).supports_depth


def build_strategy(
    name: str,
    search_depth: int | None = None,
    seed: int | None = None,
    **strategy_options: Any,
) -> Strategy:
    entry = _get_entry(name)

    kwargs: Dict[str, Any] = {}
    if entry.supports_depth and search_depth is not None:
        kwargs["search_depth"] = search_depth
    if entry.supports_seed and seed is not None:
        kwargs["rng_seed"] = seed
    if strategy_options:
        kwargs.update(strategy_options)
    return entry.cls(**kwargs)
