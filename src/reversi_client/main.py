import argparse
import logging
import sys

from reversi_client.client.session import GameResult, connect
from reversi_client.config import ClientConfig
from reversi_client.errors import ReversiError
from reversi_client.logger import setup_logger
from reversi_client.strategy.registry import (
    build_strategy,
    get_strategy_choices,
    list_strategies,
    strategy_supports_depth,
)

logger = logging.getLogger(__name__)

STRATEGY_NAMES = sorted(get_strategy_choices().keys())


def config_from_args(args: argparse.Namespace) -> ClientConfig:
    return ClientConfig(
        player_number=args.player,
        host=args.host,
        base_port=args.base_port,
        strategy=args.strategy,
        search_depth=args.depth,
        seed=args.seed,
        connect_timeout=args.timeout,
        log_level=args.log_level,
        log_file=args.log_file,
    ).validate()


def format_result(player_number: int, result: GameResult) -> str:
    if result.winner is None:
        verdict = "Draw"
    elif result.winner == player_number:
        verdict = "Won"
    else:
        verdict = "Lost"
    return (
        f"{verdict}: player 1 {result.scores[1]} - player 2 {result.scores[2]} "
        f"after {result.rounds} rounds ({len(result.moves)} moves sent, {result.passes} passes, "
        f"{result.game_clock:.2f} minutes left)"
    )


def run_play(args: argparse.Namespace) -> int:
    try:
        config = config_from_args(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    setup_logger(config.log_level, log_file=config.log_file)

    if config.search_depth is not None and not strategy_supports_depth(config.strategy):
        logger.warning("Strategy '%s' ignores --depth", config.strategy)
    strategy = build_strategy(config.strategy, search_depth=config.search_depth, seed=config.seed)

    try:
        session = connect(
            config.host,
            config.player_number,
            strategy,
            base_port=config.base_port,
            timeout=config.connect_timeout,
        )
        result = session.run()
    except ReversiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(format_result(config.player_number, result))
    return 0


def run_strategies(args: argparse.Namespace) -> int:
    for name, description in list_strategies():
        print(f"{name:<12} {description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reversi game server client")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Connect to a server and play one game")
    play_parser.add_argument("--host", default="127.0.0.1", help="Server address (default: 127.0.0.1)")
    play_parser.add_argument("--player", type=int, choices=[1, 2], required=True, help="Player number")
    play_parser.add_argument(
        "--base-port",
        type=int,
        default=ClientConfig.base_port,
        help="Port base; the client connects to base + player (default: 3333)",
    )
    play_parser.add_argument(
        "--strategy",
        choices=STRATEGY_NAMES,
        default="random",
        help="Move selection strategy",
    )
    play_parser.add_argument("--depth", type=int, default=None, help="Search depth when supported")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed when supported")
    play_parser.add_argument("--timeout", type=float, default=None, help="Connect timeout in seconds")
    play_parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    play_parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    play_parser.set_defaults(func=run_play)

    strategies_parser = subparsers.add_parser("strategies", help="List available strategies")
    strategies_parser.set_defaults(func=run_strategies)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
