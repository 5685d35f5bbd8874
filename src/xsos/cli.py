from __future__ import annotations

import argparse
import logging

from . import ai, batch, interactive
from .config import Config, Player, parse_mark, parse_player, parse_rounds
from .mark import Mark


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xsos", description="Tic-tac-toe with a perfect-play computer opponent")
    p.add_argument(
        "-x",
        dest="x",
        type=parse_player,
        default=Player.HUMAN,
        metavar="PLAYER",
        help="Who plays X: human|h|computer|c (default: human)",
    )
    p.add_argument(
        "-o",
        dest="o",
        type=parse_player,
        default=Player.COMPUTER,
        metavar="PLAYER",
        help="Who plays O: human|h|computer|c (default: computer)",
    )
    p.add_argument(
        "-f", "--first",
        type=parse_mark,
        default=Mark.X,
        metavar="MARK",
        help="Mark that moves first: x|o (default: x)",
    )
    p.add_argument(
        "-r", "--rounds",
        type=parse_rounds,
        default=25,
        help="Rounds to play when both players are computers (default: 25)",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's move choice")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def _print_version() -> None:
    from importlib.metadata import PackageNotFoundError, version

    try:
        print(version("xsos"))
    except PackageNotFoundError:
        print("unknown")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    config = Config.from_namespace(ns)
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        _print_version()
        return 0

    if config.seed is not None:
        ai.seed(config.seed)
    logging.debug("config=%s", config)

    try:
        if config.is_batch:
            batch.run(config.first, config.rounds)
        else:
            interactive.run(config)
    except (KeyboardInterrupt, EOFError):
        # Ctrl-C or end of input ends the session like answering "no".
        print()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
