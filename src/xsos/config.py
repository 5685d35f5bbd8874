"""
Run configuration: who controls each mark, who starts, and how many rounds.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .mark import Mark


class Player(Enum):
    HUMAN = 'human'
    COMPUTER = 'computer'


_PLAYER_ALIASES = {
    'human': Player.HUMAN,
    'h': Player.HUMAN,
    'computer': Player.COMPUTER,
    'c': Player.COMPUTER,
}


def parse_player(src: str) -> Player:
    try:
        return _PLAYER_ALIASES[src.strip().lower()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"expected human|h|computer|c, got {src!r}") from None


def parse_mark(src: str) -> Mark:
    try:
        return Mark(src.strip().lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x|o, got {src!r}") from None


def parse_rounds(src: str) -> int:
    try:
        n = int(src)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {src!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"rounds must be >= 0, got {n}")
    return n


@dataclass
class Config:
    x: Player = Player.HUMAN
    o: Player = Player.COMPUTER
    first: Mark = Mark.X
    rounds: int = 25
    seed: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> Config:
        return cls(
            x=ns.x,
            o=ns.o,
            first=ns.first,
            rounds=ns.rounds,
            seed=ns.seed,
            verbose=ns.verbose,
        )

    @property
    def is_batch(self) -> bool:
        return self.x is Player.COMPUTER and self.o is Player.COMPUTER

    def player_for(self, mark: Mark) -> Player:
        return self.x if mark is Mark.X else self.o

    def count_humans(self) -> int:
        return sum(1 for p in (self.x, self.o) if p is Player.HUMAN)
