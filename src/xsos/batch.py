"""
Computer-vs-computer rounds without interaction.

Each finished round prints one character: the winner's mark, or '.' for a
draw. Rounds continue on the same Game via restart(), so the winner starts the
next round and a draw hands the start to the other mark.
"""
from __future__ import annotations

import logging
import sys
from collections import Counter
from typing import Optional, TextIO

import numpy as np

from . import ai
from .game import Game
from .mark import Mark
from .referee import Outcome

DRAW_SYMBOL = '.'


def result_symbol(game: Game) -> str:
    return str(game.turn) if game.outcome is Outcome.WIN else DRAW_SYMBOL


def play_one_round(game: Game, rng: Optional[np.random.Generator] = None) -> str:
    while game.is_playing():
        game.play(ai.random_move(game, rng))
    return result_symbol(game)


def run(first: Mark, rounds: int, rng: Optional[np.random.Generator] = None,
        out: Optional[TextIO] = None) -> Counter:
    out = sys.stdout if out is None else out
    game = Game.start(first)
    tally: Counter = Counter()
    for _ in range(rounds):
        symbol = play_one_round(game, rng)
        tally[symbol] += 1
        out.write(symbol)
        out.flush()
        game.restart()
    if rounds > 0:
        out.write("\n")
        out.flush()
    logging.debug(
        "rounds=%d x=%d o=%d draws=%d",
        rounds, tally[str(Mark.X)], tally[str(Mark.O)], tally[DRAW_SYMBOL],
    )
    return tally
