"""
Perfect-play move selection (negamax), from the side-to-move perspective.

Scoring: a finished game scores 2 for a win and 1 for a draw, credited to the
player who made the last move. A finished position is therefore worth -score to
the player who would move next, and each ply negates the child's value.

Tie-break policy:
- Prefer win over draw over loss.
- On equal value, prefer the smaller depth at resolution.
- At the root every losing move is kept: once a loss is forced the moves are
  equally bad.
"""
import logging
from functools import lru_cache
from typing import Callable, List, Optional, Tuple

import numpy as np

from . import referee
from .game import Game
from .grid import NCELLS, Cell, Grid, Position
from .mark import Mark
from .referee import Outcome

WIN_SCORE = 2
DRAW_SCORE = 1

Value = Tuple[int, int]  # (value, depth at resolution)
Solver = Callable[[Tuple[Cell, ...], Mark], Value]

_rng = np.random.default_rng()


def seed(value: Optional[int]) -> None:
    """Reset the process-wide generator used by random_move."""
    global _rng
    _rng = np.random.default_rng(value)


def score(outcome: Outcome) -> int:
    return WIN_SCORE if outcome is Outcome.WIN else DRAW_SCORE


def _rank(value: int, depth: int) -> Tuple[int, int]:
    return value, -depth


def _make_solver() -> Solver:
    """A fresh solver whose cache lives only as long as the solver itself.

    The solver maps (cells, mark to move) to (value, plies to the end).
    """
    @lru_cache(maxsize=None)
    def solve(cells: Tuple[Cell, ...], turn: Mark) -> Value:
        outcome = referee.evaluate(Grid.from_cells(cells))
        if outcome is not None:
            return -score(outcome), 0
        best: Optional[Value] = None
        for i, cell in enumerate(cells):
            if cell is not None:
                continue
            child = cells[:i] + (turn,) + cells[i + 1:]
            v, plies = solve(child, turn.swap())
            cand = (-v, plies + 1)
            if best is None or _rank(*cand) > _rank(*best):
                best = cand
        assert best is not None
        return best

    return solve


def negamax(game: Game, depth: int = 0, solve: Optional[Solver] = None) -> Value:
    """Value of `game` for the player to move and the depth at which it resolves.

    `depth` is the depth of `game` itself; the returned depth is absolute.
    `solve` lets several calls share one cache during a search.
    """
    if solve is None:
        solve = _make_solver()
    value, plies = solve(game.grid.key(), game.turn)
    return value, depth + plies


def moves(game: Game) -> List[Position]:
    """All optimal positions for the player to move, in row-major order."""
    if game.is_game_over():
        return []
    empty = list(game.grid.empty_positions())
    # A single option needs no search; on an empty grid every opening is a draw.
    if len(empty) == 1 or len(empty) == NCELLS:
        return empty

    solve = _make_solver()
    scored: List[Tuple[Position, int, int]] = []
    for pos in empty:
        child = game.copy()
        child.play(pos)
        v, d = negamax(child, 1, solve)
        scored.append((pos, -v, d))

    best_value, best_depth = max(((v, d) for _, v, d in scored), key=lambda vd: _rank(*vd))
    if best_value == -WIN_SCORE:
        best = [pos for pos, v, _ in scored if v == best_value]
    else:
        best = [pos for pos, v, d in scored if v == best_value and d == best_depth]
    logging.debug(
        "searched %d positions for %s: value=%d depth=%d moves=%s",
        solve.cache_info().currsize, game.turn, best_value, best_depth, best,
    )
    return best


def random_move(game: Game, rng: Optional[np.random.Generator] = None) -> Position:
    """Pick uniformly among moves(game).

    Uses the process-wide generator unless `rng` is given.
    """
    options = moves(game)
    if not options:
        raise ValueError("No moves available: the game is over")
    gen = _rng if rng is None else rng
    return options[int(gen.integers(len(options)))]
