"""
Referee: decides whether a grid is won, drawn, or still in progress.

The referee does not say who won. Game checks the grid after every move, so a
win always belongs to the player who just moved.
"""
from enum import Enum
from typing import Optional

from .grid import Grid


class Outcome(Enum):
    WIN = 'win'
    DRAW = 'draw'


ARRANGEMENTS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def is_win(grid: Grid) -> bool:
    cells = grid.key()
    for a, b, c in ARRANGEMENTS:
        v = cells[a]
        if v is not None and v == cells[b] and v == cells[c]:
            return True
    return False


def is_full(grid: Grid) -> bool:
    return all(cell is not None for cell in grid.cells())


def evaluate(grid: Grid) -> Optional[Outcome]:
    if is_win(grid):
        return Outcome.WIN
    if is_full(grid):
        return Outcome.DRAW
    return None
