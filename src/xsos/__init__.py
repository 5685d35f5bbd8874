"""xsos package.

Tic-tac-toe engine: grid, referee, game rules, a perfect-play move selector,
and a command-line front-end.
"""

from .ai import moves, random_move
from .game import Game, PlayError
from .grid import Cell, Grid, Position
from .mark import Mark
from .referee import Outcome

__all__ = [
    "Game",
    "PlayError",
    "Grid",
    "Cell",
    "Position",
    "Mark",
    "Outcome",
    "moves",
    "random_move",
]
