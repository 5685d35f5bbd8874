"""
Game: rules and turn order on top of a Grid.

State machine:
- IN_PROGRESS --play(valid, non-terminal)--> IN_PROGRESS (turn swapped)
- IN_PROGRESS --play(valid, terminal)------> GAME_OVER   (turn kept: the winner on a win)
- GAME_OVER   --restart()------------------> IN_PROGRESS

Errors are returned from play(), never raised.
"""
from enum import Enum
from typing import Optional

from . import referee
from .grid import Grid, Position
from .mark import Mark
from .referee import Outcome


class PlayError(Enum):
    OUT_OF_BOUNDS = 'out_of_bounds'
    ALREADY_MARKED = 'already_marked'


class State(Enum):
    IN_PROGRESS = 'in_progress'
    GAME_OVER = 'game_over'


class Game:
    def __init__(self, first: Mark = Mark.X) -> None:
        self._grid = Grid()
        self._turn = first
        self._state = State.IN_PROGRESS
        self._outcome: Optional[Outcome] = None

    @classmethod
    def start(cls, first: Mark) -> "Game":
        return cls(first)

    def play(self, pos: Position) -> Optional[PlayError]:
        # Moves after the game ended are ignored, not reported.
        if self._state is State.GAME_OVER:
            return None
        if not Grid.in_bounds(pos):
            return PlayError.OUT_OF_BOUNDS
        if not self._grid.is_empty_at(pos):
            return PlayError.ALREADY_MARKED
        self._grid.mark(pos, self._turn)
        outcome = referee.evaluate(self._grid)
        if outcome is None:
            self._turn = self._turn.swap()
        else:
            self._state = State.GAME_OVER
            self._outcome = outcome
        return None

    def restart(self) -> None:
        """Clear the grid for a new round.

        After a win the winner starts; after a draw the player who did not
        start the drawn game starts. Restarting a game in progress keeps the
        turn.
        """
        if self._outcome is Outcome.DRAW:
            self._turn = self._turn.swap()
        self._grid = Grid()
        self._state = State.IN_PROGRESS
        self._outcome = None

    def copy(self) -> "Game":
        g = Game.__new__(Game)
        g._grid = self._grid.copy()
        g._turn = self._turn
        g._state = self._state
        g._outcome = self._outcome
        return g

    @property
    def turn(self) -> Mark:
        return self._turn

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    def is_playing(self) -> bool:
        return self._state is State.IN_PROGRESS

    def is_game_over(self) -> bool:
        return self._state is State.GAME_OVER

    def __repr__(self) -> str:
        return f"Game(grid={self._grid!r}, turn={self._turn}, state={self._state.value})"
