"""
Interactive terminal play for one or two humans.

Positions are typed as "r c" with one-based row and column. The game is
restarted after each round until the player declines to continue.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from . import ai
from .config import Config, Player
from .game import Game, PlayError
from .grid import Cell, Grid, Position
from .referee import Outcome

INTRO = "\n".join([
    "Welcome to Tic-tac-toe",
    "Play as many games as you want",
    "Press Ctrl-C to exit at any time",
]) + "\n\n"

ROW_SEPARATOR = "---+---+---"

PLAY_ERROR_MESSAGES = {
    PlayError.OUT_OF_BOUNDS: "Try again, that position is out of bounds",
    PlayError.ALREADY_MARKED: "Try again, that position is already taken",
}


def run(config: Config, rng: Optional[np.random.Generator] = None) -> None:
    print(INTRO)
    game = Game.start(config.first)
    humans = config.count_humans()
    while True:
        play_one_game(game, config, humans, rng)
        if not read_continue():
            break
        game.restart()


def play_one_game(game: Game, config: Config, humans: int,
                  rng: Optional[np.random.Generator] = None) -> None:
    while True:
        current = config.player_for(game.turn)
        play_one_turn(game, current, humans, rng)
        if game.outcome is not None:
            handle_game_over(game, current, humans)
            return


def play_one_turn(game: Game, current: Player, humans: int,
                  rng: Optional[np.random.Generator] = None) -> None:
    if current is Player.COMPUTER:
        pos = ai.random_move(game, rng)
        game.play(pos)
        print(f"The computer played at {format_position(pos)}")
        return

    print(format_turn(game, humans))
    print(format_grid(game.grid))
    while True:
        error = game.play(read_position(game.grid))
        if error is None:
            return
        print(PLAY_ERROR_MESSAGES[error])


def handle_game_over(game: Game, last: Player, humans: int) -> None:
    if game.outcome is Outcome.DRAW:
        print("Game drawn.")
    elif last is Player.COMPUTER:
        print("The computer won. Better luck next time.")
    elif humans == 2:
        print(f"Congratulations! {game.turn} won.")
    else:
        print("Congratulations! You won.")
    print(format_grid(game.grid))


# input

def read_continue() -> bool:
    while True:
        answer = input("Do you want to continue playing? (Y/n) ").strip().lower()
        if answer in ("", "y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


def read_position(grid: Grid) -> Position:
    show_hint = True
    while True:
        pos = parse_position(input("> "))
        if pos is not None:
            return pos
        if show_hint:
            r, c = next(grid.empty_positions())
            print('Try again, but this time enter a position in the format "r c",')
            print(f'where 1 <= r <= 3 and 1 <= c <= 3, for e.g. "{r + 1} {c + 1}"')
            show_hint = False


def parse_position(text: str) -> Optional[Position]:
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        r, c = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if r < 1 or c < 1:
        return None
    return r - 1, c - 1


# output

def format_turn(game: Game, humans: int) -> str:
    if humans == 2:
        return f"{game.turn}'s turn"
    return f"Your turn ({game.turn})"


def format_cell(cell: Cell) -> str:
    return " " if cell is None else str(cell)


def format_grid(grid: Grid) -> str:
    cells = [format_cell(c) for c in grid.cells()]
    rows = [" " + " | ".join(cells[i:i + 3]) for i in (0, 3, 6)]
    return f"\n{ROW_SEPARATOR}\n".join(rows)


def format_position(pos: Position) -> str:
    r, c = pos
    return f"({r + 1}, {c + 1})"
