import io

import numpy as np
import pytest

from xsos import interactive
from xsos.config import Config, Player
from xsos.game import Game
from xsos.grid import Grid
from xsos.mark import Mark


def feed(monkeypatch, *lines: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(line + "\n" for line in lines)))


@pytest.mark.parametrize("text,pos", [
    ("1 1", (0, 0)),
    ("  3   2 ", (2, 1)),
    ("4 1", (3, 0)),
])
def test_parse_position_valid(text, pos):
    assert interactive.parse_position(text) == pos


@pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "0 1", "1 -1", "1,1"])
def test_parse_position_invalid(text):
    assert interactive.parse_position(text) is None


def test_format_grid():
    grid = Grid()
    grid.mark((0, 0), Mark.X)
    grid.mark((1, 1), Mark.O)
    assert interactive.format_grid(grid) == "\n".join([
        " x |   |  ",
        "---+---+---",
        "   | o |  ",
        "---+---+---",
        "   |   |  ",
    ])


def test_format_position_is_one_based():
    assert interactive.format_position((0, 2)) == "(1, 3)"


def test_read_position_hints_once(monkeypatch, capsys):
    grid = Grid()
    grid.mark((0, 0), Mark.X)
    feed(monkeypatch, "hello", "again", "2 2")
    assert interactive.read_position(grid) == (1, 1)
    out = capsys.readouterr().out
    assert out.count("Try again, but this time") == 1
    assert 'for e.g. "1 2"' in out


@pytest.mark.parametrize("answer,expected", [("", True), ("Y", True), ("yes", True), ("n", False), ("NO", False)])
def test_read_continue(monkeypatch, answer, expected):
    feed(monkeypatch, answer)
    assert interactive.read_continue() is expected


def test_read_continue_asks_again(monkeypatch, capsys):
    feed(monkeypatch, "maybe", "n")
    assert interactive.read_continue() is False
    assert capsys.readouterr().out.count("Do you want to continue playing?") == 2


def test_two_humans_play_until_x_wins(monkeypatch, capsys):
    feed(
        monkeypatch,
        "2 2", "1 3", "3 1", "2 3",
        "2 3",  # taken
        "5 5",  # out of bounds
        "3 3", "3 2", "1 1",
        "n",
    )
    interactive.run(Config(x=Player.HUMAN, o=Player.HUMAN))
    out = capsys.readouterr().out
    assert out.startswith("Welcome to Tic-tac-toe\nPlay as many games as you want\nPress Ctrl-C to exit at any time\n\n\n")
    assert "x's turn" in out and "o's turn" in out
    assert "Try again, that position is already taken" in out
    assert "Try again, that position is out of bounds" in out
    assert "Congratulations! x won." in out


def test_human_against_computer_never_lets_the_human_win(monkeypatch, capsys):
    # the human always takes the first empty cell
    monkeypatch.setattr(interactive, "read_position", lambda grid: next(grid.empty_positions()))
    feed(monkeypatch, "y", "n")
    interactive.run(Config(x=Player.HUMAN, o=Player.COMPUTER), rng=np.random.default_rng(0))
    out = capsys.readouterr().out
    assert "Your turn (x)" in out
    assert "The computer played at" in out
    assert "Congratulations! You won." not in out
    assert out.count("Do you want to continue playing?") == 2


def test_handle_game_over_messages(capsys):
    game = Game.start(Mark.X)
    for pos in [(1, 1), (0, 2), (2, 0), (1, 2), (2, 2), (2, 1), (0, 0)]:
        game.play(pos)
    interactive.handle_game_over(game, Player.HUMAN, 1)
    interactive.handle_game_over(game, Player.COMPUTER, 1)
    out = capsys.readouterr().out
    assert "Congratulations! You won." in out
    assert "The computer won. Better luck next time." in out
