"""
Plain-text rendering of boards and sessions.

Used by the console front end and by the Gymnasium environment's
``ansi`` render mode.
"""
from typing import Iterable, List

from .board import Board
from .game import Game, HIDDEN, REVEALED_MINE


def _framed(rows: Iterable[Iterable[str]]) -> str:
    return "\n".join("| " + " | ".join(row) + " |" for row in rows)


def render_mines(board: Board) -> str:
    """Mine cheat sheet: ``X`` for a mine, ``O`` otherwise."""
    mines = board.snapshot_mines()
    return _framed(("X" if mine else "O" for mine in row) for row in mines)


def render_counts(board: Board) -> str:
    """Adjacency count cheat sheet."""
    counts = board.snapshot_counts()
    return _framed((str(count) for count in row) for row in counts)


def _symbol(value: int) -> str:
    if value == HIDDEN:
        return "."
    if value == REVEALED_MINE:
        return "*"
    if value == 0:
        return " "
    return str(value)


def render_game(game: Game) -> str:
    """
    Render the player's view with row and column indices.

    ``.`` is a hidden cell, ``*`` a revealed mine, a digit a revealed
    count and a blank a revealed zero.
    """
    obs = game.get_observation()
    width = len(str(max(game.config.rows, game.config.columns) - 1))
    header = " " * (width + 1) + " ".join(
        str(col).rjust(width) for col in range(game.config.columns)
    )
    lines: List[str] = [header]
    for row in range(game.config.rows):
        cells = " ".join(_symbol(value).rjust(width) for value in obs[row])
        lines.append(f"{str(row).rjust(width)} {cells}")
    return "\n".join(lines)
