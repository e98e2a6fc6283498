"""
Minesweeper game module.

Provides the board engine, the game controller, text rendering and a
Gymnasium environment.
"""
from .errors import InvalidConfiguration, OutOfBounds
from .board import Board, BoardConfig
from .game import Game, GameStatus, RevealOutcome
from .display import render_counts, render_game, render_mines
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "InvalidConfiguration",
    "OutOfBounds",
    "Board",
    "BoardConfig",
    "Game",
    "GameStatus",
    "RevealOutcome",
    "render_counts",
    "render_game",
    "render_mines",
    "MinesweeperEnv",
    "make_vec_env",
]
