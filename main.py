#!/usr/bin/env python3
"""
Minesweeper - console entry point.

Usage:
    python main.py play [--rows R] [--columns C] [--mines M] [--seed S] [--cheat]
    python main.py cheat --rows R --columns C --mines M [--seed S]
"""
import argparse
import logging
import random
from typing import Callable, Optional, Sequence, Tuple

from minesweeper import (
    Board,
    BoardConfig,
    Game,
    InvalidConfiguration,
    OutOfBounds,
    render_counts,
    render_game,
    render_mines,
)

InputFn = Callable[[str], str]


# ============================================================================
# Input Handling
# ============================================================================

def prompt_int(message: str, input_fn: InputFn = input) -> int:
    """Ask until the answer is a positive integer."""
    while True:
        answer = input_fn(f"{message} ").strip()
        try:
            value = int(answer)
        except ValueError:
            print(f"'{answer}' is not a number.")
            continue
        if value < 1:
            print("Please enter a number greater than zero.")
            continue
        return value


def prompt_config(
    args: argparse.Namespace, input_fn: InputFn = input
) -> BoardConfig:
    """
    Build a board configuration from flags, prompting for missing values.

    Invalid combinations are reported and every value is asked again.
    """
    rows, columns, mines = args.rows, args.columns, args.mines
    while True:
        if rows is None:
            rows = prompt_int("How many rows?", input_fn)
        if columns is None:
            columns = prompt_int("How many columns?", input_fn)
        if mines is None:
            mines = prompt_int("How many mines?", input_fn)
        try:
            return BoardConfig(rows, columns, mines)
        except InvalidConfiguration as exc:
            print(f"Invalid board: {exc}")
            rows = columns = mines = None


def parse_move(text: str) -> Tuple[int, int]:
    """Parse ``"row col"`` (commas allowed) into a coordinate."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError("Enter a row and a column, e.g. '3 4'")
    return int(parts[0]), int(parts[1])


def ask_yes_no(message: str, input_fn: InputFn = input) -> bool:
    answer = input_fn(f"{message} [y/n] ").strip().lower()
    return answer in ("y", "yes")


# ============================================================================
# Commands
# ============================================================================

def play_session(game: Game, input_fn: InputFn = input, cheat: bool = False) -> None:
    """Play one session until it is won or lost."""
    if cheat:
        print_cheat_sheets(game.board)

    while game.is_playing:
        print(render_game(game))
        try:
            row, col = parse_move(input_fn("Reveal (row col): "))
            outcome = game.reveal(row, col)
        except (ValueError, OutOfBounds) as exc:
            print(exc)
            continue
        if not outcome.changed:
            print("That cell is already open.")

    if game.is_lost:
        game.loss_sweep()
        print(render_game(game))
        print("You found a mine! You lost!")
    else:
        print(render_game(game))
        print("You avoided all mines! You won!")


def play(args: argparse.Namespace, input_fn: InputFn = input) -> None:
    """Play sessions until the player declines another round."""
    config = prompt_config(args, input_fn)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = Game(config, rng=rng)

    while True:
        play_session(game, input_fn, cheat=args.cheat)
        if not ask_yes_no("Play again?", input_fn):
            break
        game.restart()


def print_cheat_sheets(board: Board) -> None:
    """Print mine locations followed by adjacency counts."""
    print(render_mines(board))
    print()
    print(render_counts(board))
    print()


def cheat(args: argparse.Namespace) -> None:
    """Generate a board and print its cheat sheets."""
    rng = random.Random(args.seed) if args.seed is not None else None
    board = Board(BoardConfig(args.rows, args.columns, args.mines), rng=rng)
    print_cheat_sheets(board)


# ============================================================================
# Argument Parsing
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minesweeper in the console")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument("--rows", type=int, default=None, help="Number of rows")
    play_parser.add_argument(
        "--columns", type=int, default=None, help="Number of columns"
    )
    play_parser.add_argument("--mines", type=int, default=None, help="Number of mines")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the mine layout"
    )
    play_parser.add_argument(
        "--cheat", action="store_true", help="Print mine and count sheets"
    )

    # Cheat command
    cheat_parser = subparsers.add_parser(
        "cheat", help="Print the cheat sheets of a generated board"
    )
    cheat_parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    cheat_parser.add_argument(
        "--columns", type=int, default=9, help="Number of columns"
    )
    cheat_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    cheat_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the mine layout"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "cheat":
            cheat(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")


if __name__ == "__main__":
    main()
