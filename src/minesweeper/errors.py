"""
Exceptions raised by the Minesweeper engine.

Both are caller input errors. Nothing in the engine retries.
"""
from typing import Tuple


class InvalidConfiguration(ValueError):
    """Rows, columns or mine count violate the board constraints."""


class OutOfBounds(IndexError):
    """
    A query or reveal addressed a cell outside the grid.

    Attributes:
        row: Requested row index.
        col: Requested column index.
        shape: (rows, columns) of the grid that was queried.
    """

    def __init__(self, row: int, col: int, shape: Tuple[int, int]) -> None:
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"Cell ({row}, {col}) is outside the {shape[0]}x{shape[1]} grid"
        )
