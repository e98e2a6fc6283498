"""
Board module for Minesweeper.

Implements the board engine: mine placement, cached adjacency counts
and read-only cell queries. The board knows nothing about which cells
the player has revealed; session state lives in the game controller.
"""
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidConfiguration, OutOfBounds

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("rows", "columns", "num_mines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidConfiguration(f"{name} must be an integer")
        if self.rows < 1 or self.columns < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the grid."""
        return self.rows * self.columns

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper board engine.

    Holds the mine layout and the proximity count of every cell. Both
    matrices are fixed at construction; a new game needs a new Board.

    Args:
        config: Board dimensions and mine count.
        rng: Source of randomness with a ``shuffle(list)`` method.
            Defaults to a fresh ``random.Random()``. Pass a seeded
            ``random.Random`` for a reproducible layout.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or BoardConfig()
        self._mines = self._place_mines(rng or random.Random())
        self._counts = self._calculate_adjacent_mines(self._mines)
        logger.debug(
            "Created %dx%d board with %d mines",
            self.rows, self.columns, self.mine_count,
        )

    @classmethod
    def create(
        cls,
        rows: int,
        columns: int,
        num_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Build a board from raw dimensions, validating them first."""
        return cls(BoardConfig(rows, columns, num_mines), rng=rng)

    @classmethod
    def from_layout(cls, mines: Sequence[Sequence[bool]]) -> "Board":
        """
        Build a board from an explicit mine layout.

        Args:
            mines: Row-major matrix of booleans, True where a mine sits.

        Returns:
            Board whose layout is a copy of ``mines``.

        Raises:
            InvalidConfiguration: If the layout is empty, ragged, or has
                no safe cell.
        """
        try:
            rows = [list(row) for row in mines]
        except TypeError:
            rows = []
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidConfiguration("Mine layout must be a non-empty rectangle")
        layout = np.array(rows, dtype=bool)
        if layout.ndim != 2:
            raise InvalidConfiguration("Mine layout must be a non-empty rectangle")
        config = BoardConfig(
            layout.shape[0], layout.shape[1], int(layout.sum())
        )
        board = cls.__new__(cls)
        board.config = config
        board._mines = layout
        board._counts = cls._calculate_adjacent_mines(layout)
        return board

    # ========================================================================
    # Layout Generation (Low-level)
    # ========================================================================

    def _place_mines(self, rng: random.Random) -> np.ndarray:
        """Shuffle a flat list of mine flags and reshape it row-major."""
        flat = [True] * self.config.num_mines
        flat += [False] * self.config.safe_cells
        rng.shuffle(flat)
        return np.array(flat, dtype=bool).reshape(self.rows, self.columns)

    @staticmethod
    def _calculate_adjacent_mines(mines: np.ndarray) -> np.ndarray:
        """Count the mines among the eight neighbours of every cell."""
        pad = np.pad(mines.astype(np.int8), ((1, 1), (1, 1)), mode="constant")
        return (
            pad[:-2, :-2] + pad[:-2, 1:-1] + pad[:-2, 2:]
            + pad[1:-1, :-2] + pad[1:-1, 2:]
            + pad[2:, :-2] + pad[2:, 1:-1] + pad[2:, 2:]
        ).astype(np.int8)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is an integer cell within board bounds."""
        if not all(isinstance(value, (int, np.integer)) for value in (row, col)):
            return False
        return 0 <= row < self.rows and 0 <= col < self.columns

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for neighbors inside the grid.
        """
        self._check_bounds(row, col)
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.shape)

    # ========================================================================
    # Cell Queries
    # ========================================================================

    def is_mine(self, row: int, col: int) -> bool:
        """Return True if a mine sits at (row, col)."""
        self._check_bounds(row, col)
        return bool(self._mines[row, col])

    def adjacency_count(self, row: int, col: int) -> int:
        """
        Number of mines among the neighbours of (row, col).

        The cell itself is never counted. The value for a mine cell is
        not meaningful to gameplay.
        """
        self._check_bounds(row, col)
        return int(self._counts[row, col])

    def snapshot_mines(self) -> np.ndarray:
        """Copy of the mine layout."""
        return self._mines.copy()

    def snapshot_counts(self) -> np.ndarray:
        """Copy of the adjacency counts."""
        return self._counts.copy()

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def safe_cells(self) -> int:
        return self.config.safe_cells

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.columns)
