"""
Game controller for Minesweeper.

Tracks which cells the player has revealed, runs the flood-fill reveal
and decides when a session is won or lost. The mine layout itself is
owned by a :class:`~minesweeper.board.Board`.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .board import Board, BoardConfig
from .errors import OutOfBounds

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a session."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# Observation values for cells that do not show a count.
HIDDEN = -1
REVEALED_MINE = 9


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a single reveal call.

    Attributes:
        exposed_mine: The revealed cell held a mine.
        triggered_win: This call revealed the last safe cell.
        revealed: Cells newly revealed by this call, clicked cell first.
    """

    exposed_mine: bool = False
    triggered_win: bool = False
    revealed: Tuple[Coordinate, ...] = ()

    @property
    def changed(self) -> bool:
        """True if any cell was revealed."""
        return bool(self.revealed)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One Minesweeper session over a randomly generated board.

    Args:
        config: Board configuration (default: 9x9 with 10 mines).
        rng: Randomness passed to every board this game creates.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._start(Board(config or BoardConfig(), rng=self._rng))

    @classmethod
    def from_board(cls, board: Board) -> "Game":
        """Start a session on an existing board."""
        game = cls.__new__(cls)
        game._rng = random.Random()
        game._start(board)
        return game

    def _start(self, board: Board) -> None:
        """Reset session state around a new board."""
        self._board = board
        self._revealed = np.zeros(board.shape, dtype=bool)
        self._revealed_count = 0
        self._status = GameStatus.IN_PROGRESS

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal the cell at (row, col).

        A zero-count cell also reveals its connected zero-count region and
        the numbered cells bordering it. Clicking an already revealed
        cell, or any cell once the game is over, does nothing.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Outcome describing what the call exposed.

        Raises:
            OutOfBounds: If (row, col) is outside the grid.
        """
        if not self._board.in_bounds(row, col):
            raise OutOfBounds(row, col, self._board.shape)
        if self._status != GameStatus.IN_PROGRESS or self._revealed[row, col]:
            return RevealOutcome()

        self._mark_revealed(row, col)

        if self._board.is_mine(row, col):
            self._status = GameStatus.LOST
            logger.info("Mine revealed at (%d, %d); game lost", row, col)
            return RevealOutcome(exposed_mine=True, revealed=((row, col),))

        revealed = [(row, col)]
        if self._board.adjacency_count(row, col) == 0:
            revealed.extend(self._flood_fill(row, col))

        return RevealOutcome(
            triggered_win=self._check_win_condition(),
            revealed=tuple(revealed),
        )

    def _mark_revealed(self, row: int, col: int) -> None:
        self._revealed[row, col] = True
        self._revealed_count += 1

    def _flood_fill(self, row: int, col: int) -> List[Coordinate]:
        """
        Reveal the region around a zero-count cell.

        Uses an explicit stack; the revealed matrix guards against
        visiting a cell twice.
        """
        opened = []
        stack = [(row, col)]
        while stack:
            current = stack.pop()
            for neighbor_row, neighbor_col in self._board.neighbors(*current):
                if self._revealed[neighbor_row, neighbor_col]:
                    continue
                if self._board.is_mine(neighbor_row, neighbor_col):
                    continue
                self._mark_revealed(neighbor_row, neighbor_col)
                opened.append((neighbor_row, neighbor_col))
                if self._board.adjacency_count(neighbor_row, neighbor_col) == 0:
                    stack.append((neighbor_row, neighbor_col))
        logger.debug("Flood fill from (%d, %d) opened %d cells", row, col, len(opened))
        return opened

    def _check_win_condition(self) -> bool:
        """Set WON once every safe cell is revealed."""
        if self._revealed_count != self._board.safe_cells:
            return False
        self._status = GameStatus.WON
        logger.info("All %d safe cells revealed; game won", self._revealed_count)
        return True

    def loss_sweep(self) -> Tuple[Coordinate, ...]:
        """
        Reveal every hidden cell after a loss.

        Leaves the status at LOST. Does nothing unless the game is lost.

        Returns:
            Cells revealed by the sweep, in row-major order.
        """
        if self._status != GameStatus.LOST:
            return ()
        swept = self.hidden_cells()
        for row, col in swept:
            self._mark_revealed(row, col)
        return tuple(swept)

    def restart(
        self,
        rows: Optional[int] = None,
        columns: Optional[int] = None,
        num_mines: Optional[int] = None,
    ) -> None:
        """
        Start a new session on a freshly generated board.

        Omitted arguments keep the current configuration. Invalid values
        raise before the current session is touched.
        """
        current = self._board.config
        config = BoardConfig(
            current.rows if rows is None else rows,
            current.columns if columns is None else columns,
            current.num_mines if num_mines is None else num_mines,
        )
        self._start(Board(config, rng=self._rng))
        logger.info(
            "Restarted with %dx%d board and %d mines",
            config.rows, config.columns, config.num_mines,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def config(self) -> BoardConfig:
        return self._board.config

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def revealed_count(self) -> int:
        """Number of cells revealed so far."""
        return self._revealed_count

    def is_revealed(self, row: int, col: int) -> bool:
        if not self._board.in_bounds(row, col):
            raise OutOfBounds(row, col, self._board.shape)
        return bool(self._revealed[row, col])

    def is_mine(self, row: int, col: int) -> bool:
        return self._board.is_mine(row, col)

    def adjacency_count(self, row: int, col: int) -> int:
        return self._board.adjacency_count(row, col)

    def hidden_cells(self) -> List[Coordinate]:
        """Cells not yet revealed, in row-major order."""
        return [
            (int(row), int(col)) for row, col in np.argwhere(~self._revealed)
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get the player's view of the board.

        Returns:
            2D int8 array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.full(self._board.shape, HIDDEN, dtype=np.int8)
        counts = self._board.snapshot_counts()
        mines = self._board.snapshot_mines()
        obs[self._revealed] = counts[self._revealed]
        obs[self._revealed & mines] = REVEALED_MINE
        return obs
