"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Add src (package) and the project root (main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minesweeper import Board, BoardConfig, Game


# ============================================================================
# Deterministic Randomness
# ============================================================================

class PinnedRandom:
    """
    Stand-in rng whose shuffle puts mines at chosen flat indices.

    The shuffled list must contain exactly as many True entries as
    indices were pinned.
    """

    def __init__(self, mine_indices: Iterable[int]) -> None:
        self.mine_indices = set(mine_indices)

    def shuffle(self, flat: List[bool]) -> None:
        assert sum(flat) == len(self.mine_indices)
        for index in range(len(flat)):
            flat[index] = index in self.mine_indices


@pytest.fixture
def pinned_random():
    """Factory for rngs that place mines at given flat indices."""
    return PinnedRandom


@pytest.fixture
def seeded_random() -> random.Random:
    return random.Random(1234)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its only mine in the middle."""
    return Board(BoardConfig(3, 3, 1), rng=PinnedRandom([4]))


@pytest.fixture
def corner_mine_layout() -> List[List[bool]]:
    """
    5x5 layout with a single mine in the bottom-right corner.

    Everything except the three cells around the mine has count 0.
    """
    layout = [[False] * 5 for _ in range(5)]
    layout[4][4] = True
    return layout


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game()


@pytest.fixture
def empty_game() -> Game:
    """5x5 game without mines for cascade testing."""
    return Game(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_game(corner_mine_layout: List[List[bool]]) -> Game:
    return Game.from_board(Board.from_layout(corner_mine_layout))


@pytest.fixture
def split_game() -> Game:
    """
    4x4 game whose mines wall off the right column.

        . . X .
        . . X .
        . . X .
        . . X .
    """
    layout = [[col == 2 for col in range(4)] for _ in range(4)]
    return Game.from_board(Board.from_layout(layout))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
