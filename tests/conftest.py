"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, Cell, GameConfig, GameSession, initialize


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def empty_board() -> Board:
    """3x3 board with no mines."""
    return initialize(GameConfig(3, 3))


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle."""
    return initialize(GameConfig(3, 3, (4,)))


@pytest.fixture
def corner_mine_board() -> Board:
    """2x2 board with a mine at index 0."""
    return initialize(GameConfig(2, 2, (0,)))


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a wall of mines down the middle column.

        # # * # #
        # # * # #
        # # * # #
        # # * # #
        # # * # #
    """
    return initialize(GameConfig(5, 5, (2, 7, 12, 17, 22)))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session() -> GameSession:
    """Session with no game started."""
    return GameSession()
