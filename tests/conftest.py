"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mineboard import Board, BoardConfig, Cell, MinesweeperEnv


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded default 9x9 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its single mine in the bottom-right corner."""
    return Board(BoardConfig(3, 3, 1), layout=[(2, 2)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a column of mines splitting it in two.

        0 1 2 3 4
      0 . . * . .
      1 . . * . .
      2 . . * . .
      3 . . * . .
      4 . . * . .
    """
    return Board(
        BoardConfig(5, 5, 5),
        layout=[(row, 2) for row in range(5)],
    )


@pytest.fixture
def centre_mine_board() -> Board:
    """3x3 board with one mine in the centre; every safe cell shows 1."""
    return Board(BoardConfig(3, 3, 1), layout=[(1, 1)])


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


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """3x3 configuration with one mine."""
    return BoardConfig(3, 3, 1)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def corner_env() -> MinesweeperEnv:
    """Environment reset onto the corner-mine 3x3 layout."""
    env = MinesweeperEnv(BoardConfig(3, 3, 1))
    env.reset(seed=0, options={"layout": [(2, 2)]})
    return env
