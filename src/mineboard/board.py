"""
Board module for the Minesweeper engine.

Implements the game board with mine placement, adjacency counting,
flood-fill revealing, flag tracking and win/lose evaluation.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellState, CellView

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when a board cannot be built from the given parameters."""


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        height: Number of rows.
        width: Number of columns.
        num_mines: Total mines to place.
    """

    height: int = 9
    width: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.height < 1 or self.width < 1:
            raise InvalidConfiguration(
                f"Board dimensions must be positive, got "
                f"{self.height}x{self.width}"
            )
        if self.num_mines < 1:
            raise InvalidConfiguration(
                f"Board needs at least one mine, got {self.num_mines}"
            )
        max_mines = self.height * self.width - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(
                f"Too many mines: {self.num_mines} (max {max_mines})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.height * self.width

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)


@dataclass
class BoardStats:
    """Aggregate counters shown alongside the grid."""

    mines_total: int = 0
    flags_placed: int = 0
    cells_revealed: int = 0
    safe_cells_total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "mines_total": self.mines_total,
            "flags_placed": self.flags_placed,
            "cells_revealed": self.cells_revealed,
            "safe_cells_total": self.safe_cells_total,
        }


def _is_index_pair(entry: Any) -> bool:
    """Check for a (row, col) pair of integers; floats and bools are refused."""
    if not isinstance(entry, (tuple, list)) or len(entry) != 2:
        return False
    return all(
        isinstance(value, (int, np.integer)) and not isinstance(value, bool)
        for value in entry
    )


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed at construction, either drawn from the random
    generator or taken from an explicit layout. All later mutation goes
    through reveal() and flag(); both are no-ops once the game is over.

    Attributes:
        config: Board dimensions and mine count.
        seed: Seed for a fresh generator when no rng is given.
        rng: Random generator used for mine placement.
        layout: Explicit (row, col) mine positions, bypassing the rng.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    layout: Optional[Sequence[Tuple[int, int]]] = field(
        default=None, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)

    def __post_init__(self) -> None:
        """Build the grid, place mines and compute counts."""
        self.config._validate()
        if self.rng is None:
            self.rng = np.random.default_rng(self.seed)
            source = f"seed={self.seed}"
        elif self.seed is not None:
            raise InvalidConfiguration("Pass either seed or rng, not both")
        else:
            source = "injected rng"
        self._init_grid()
        if self.layout is None:
            self._place_mines()
        else:
            self._place_layout(self.layout)
            source = "fixed layout"
        self._calculate_adjacent_mines()
        logger.debug(
            "Created %dx%d board with %d mines (%s)",
            self.config.height,
            self.config.width,
            self.config.num_mines,
            source,
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """
        Place mines one at a time, redrawing picks that hit a mine.

        Terminates because num_mines is below the cell count.
        """
        placed = 0
        while placed < self.config.num_mines:
            row = int(self.rng.integers(self.config.height))
            col = int(self.rng.integers(self.config.width))
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _place_layout(self, layout: Sequence[Tuple[int, int]]) -> None:
        """
        Place mines at fixed positions.

        Args:
            layout: Distinct in-bounds (row, col) positions, exactly
                num_mines of them.
        """
        positions = []
        for entry in layout:
            if not _is_index_pair(entry):
                raise InvalidConfiguration(
                    f"Mine position {entry!r} is not a (row, col) integer pair"
                )
            positions.append((int(entry[0]), int(entry[1])))
        if len(set(positions)) != len(positions):
            raise InvalidConfiguration("Mine layout contains duplicates")
        if len(positions) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Mine layout has {len(positions)} positions, "
                f"expected {self.config.num_mines}"
            )
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
            self._grid[row][col].is_mine = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get the up to 8 in-bounds positions around a cell.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, diagonals included.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        A mine ends the game as lost. A cell with no adjacent mines
        opens its whole zero-count region plus the numbered border.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the board changed, False if the call was ignored
            (game over, off the board, already revealed or flagged).
        """
        if not self._can_reveal(row, col):
            return False

        cell = self._grid[row][col]
        cell.reveal()

        if cell.is_mine:
            self._game_state = GameState.LOST
            logger.debug("Mine revealed at (%d, %d), game lost", row, col)
            return True

        if cell.adjacent_mines == 0:
            self._flood_fill(row, col)

        self.check_win()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].state == CellState.HIDDEN

    def _flood_fill(self, row: int, col: int) -> None:
        """Open every cell reachable from (row, col) through zero cells."""
        frontier = deque([(row, col)])
        while frontier:
            current_row, current_col = frontier.popleft()
            for neighbor_row, neighbor_col in self.neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                # Revealed and flagged cells are skipped
                if not neighbor.reveal():
                    continue
                if neighbor.adjacent_mines == 0:
                    frontier.append((neighbor_row, neighbor_col))

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        if not self._is_valid_position(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    def check_win(self) -> bool:
        """
        Check if all non-mine cells are revealed.

        Flags play no part. Sets the game state to WON when met.

        Returns:
            True if the game is won.
        """
        if self._game_state == GameState.WON:
            return True
        if self._game_state == GameState.LOST:
            return False

        revealed_safe = 0
        for row in self._grid:
            for cell in row:
                if cell.is_revealed and not cell.is_mine:
                    revealed_safe += 1

        if revealed_safe == self.config.safe_cells:
            self._game_state = GameState.WON
            logger.debug("All %d safe cells revealed, game won", revealed_safe)
            return True
        return False

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_over(self) -> bool:
        """Check if game has been won or lost."""
        return self._game_state != GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def view(
        self, row: int, col: int, reveal_all: bool = False
    ) -> Optional[CellView]:
        """Get display state at position, or None if invalid."""
        cell = self.get_cell(row, col)
        if cell is None:
            return None
        return cell.view(reveal_all)

    @property
    def mines_total(self) -> int:
        """Number of mines on the board."""
        return self.config.num_mines

    @property
    def safe_cells_total(self) -> int:
        """Number of cells without a mine."""
        return self.config.safe_cells

    @property
    def flags_placed(self) -> int:
        """Number of cells currently flagged."""
        return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def cells_revealed(self) -> int:
        """Number of revealed cells, mines included."""
        return sum(cell.is_revealed for row in self._grid for cell in row)

    def stats(self) -> BoardStats:
        """Snapshot of the aggregate counters."""
        return BoardStats(
            mines_total=self.mines_total,
            flags_placed=self.flags_placed,
            cells_revealed=self.cells_revealed,
            safe_cells_total=self.safe_cells_total,
        )

    def mine_positions(self) -> List[Tuple[int, int]]:
        """All mine positions in row-major order."""
        return [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can currently be revealed.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if self.is_over:
            return []
        actions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].state == CellState.HIDDEN:
                    actions.append((row, col))
        return actions
