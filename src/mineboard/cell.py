"""
Cell module for the Minesweeper board engine.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number), plus the
read-only view handed to presentation layers.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible player-facing states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class CellDisplay(Enum):
    """What a presentation layer should draw for a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED_MINE = auto()
    REVEALED_COUNT = auto()
    REVEALED_BLANK = auto()


# Observation codes for non-count cells
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9


@dataclass(frozen=True)
class CellView:
    """
    Display state of one cell.

    Attributes:
        display: Which kind of glyph to draw.
        count: Adjacent mine count, only set for REVEALED_COUNT.
    """

    display: CellDisplay
    count: Optional[int] = None


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed
            or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def view(self, reveal_all: bool = False) -> CellView:
        """
        Build the display state for this cell.

        Args:
            reveal_all: Show the underlying content of unrevealed cells,
                used for the final board once the game is over.

        Returns:
            CellView describing what to draw.
        """
        if not reveal_all and not self.is_revealed:
            if self.is_flagged:
                return CellView(CellDisplay.FLAGGED)
            return CellView(CellDisplay.HIDDEN)
        if self.is_mine:
            return CellView(CellDisplay.REVEALED_MINE)
        if self.adjacent_mines == 0:
            return CellView(CellDisplay.REVEALED_BLANK)
        return CellView(CellDisplay.REVEALED_COUNT, self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
