"""
Minesweeper board engine.

Provides mine placement, flood-fill revealing, flag tracking and
win/lose evaluation, plus a Gymnasium environment around the board.
"""
from .cell import Cell, CellState, CellDisplay, CellView
from .board import (
    Board,
    BoardConfig,
    BoardStats,
    GameState,
    InvalidConfiguration,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellDisplay",
    "CellView",
    "Board",
    "BoardConfig",
    "BoardStats",
    "GameState",
    "InvalidConfiguration",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinesweeperEnv",
]
