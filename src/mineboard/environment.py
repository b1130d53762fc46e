"""
Gymnasium environment wrapper for the Minesweeper board.

Lets agents and test harnesses drive a Board through the standard
reset/step interface.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig


# ============================================================================
# Rewards
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_FLAG = 0.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete space of size 2 * width * height.
        Action i < cells reveals cell (i // width, i % width);
        action i >= cells toggles the flag on cell i - cells.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action the board ignores
    """

    metadata = {"render_modes": []}

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
        """
        super().__init__()

        self.config = config or BoardConfig()
        self._cells = self.config.total_cells
        self.board: Optional[Board] = None

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        # Reveal actions followed by flag actions
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode on a freshly mined board.

        Args:
            seed: Random seed for reproducibility.
            options: May carry "layout", a list of (row, col) mine
                positions to use instead of random placement.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        layout = (options or {}).get("layout")
        self.board = Board(self.config, rng=self.np_random, layout=layout)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.board is None:
            raise RuntimeError("Call reset() before step()")

        self._steps += 1
        is_flag, row, col = self._decode_action(int(action))

        if is_flag:
            reward = self._apply_flag(row, col)
        else:
            reward = self._apply_reveal(row, col)

        observation = self.board.get_observation()
        terminated = self.board.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split a flat action into (is_flag, row, col)."""
        is_flag = action >= self._cells
        index = action - self._cells if is_flag else action
        return is_flag, index // self.config.width, index % self.config.width

    def _apply_reveal(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        if not self.board.reveal(row, col):
            return REWARD_INVALID
        if self.board.is_won:
            return REWARD_WIN
        if self.board.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _apply_flag(self, row: int, col: int) -> float:
        """Toggle a flag and score the outcome."""
        if not self.board.flag(row, col):
            return REWARD_INVALID
        return REWARD_FLAG

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        info = {
            "steps": self._steps,
            "game_state": self.board.game_state.name,
        }
        info.update(self.board.stats().to_dict())
        return info

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions the board would accept.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board is None or self.board.is_over:
            return mask
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self.board.get_cell(row, col)
                index = row * self.config.width + col
                if cell.is_hidden:
                    mask[index] = True
                if not cell.is_revealed:
                    mask[self._cells + index] = True
        return mask
