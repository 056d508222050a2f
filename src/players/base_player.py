"""
Base player interface.

Defines the abstract interface that automated players implement to
drive a MinefieldEnv.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Player Interface
# ============================================================================

class BasePlayer(ABC):
    """
    Abstract base class for automated players.

    Players choose which cell to reveal from the current observation.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the player.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * width + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return action // self.board_width, action % self.board_width

    def position_to_action(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat action index."""
        return row * self.board_width + col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Hidden cells (value -1) are the valid actions."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Reset player state for a new game."""
