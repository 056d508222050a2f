"""
Random player.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_player import BasePlayer


class RandomPlayer(BasePlayer):
    """Player that picks uniformly among the hidden cells."""

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random player.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            # Nothing hidden; the environment treats this as a wasted move
            return 0

        return int(self.rng.choice(valid_indices))
