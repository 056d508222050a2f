"""
Gymnasium environment wrapper for the minefield game.

Provides a standard RL interface so scripted or learning players can
drive the engine.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board
from .cell import HIDDEN_OBSERVATION, MINE_OBSERVATION
from .config import GameConfig
from .engine import initialize
from .seed import encode_seed, generate_config, parse_seed


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for the minefield game.

    Observation:
        2D array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for revealing an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        width: int = 9,
        height: int = 9,
        num_mines: int = 10,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Fixed board to replay every episode. When omitted a
                random board of the given size is drawn on each reset.
            width: Columns of random boards.
            height: Rows of random boards.
            num_mines: Mines on random boards.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.fixed_config = config
        if config is not None:
            width, height, num_mines = config.width, config.height, config.num_mines
        if not 0 <= num_mines <= width * height:
            raise ValueError(f"Mine count must be between 0 and {width * height}")
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=HIDDEN_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(height, width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(width * height)

        self.board: Optional[Board] = None
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode.

        Args:
            seed: RNG seed for random boards.
            options: ``{"seed": "<seed text>"}`` replays that exact board.
                Its dimensions must match the environment's.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = initialize(self._next_config(options))
        self._steps = 0
        return self.board.get_observation(), self._get_info()

    def _next_config(self, options: Optional[Dict[str, Any]]) -> GameConfig:
        """Pick the board for the next episode."""
        if options and "seed" in options:
            config = parse_seed(options["seed"]).unwrap()
            if (config.width, config.height) != (self.width, self.height):
                raise ValueError(
                    f"Seed board is {config.width}x{config.height}, "
                    f"environment is {self.width}x{self.height}"
                )
            return config
        if self.fixed_config is not None:
            return self.fixed_config
        return generate_config(self.width, self.height, self.num_mines, self.np_random)

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.board is None:
            raise RuntimeError("Call reset() before step()")

        self._steps += 1
        reward = self._calculate_reward(int(action))
        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _calculate_reward(self, action: int) -> float:
        """Apply the reveal and score its outcome."""
        if self.board.reveal_index(action) == 0:
            return -0.1
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_safe_count,
            "total_safe": self.board.config.safe_cell_count,
            "game_state": self.board.status.name,
            "valid_actions": len(self.board.get_valid_actions()),
            "seed": encode_seed(self.board.config),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.board is None:
            return None
        if self.render_mode == "ansi":
            return self.board.render(show_mines=self.board.is_lost)
        if self.render_mode == "human":
            print(self.board.render(show_mines=self.board.is_lost))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = cell still hidden.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            mask[row * self.width + col] = True
        return mask
