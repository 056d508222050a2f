"""
Player evaluation.

Plays a player over many boards and aggregates the outcomes.
"""
from typing import Callable, Dict, Optional

from minefield.config import GameConfig
from minefield.environment import MinefieldEnv

from .base_player import BasePlayer


class Evaluator:
    """
    Runs a player for a fixed number of games.

    Boards are either a fixed configuration replayed every game, or random
    boards of the given size drawn from a seeded RNG.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        width: int = 9,
        height: int = 9,
        num_mines: int = 10,
        num_episodes: int = 100,
        seed: Optional[int] = None,
    ) -> None:
        self.env = MinefieldEnv(
            config=config, width=width, height=height, num_mines=num_mines
        )
        self.num_episodes = num_episodes
        self.seed = seed

    def evaluate(
        self,
        player: BasePlayer,
        on_step: Optional[Callable[[MinefieldEnv], None]] = None,
    ) -> Dict[str, float]:
        """
        Evaluate a single player.

        Args:
            player: Player to evaluate.
            on_step: Called with the environment after every move.

        Returns:
            Dictionary with win_rate, loss_rate, avg_steps and avg_revealed.
        """
        wins = 0
        losses = 0
        total_steps = 0
        total_revealed = 0
        # Every game needs at most one move per cell
        max_steps = self.env.action_space.n

        for episode in range(self.num_episodes):
            episode_seed = None if self.seed is None else self.seed + episode
            observation, info = self.env.reset(seed=episode_seed)
            player.reset()

            for _ in range(max_steps):
                action = player.select_action(observation, self.env.get_action_mask())
                observation, _, terminated, truncated, info = self.env.step(action)
                total_steps += 1
                if on_step is not None:
                    on_step(self.env)
                if terminated or truncated:
                    break

            if info["game_state"] == "WON":
                wins += 1
            elif info["game_state"] == "LOST":
                losses += 1
            total_revealed += info["revealed"]

        return {
            "win_rate": wins / self.num_episodes,
            "loss_rate": losses / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }
