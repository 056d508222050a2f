"""
Automated players for the minefield game.

- RandomPlayer: Baseline random selection
- Evaluator: Win/loss statistics over many games
"""
from .base_player import BasePlayer
from .random_player import RandomPlayer
from .evaluator import Evaluator

__all__ = [
    "BasePlayer",
    "RandomPlayer",
    "Evaluator",
]
