"""
Minefield game module.

Provides the seeded board engine, the seed codec, a session controller
and a Gymnasium environment.
"""
from .cell import Cell
from .config import GameConfig, InvalidConfig, InvalidReason
from .board import Board, GameStatus
from .engine import initialize, initialize_from, reveal, reveal_index, current_status
from .seed import SeedResult, parse_seed, encode_seed, generate_config
from .session import GameSession
from .environment import MinefieldEnv

__all__ = [
    "Cell",
    "GameConfig",
    "InvalidConfig",
    "InvalidReason",
    "Board",
    "GameStatus",
    "initialize",
    "initialize_from",
    "reveal",
    "reveal_index",
    "current_status",
    "SeedResult",
    "parse_seed",
    "encode_seed",
    "generate_config",
    "GameSession",
    "MinefieldEnv",
]
