"""
Functional entry points for driving a board.

These wrap Board so callers that hold a reference to the current board
can treat each move as a state transition returning that board.
"""
from typing import Iterable

from .board import Board, GameStatus
from .config import GameConfig


def initialize(config: GameConfig) -> Board:
    """Create a fresh board with every cell hidden and status PLAYING."""
    return Board(config)


def initialize_from(width: int, height: int, mines: Iterable[int]) -> Board:
    """
    Create a board from raw values.

    Raises:
        InvalidConfig: Dimensions are not positive, or a mine index is
            out of range or repeated.
    """
    return Board(GameConfig(width, height, tuple(mines)))


def reveal(board: Board, row: int, col: int) -> Board:
    """Reveal (row, col) in place and return the board."""
    board.reveal(row, col)
    return board


def reveal_index(board: Board, index: int) -> Board:
    """Reveal the cell at flat index in place and return the board."""
    board.reveal_index(index)
    return board


def current_status(board: Board) -> GameStatus:
    return board.status
