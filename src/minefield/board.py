"""
Board module for the minefield game.

Implements the game board built from a fixed configuration: mine
placement, adjacency counts, the breadth-first reveal flood, and
win/loss state.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .config import GameConfig


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Mines and adjacency counts are fixed when the board is created.
    Reveal state only ever goes from hidden to revealed, and the status
    leaves PLAYING at most once.
    """

    config: GameConfig
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _status: GameStatus = GameStatus.PLAYING
    _safe_revealed: int = 0

    def __post_init__(self) -> None:
        """Build the grid after dataclass creation."""
        self._init_grid()
        self._place_mines()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """Mark every configured mine and bump its neighbors' counts."""
        for index in self.config.mines:
            row, col = self.config.to_position(index)
            self._grid[row][col].is_mine = True
            for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                self._grid[neighbor_row][neighbor_col].adjacent_mines += 1

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    @staticmethod
    def _neighbor_coordinates(row: int, col: int) -> List[Tuple[int, int]]:
        """All eight surrounding coordinates, in bounds or not."""
        return [
            (row + delta_row, col + delta_col)
            for delta_row, delta_col in NEIGHBOR_OFFSETS
        ]

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        return [
            (neighbor_row, neighbor_col)
            for neighbor_row, neighbor_col in self._neighbor_coordinates(row, col)
            if self.is_valid_position(neighbor_row, neighbor_col)
        ]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> int:
        """
        Reveal a cell at the given position.

        A mine ends the game and only that cell is uncovered. A safe cell
        starts the reveal flood, after which the win condition is checked.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Number of cells newly revealed; 0 when the call was ignored.
        """
        if self._status != GameStatus.PLAYING:
            return 0
        if not self.is_valid_position(row, col):
            return 0

        cell = self._grid[row][col]
        if cell.is_mine:
            cell.reveal()
            self._status = GameStatus.LOST
            logger.info("Mine hit at (%d, %d); game lost", row, col)
            return 1

        revealed = self._flood_reveal(row, col)
        self._check_win_condition()
        return revealed

    def reveal_index(self, index: int) -> int:
        """Reveal by flat index; indices off the board are ignored."""
        if not 0 <= index < self.config.cell_count:
            return 0
        return self.reveal(*self.config.to_position(index))

    def _flood_reveal(self, row: int, col: int) -> int:
        """
        Breadth-first reveal starting at (row, col).

        Out-of-bounds, already revealed and mine coordinates are skipped
        when dequeued. Zero-count cells enqueue all eight neighbors.
        """
        queue: Deque[Tuple[int, int]] = deque([(row, col)])
        revealed = 0

        while queue:
            current_row, current_col = queue.popleft()
            if not self.is_valid_position(current_row, current_col):
                continue
            cell = self._grid[current_row][current_col]
            if cell.is_revealed or cell.is_mine:
                continue

            cell.reveal()
            revealed += 1

            if cell.adjacent_mines == 0:
                queue.extend(self._neighbor_coordinates(current_row, current_col))

        self._safe_revealed += revealed
        logger.debug("Reveal at (%d, %d) uncovered %d cells", row, col, revealed)
        return revealed

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._safe_revealed == self.config.safe_cell_count:
            self._status = GameStatus.WON
            logger.info("All %d safe cells revealed; game won", self._safe_revealed)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def revealed_safe_count(self) -> int:
        """Number of non-mine cells revealed so far."""
        return self._safe_revealed

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def _grid_view(self, attribute: str, dtype) -> np.ndarray:
        """Collect one cell attribute into a (height, width) array."""
        view = np.zeros((self.config.height, self.config.width), dtype=dtype)
        for row in range(self.config.height):
            for col in range(self.config.width):
                view[row, col] = getattr(self._grid[row][col], attribute)
        return view

    def is_mine_grid(self) -> np.ndarray:
        """Boolean mine map."""
        return self._grid_view("is_mine", bool)

    def adjacent_count_grid(self) -> np.ndarray:
        """Adjacent mine counts for every cell."""
        return self._grid_view("adjacent_mines", np.int8)

    def revealed_grid(self) -> np.ndarray:
        """Boolean reveal map."""
        return self._grid_view("is_revealed", bool)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that are still hidden.

        Returns:
            List of (row, col) positions that can be revealed.
        """
        actions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions

    def render(self, show_mines: bool = False) -> str:
        """
        Render the board as text.

        Hidden cells are '#', revealed zero cells '.', counts as digits
        and mines as '*'. With show_mines, hidden mines are drawn too.
        """
        return "\n".join(
            " ".join(cell.to_symbol(show_mines) for cell in row)
            for row in self._grid
        )
