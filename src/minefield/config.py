"""
Game configuration for a minefield board.

A configuration fully determines a board: its dimensions and the flat
indices of its mines. Invalid configurations are rejected at construction.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


# ============================================================================
# Errors
# ============================================================================

class InvalidReason(Enum):
    """Why a configuration or seed was rejected."""

    MALFORMED_TOKEN = "malformed_token"
    MISSING_DIMENSIONS = "missing_dimensions"
    NON_POSITIVE_WIDTH = "non_positive_width"
    NON_POSITIVE_HEIGHT = "non_positive_height"
    MINE_OUT_OF_RANGE = "mine_out_of_range"
    DUPLICATE_MINE = "duplicate_mine"


class InvalidConfig(ValueError):
    """Raised when a board cannot be created from the given configuration."""

    def __init__(self, reason: InvalidReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


# ============================================================================
# Game Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Immutable configuration for one game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mines: Flat indices (row * width + col) of the mine cells.
    """

    width: int
    height: int
    mines: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Normalize mines to a tuple and validate."""
        object.__setattr__(self, "mines", tuple(self.mines))
        self._validate()

    def _validate(self) -> None:
        """Ensure dimensions are positive and mines are unique and in range."""
        if self.width <= 0:
            raise InvalidConfig(
                InvalidReason.NON_POSITIVE_WIDTH,
                f"Width must be positive, got {self.width}",
            )
        if self.height <= 0:
            raise InvalidConfig(
                InvalidReason.NON_POSITIVE_HEIGHT,
                f"Height must be positive, got {self.height}",
            )
        seen = set()
        for index in self.mines:
            if not 0 <= index < self.cell_count:
                raise InvalidConfig(
                    InvalidReason.MINE_OUT_OF_RANGE,
                    f"Mine index {index} outside 0..{self.cell_count - 1}",
                )
            if index in seen:
                raise InvalidConfig(
                    InvalidReason.DUPLICATE_MINE,
                    f"Mine index {index} appears more than once",
                )
            seen.add(index)

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[int]
    ) -> "GameConfig":
        """Build a config, dropping repeated mine indices (first one wins)."""
        return cls(width, height, tuple(dict.fromkeys(mines)))

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def num_mines(self) -> int:
        """Number of mines on the board."""
        return len(self.mines)

    @property
    def safe_cell_count(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.cell_count - self.num_mines

    def to_position(self, index: int) -> Tuple[int, int]:
        """Convert a flat index to (row, col)."""
        return index // self.width, index % self.width

    def to_index(self, row: int, col: int) -> int:
        """Convert (row, col) to a flat index."""
        return row * self.width + col
