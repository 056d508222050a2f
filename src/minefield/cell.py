"""
Cell module for the minefield board.

Represents individual grid positions with their content (mine/count)
and whether they have been revealed.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

HIDDEN_OBSERVATION = -1
MINE_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        is_revealed: Whether the player has uncovered this cell.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    is_revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden and is now revealed, False if it
            was already revealed.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return not self.is_revealed

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if not self.is_revealed:
            return HIDDEN_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines

    def to_symbol(self, show_mines: bool = False) -> str:
        """Single-character text form used by the ASCII renderer."""
        if self.is_mine and (self.is_revealed or show_mines):
            return "*"
        if not self.is_revealed:
            return "#"
        if self.adjacent_mines == 0:
            return "."
        return str(self.adjacent_mines)
